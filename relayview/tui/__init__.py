"""relayview Terminal User Interface (TUI).

Built with Textual; the state machine in ``state`` is independent of it.
"""

from .app import RelayViewApp

__all__ = ["RelayViewApp"]
