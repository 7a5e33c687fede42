"""relayview - Terminal viewer for the public VPN relay list.

Fetches the provider's relay list once and shows it as a scrollable
table in a Textual interface.
"""

__version__ = "1.0.0"
__author__ = "relayview contributors"

__all__ = ["__author__", "__version__"]
