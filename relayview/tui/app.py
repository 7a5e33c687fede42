"""Main Textual application for the relay viewer.
"""

from typing import Optional

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.timer import Timer
from textual.widgets import Header, Static

from relayview.core.config import Settings
from relayview.core.models import FetchResult
from relayview.services.relay_fetcher import RelayFetcher
from relayview.tui.render import render_frame
from relayview.tui.spinner import Spinner
from relayview.tui.state import (
    Command,
    Event,
    FetchCompleted,
    KeyPress,
    TimerTick,
    UIState,
    update,
)
from relayview.utils.logger import get_logger

logger = get_logger(__name__)


class RelaysFetched(Message):
    """Posted once by the fetch worker with its result."""

    def __init__(self, result: FetchResult) -> None:
        self.result = result
        super().__init__()


class RelayViewApp(App):
    """Relay list viewer.

    Every timer tick, key press and fetch completion goes through
    ``apply_event``, which runs the reducer and redraws the frame.
    """

    TITLE = "Relay View"
    SUB_TITLE = "WireGuard relays"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
    }

    #frame {
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit_key('q')", "Quit", priority=True),
        Binding("ctrl+c", "quit_key('ctrl+c')", "Quit", show=False, priority=True),
        Binding("ctrl+q", "quit_key('ctrl+q')", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[RelayFetcher] = None,
    ):
        """Initialize the application."""
        super().__init__()
        self.app_settings = settings or Settings()
        self.fetcher = fetcher or RelayFetcher(
            url=self.app_settings.api_url,
            timeout=self.app_settings.request_timeout,
        )
        self.ui_state = UIState(
            spinner=Spinner.named(self.app_settings.spinner),
            table_height=self.app_settings.table_height,
        )
        self._spinner_timer: Optional[Timer] = None
        self.title = self.app_settings.app_name

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield Header()
        yield Static(id="frame")

    def on_mount(self) -> None:
        """Start the spinner and the one-shot fetch."""
        self._spinner_timer = self.set_interval(self.ui_state.spinner.interval, self._advance_spinner)
        self.fetch_relays()
        self._show_frame()

    @work(exclusive=True)
    async def fetch_relays(self) -> None:
        """Fetch the relay list off the render path."""
        result = await self.fetcher.fetch()
        self.post_message(RelaysFetched(result))

    def on_relays_fetched(self, message: RelaysFetched) -> None:
        self.apply_event(FetchCompleted(message.result))

    def on_key(self, event: events.Key) -> None:
        self.apply_event(KeyPress(event.key))

    def action_quit_key(self, key: str) -> None:
        """Quit bindings are routed through the state machine too."""
        self.apply_event(KeyPress(key))

    def _advance_spinner(self) -> None:
        self.apply_event(TimerTick())

    def apply_event(self, event: Event) -> None:
        """Run one event through the reducer and act on its command."""
        previous = self.ui_state.phase
        self.ui_state, command = update(self.ui_state, event)
        if self.ui_state.phase is not previous:
            logger.debug(f"Phase {previous.value} -> {self.ui_state.phase.value}")

        if command is Command.QUIT:
            self.exit(return_code=0)
            return
        if command is Command.STOP_SPINNER and self._spinner_timer is not None:
            self._spinner_timer.stop()
            self._spinner_timer = None

        self._show_frame()

    def _show_frame(self) -> None:
        self.query_one("#frame", Static).update(render_frame(self.ui_state, self.app_settings.style))


def run_tui(settings: Optional[Settings] = None) -> int:
    """Run the TUI application and return its exit code."""
    app = RelayViewApp(settings=settings)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    run_tui()
