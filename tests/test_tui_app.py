"""
TUI application tests using the Textual pilot.
"""

import asyncio

import pytest
from textual.widgets import Static

from relayview.core.models import FetchResult
from relayview.tui.app import RelayViewApp
from relayview.tui.render import frame_text
from relayview.tui.state import KeyPress, Phase

from tests.utils import json_transport, refusing_transport


class StalledFetcher:
    """Fetcher whose request never completes."""

    def __init__(self):
        self.started = asyncio.Event()

    async def fetch(self) -> FetchResult:
        self.started.set()
        await asyncio.Event().wait()


async def _settle(app: RelayViewApp, pilot) -> None:
    await app.workers.wait_for_complete()
    await pilot.pause()


def _frame(app: RelayViewApp) -> str:
    return frame_text(app.ui_state, app.app_settings.style)


class TestRelayViewApp:
    """Test the app end to end with a mocked network."""

    @pytest.mark.asyncio
    async def test_starts_loading(self, test_settings):
        """Test that the first frame is the spinner."""
        app = RelayViewApp(settings=test_settings, fetcher=StalledFetcher())

        async with app.run_test() as pilot:
            await pilot.pause()

            assert app.ui_state.phase is Phase.LOADING
            assert "Fetching data..." in _frame(app)
            assert app.query_one("#frame", Static) is not None

    @pytest.mark.asyncio
    async def test_single_relay_table(self, test_settings, fetcher_for, scenario_payload):
        """Test a successful fetch ends in a one-row table."""
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(json_transport(scenario_payload)))

        async with app.run_test() as pilot:
            await _settle(app, pilot)

            assert app.ui_state.phase is Phase.READY
            assert [list(row) for row in app.ui_state.table.rows] == [
                ["se1-wg", "se", "true", "1.2.3.4", "Sweden"]
            ]

    @pytest.mark.asyncio
    async def test_empty_relay_list(self, test_settings, fetcher_for):
        """Test an empty relay list shows only the header."""
        payload = {"locations": {}, "wireguard": {"relays": []}}
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(json_transport(payload)))

        async with app.run_test() as pilot:
            await _settle(app, pilot)

            assert app.ui_state.phase is Phase.READY
            assert app.ui_state.table.rows == ()
            assert "Hostname" in _frame(app)

    @pytest.mark.asyncio
    async def test_connection_refused(self, test_settings, fetcher_for):
        """Test a refused connection ends in the error phase."""
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(refusing_transport()))

        async with app.run_test() as pilot:
            await _settle(app, pilot)

            assert app.ui_state.phase is Phase.FAILED
            assert app.ui_state.error
            assert app.ui_state.table is None
            assert "Hostname" not in _frame(app)

    @pytest.mark.asyncio
    async def test_malformed_json(self, test_settings, fetcher_for):
        """Test a malformed body ends in a decode error."""
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(json_transport(b"{nope")))

        async with app.run_test() as pilot:
            await _settle(app, pilot)

            assert app.ui_state.phase is Phase.FAILED
            assert "Malformed JSON" in app.ui_state.error

    @pytest.mark.asyncio
    async def test_quit_while_loading(self, test_settings):
        """Test quitting before the fetch resolves exits cleanly."""
        fetcher = StalledFetcher()
        app = RelayViewApp(settings=test_settings, fetcher=fetcher)

        async with app.run_test() as pilot:
            await fetcher.started.wait()
            assert app.ui_state.phase is Phase.LOADING
            await pilot.press("q")

        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_navigation_keys(self, test_settings, fetcher_for, large_payload):
        """Test navigation keys move the table cursor."""
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(json_transport(large_payload)))

        async with app.run_test() as pilot:
            await _settle(app, pilot)
            assert len(app.ui_state.table.rows) == 30

            await pilot.press("down", "down", "j")
            await pilot.pause()
            assert app.ui_state.table.cursor == 3

            await pilot.press("up")
            await pilot.pause()
            assert app.ui_state.table.cursor == 2

            await pilot.press("end")
            await pilot.pause()
            assert app.ui_state.table.cursor == 29
            assert app.ui_state.table.selected_row.country == ""

            await pilot.press("home")
            await pilot.pause()
            assert app.ui_state.table.cursor == 0
            assert app.ui_state.phase is Phase.READY

    @pytest.mark.asyncio
    async def test_spinner_stops_after_fetch(self, test_settings, fetcher_for, scenario_payload):
        """Test the spinner timer is stopped once the table is shown."""
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(json_transport(scenario_payload)))

        async with app.run_test() as pilot:
            await _settle(app, pilot)

            assert app._spinner_timer is None

    @pytest.mark.asyncio
    async def test_quit_from_table(self, test_settings, fetcher_for, scenario_payload):
        """Test quitting from the table view."""
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(json_transport(scenario_payload)))

        async with app.run_test() as pilot:
            await _settle(app, pilot)
            await pilot.press("q")

        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_bracketed_hostname(self, test_settings, fetcher_for, scenario_payload):
        """Test relay text with markup-like brackets is shown literally."""
        scenario_payload["wireguard"]["relays"][0]["hostname"] = "x[/]"
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(json_transport(scenario_payload)))

        async with app.run_test() as pilot:
            await _settle(app, pilot)

            assert app.ui_state.phase is Phase.READY
            assert app.ui_state.table.rows[0].hostname == "x[/]"
            assert "x[/]" in _frame(app)
            assert app.is_running

    @pytest.mark.asyncio
    async def test_command_palette_key_ignored_while_loading(self, test_settings):
        """Test ctrl+p neither opens a screen nor changes the phase."""
        app = RelayViewApp(settings=test_settings, fetcher=StalledFetcher())

        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen

            await pilot.press("ctrl+p")
            await pilot.pause()

            assert app.screen is screen
            assert app.ui_state.phase is Phase.LOADING
            assert app.ui_state.table is None

    @pytest.mark.asyncio
    async def test_command_palette_key_ignored_in_table(self, test_settings, fetcher_for, large_payload):
        """Test ctrl+p leaves the table state untouched."""
        app = RelayViewApp(settings=test_settings, fetcher=fetcher_for(json_transport(large_payload)))

        async with app.run_test() as pilot:
            await _settle(app, pilot)
            screen, state = app.screen, app.ui_state

            await pilot.press("ctrl+p")
            await pilot.pause()

            assert app.screen is screen
            assert app.ui_state == state

    @pytest.mark.asyncio
    async def test_ctrl_q_goes_through_reducer(self, test_settings, mocker):
        """Test Textual's quit key is handled like the other quit keys."""
        app = RelayViewApp(settings=test_settings, fetcher=StalledFetcher())
        apply_event = mocker.spy(app, "apply_event")

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+q")

        apply_event.assert_any_call(KeyPress("ctrl+q"))
        assert app.return_code == 0
