"""
UI state machine for the relay viewer.

Everything here is pure: ``update`` takes the current ``UIState`` and one
event and returns the next state plus an optional command for the app to
carry out. The Textual app owns the only reference to the live state.

Phases only move forward::

    LOADING --FetchCompleted(success)--> READY
    LOADING --FetchCompleted(failure)--> FAILED

A quit key ends the program from any phase.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from relayview.core.models import FetchFailure, FetchResult, FetchSuccess, TableRow
from relayview.core.projection import project
from relayview.tui.spinner import Spinner

QUIT_KEYS = frozenset({"q", "ctrl+c", "ctrl+q"})


class Phase(str, Enum):
    """Top level UI phase."""

    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class Command(str, Enum):
    """Side effects requested by the reducer."""

    QUIT = "quit"
    STOP_SPINNER = "stop_spinner"


@dataclass(frozen=True)
class TimerTick:
    """Spinner timer fired."""


@dataclass(frozen=True)
class KeyPress:
    """A key was pressed; ``key`` uses Textual key names."""

    key: str


@dataclass(frozen=True)
class FetchCompleted:
    """The background fetch finished."""

    result: FetchResult


Event = Union[TimerTick, KeyPress, FetchCompleted]


@dataclass(frozen=True)
class TableState:
    """Rows plus cursor and scroll position of the relay table."""

    rows: tuple[TableRow, ...] = ()
    cursor: int = 0
    offset: int = 0
    height: int = 11

    @property
    def visible_rows(self) -> tuple[TableRow, ...]:
        return self.rows[self.offset:self.offset + self.height]

    @property
    def selected_row(self) -> Optional[TableRow]:
        return self.rows[self.cursor] if self.rows else None

    def move(self, delta: int) -> "TableState":
        """Move the cursor by ``delta`` rows, clamped to the table bounds."""
        return self.goto(self.cursor + delta)

    def goto(self, row: int) -> "TableState":
        """Put the cursor on ``row`` and scroll just enough to show it."""
        if not self.rows:
            return self
        cursor = max(0, min(row, len(self.rows) - 1))
        offset = self.offset
        if cursor < offset:
            offset = cursor
        elif cursor >= offset + self.height:
            offset = cursor - self.height + 1
        return replace(self, cursor=cursor, offset=offset)

    def navigate(self, key: str) -> "TableState":
        """Apply a navigation key; unknown keys leave the table unchanged."""
        half = max(1, self.height // 2)
        moves = {
            "up": -1,
            "k": -1,
            "down": 1,
            "j": 1,
            "pageup": -self.height,
            "b": -self.height,
            "pagedown": self.height,
            "f": self.height,
            "space": self.height,
            "u": -half,
            "ctrl+u": -half,
            "d": half,
            "ctrl+d": half,
        }
        if key in moves:
            return self.move(moves[key])
        if key in ("home", "g"):
            return self.goto(0)
        if key in ("end", "G", "shift+g"):
            return self.goto(len(self.rows) - 1)
        return self


@dataclass(frozen=True)
class UIState:
    """Complete state of the interface."""

    spinner: Spinner = field(default_factory=lambda: Spinner.named("moon"))
    phase: Phase = Phase.LOADING
    table: Optional[TableState] = None
    error: Optional[str] = None
    table_height: int = 11


def update(state: UIState, event: Event) -> tuple[UIState, Optional[Command]]:
    """Compute the state after ``event``."""
    if isinstance(event, KeyPress) and event.key in QUIT_KEYS:
        return state, Command.QUIT

    if state.phase is Phase.LOADING:
        if isinstance(event, TimerTick):
            return replace(state, spinner=state.spinner.advance()), None
        if isinstance(event, FetchCompleted):
            return _complete(state, event.result), Command.STOP_SPINNER
        return state, None

    if state.phase is Phase.READY and isinstance(event, KeyPress):
        return replace(state, table=state.table.navigate(event.key)), None

    return state, None


def _complete(state: UIState, result: FetchResult) -> UIState:
    if isinstance(result, FetchSuccess):
        rows = tuple(project(result.relays, result.locations))
        table = TableState(rows=rows, height=state.table_height)
        return replace(state, phase=Phase.READY, table=table)
    if isinstance(result, FetchFailure):
        return replace(state, phase=Phase.FAILED, error=result.error)
    raise TypeError(f"Unexpected fetch result: {result!r}")
