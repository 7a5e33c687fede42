"""
Frame rendering for the relay viewer.

``render_frame`` turns a ``UIState`` into a Rich renderable. It reads
nothing but its arguments, so colours come in through ``TableStyle``.
"""

from io import StringIO

from rich import box
from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from relayview.core.config import TableStyle
from relayview.tui.state import Phase, TableState, UIState

# (header, width) as shown in the table
COLUMNS = (
    ("Hostname", 20),
    ("Location key", 12),
    ("Active", 7),
    ("IPv4 Address", 15),
    ("Country", 15),
)

HELP_LINE = (
    "↑/k up • ↓/j down • pgup/b page up • pgdn/f page down • "
    "u/d half page • g/home top • G/end bottom • q quit"
)

LOADING_TEXT = "Fetching data..."


def render_table(table: TableState, style: TableStyle) -> Table:
    """Build the bordered Rich table for the visible window."""
    grid = Table(
        box=box.SQUARE,
        border_style=style.border_color,
        header_style=style.header,
        show_edge=True,
        expand=False,
    )
    for title, width in COLUMNS:
        grid.add_column(title, width=width, no_wrap=True, overflow="ellipsis")

    for index, row in enumerate(table.visible_rows, start=table.offset):
        cells = (Text(cell) for cell in row)
        grid.add_row(*cells, style=style.selected if index == table.cursor else None)
    return grid


def render_frame(state: UIState, style: TableStyle) -> RenderableType:
    """Full frame for the current phase."""
    if state.phase is Phase.LOADING:
        return Text(f"\n\n   {state.spinner.glyph} {LOADING_TEXT}")
    if state.phase is Phase.FAILED:
        return Text(f"Error: {state.error}", style="red")
    return Group(
        render_table(state.table, style),
        Text(f"  {HELP_LINE}", style="dim"),
    )


def frame_text(state: UIState, style: TableStyle, width: int = 120) -> str:
    """Render a frame to plain text."""
    console = Console(
        file=StringIO(),
        width=width,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
    )
    console.print(render_frame(state, style))
    return console.file.getvalue()
