"""
Command line entry point using Typer.

``relayview`` takes no arguments; behaviour is tuned through RELAYVIEW_*
environment variables.
"""

import sys

import typer

from relayview.cli.exit_codes import handle_cli_errors
from relayview.core.config import load_settings
from relayview.core.exceptions import TerminalError
from relayview.tui.app import run_tui
from relayview.utils.logger import get_logger, setup_logging

app = typer.Typer(
    name="relayview",
    help="Browse the VPN relay list in an interactive table.",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)

logger = get_logger(__name__)


def ensure_terminal() -> None:
    """Raise TerminalError unless stdin and stdout are attached to a terminal."""
    for name, stream in (("stdin", sys.stdin), ("stdout", sys.stdout)):
        if stream is None or not stream.isatty():
            raise TerminalError(f"{name} is not a terminal")


@app.command()
def main() -> None:
    """Browse the VPN relay list in an interactive table."""
    with handle_cli_errors("relayview"):
        settings = load_settings()
        setup_logging(
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            tui=True,
            debug=settings.debug,
        )
        ensure_terminal()
        logger.debug(f"Starting interface for {settings.api_url}")
        return_code = run_tui(settings)

    raise typer.Exit(return_code)


def run() -> None:
    """Console script entry point."""
    app()
