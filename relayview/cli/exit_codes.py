"""Exit codes for the relayview command.

Maps startup failures to process exit codes and prints them to stderr
before the process ends.
"""

from contextlib import contextmanager
from enum import IntEnum

import typer
from rich.console import Console
from rich.markup import escape

from relayview.core.exceptions import RelayViewError

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Exit codes for the relayview command."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    TERMINAL_ERROR = 3
    CONFIG_ERROR = 33

    # Special exit codes
    KEYBOARD_INTERRUPT = 130  # Standard Ctrl+C


class ExitCodeManager:
    """Turns exceptions into exit codes and messages."""

    def __init__(self):
        self._exit_code_descriptions = {
            ExitCode.SUCCESS: "Operation completed successfully",
            ExitCode.GENERAL_ERROR: "General error occurred",
            ExitCode.TERMINAL_ERROR: "Terminal could not be initialized",
            ExitCode.CONFIG_ERROR: "Configuration error",
            ExitCode.KEYBOARD_INTERRUPT: "Operation cancelled by user",
        }

        self._suggestions = {
            ExitCode.TERMINAL_ERROR: "Run relayview from an interactive terminal",
            ExitCode.CONFIG_ERROR: "Check the RELAYVIEW_* environment variables",
        }

    def get_description(self, code: ExitCode) -> str:
        """Get human-readable description for exit code."""
        return self._exit_code_descriptions.get(code, f"Unknown error (code {code})")

    def get_suggestion(self, code: ExitCode) -> str:
        """Get suggestion for resolving the error."""
        return self._suggestions.get(code, "")

    def exit_with_code(self, code: ExitCode, message: str = "", suggestion: str = "") -> None:
        """Exit the application with the specified code and message."""
        if code != ExitCode.SUCCESS:
            console.print(f"[red]✗ {escape(message or self.get_description(code))}[/red]")

            suggestion = suggestion or self.get_suggestion(code)
            if suggestion:
                console.print(f"[yellow]{suggestion}[/yellow]")

        raise typer.Exit(code.value)

    def handle_exception(self, exception: BaseException) -> ExitCode:
        """Map exceptions to appropriate exit codes."""
        if isinstance(exception, KeyboardInterrupt):
            return ExitCode.KEYBOARD_INTERRUPT

        if isinstance(exception, RelayViewError):
            error_mapping = {
                "CONFIG_ERROR": ExitCode.CONFIG_ERROR,
                "TERMINAL_ERROR": ExitCode.TERMINAL_ERROR,
            }
            return error_mapping.get(exception.error_code, ExitCode.GENERAL_ERROR)

        return ExitCode.GENERAL_ERROR


# Global exit code manager instance
exit_manager = ExitCodeManager()


@contextmanager
def handle_cli_errors(operation: str = "Operation"):
    """Context manager for handling CLI errors with proper exit codes."""
    try:
        yield
    except KeyboardInterrupt:
        exit_manager.exit_with_code(
            ExitCode.KEYBOARD_INTERRUPT,
            f"{operation} cancelled by user"
        )
    except Exception as e:
        code = exit_manager.handle_exception(e)
        exit_manager.exit_with_code(code, f"{operation} failed: {e}")
