"""
Error handling utilities for tmpl CLI
"""

import functools
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from tmpl_core.exceptions import (
    DestinationExistsError,
    InvalidDestinationError,
    InvalidSourceError,
    InvalidTemplateNameError,
    SourceNotFoundError,
    StorageIOError,
    StoreEmptyError,
    TemplateExistsError,
    TemplateNotFoundError,
    TmplError,
)

console = Console()


class CLIError(Exception):
    """Base exception for CLI errors"""

    def __init__(self, message: str, exit_code: int = 1):
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


# Exit code per store failure kind; anything unlisted exits with 1
EXIT_CODES = {
    InvalidTemplateNameError: 2,
    TemplateNotFoundError: 3,
    StoreEmptyError: 3,
    TemplateExistsError: 4,
    DestinationExistsError: 4,
    InvalidDestinationError: 4,
    SourceNotFoundError: 5,
    InvalidSourceError: 5,
    StorageIOError: 1,
}


def exit_code_for(exc: Exception) -> int:
    """
    Map an exception to a process exit code

    Args:
        exc: The exception raised by a command

    Returns:
        Non-zero exit code
    """
    if isinstance(exc, CLIError):
        return exc.exit_code

    for exc_type, code in EXIT_CODES.items():
        if isinstance(exc, exc_type):
            return code

    return 1


def format_exception(exc: Exception, context: Optional[str] = None) -> str:
    """
    Format exception with context

    Args:
        exc: The exception to format
        context: Optional context about where error occurred

    Returns:
        Formatted error message
    """
    lines = []

    if context:
        lines.append(f"Error in {context}:")

    if isinstance(exc, (TmplError, CLIError)):
        lines.append(str(exc))
    else:
        lines.append(f"{type(exc).__name__}: {str(exc)}")

    return "\n".join(lines)


def suggest_fix(exc: Exception) -> Optional[str]:
    """
    Suggest fixes for common errors

    Args:
        exc: The exception to analyze

    Returns:
        Suggestion string or None
    """
    if isinstance(exc, TemplateNotFoundError):
        return "Run 'tmpl list' to see the saved templates."

    if isinstance(exc, StoreEmptyError):
        return "Save a template first with 'tmpl save <name> <directory>'."

    if isinstance(exc, TemplateExistsError):
        return "Pick another name or remove the old one with 'tmpl delete'."

    if isinstance(exc, DestinationExistsError):
        return "Choose a directory that does not exist yet."

    if isinstance(exc, InvalidDestinationError):
        return "Create projects outside the template store."

    if isinstance(exc, InvalidTemplateNameError):
        return "Use a plain name without slashes or a leading dot."

    cause = exc.cause if isinstance(exc, StorageIOError) else exc
    error_msg = str(cause).lower()

    if "no such file or directory" in error_msg or "does not exist" in error_msg:
        return "Check that the path exists and is spelled correctly."

    if "permission denied" in error_msg:
        return "Check file permissions or run with appropriate privileges."

    if "no space left" in error_msg:
        return "Free some disk space and try again."

    return None


def show_error(exc: Exception, context: Optional[str] = None, verbose: bool = False):
    """
    Display error message to user

    Args:
        exc: The exception to display
        context: Optional context about where error occurred
        verbose: Show full traceback if True
    """
    if verbose:
        console.print_exception()
        return

    error_msg = format_exception(exc, context)
    console.print(Panel(escape(error_msg), title="Error", border_style="red"))

    suggestion = suggest_fix(exc)
    if suggestion:
        console.print(f"\n💡 [cyan]Suggestion:[/cyan] {suggestion}")


def handle_cli_error(exc: Exception, verbose: bool = False):
    """
    Handle CLI error and exit with appropriate code

    Args:
        exc: The exception to handle
        verbose: Show full traceback if True
    """
    show_error(exc, verbose=verbose)
    sys.exit(exit_code_for(exc))


def handle_store_errors(func):
    """Turn store failures raised by a command into an error panel and exit code."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (TmplError, CLIError) as exc:
            ctx = click.get_current_context(silent=True)
            verbose = bool(ctx and ctx.obj and ctx.obj.get("verbose"))
            handle_cli_error(exc, verbose=verbose)

    return wrapper
