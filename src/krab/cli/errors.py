"""
CLI Error Handling
==================

Exit codes and uniform exception handling for the krab command. Exit
statuses follow the BSD sysexits convention.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the krab command."""
    SUCCESS = 0
    USAGE = 64         # Command used incorrectly
    DATA_ERROR = 65    # Input had lexical errors
    NO_INPUT = 66      # Script missing or unreadable
    SOFTWARE = 70      # Unexpected internal error
    IO_ERROR = 74      # Error writing output or reading the terminal


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    from krab.errors import KrabError

    if isinstance(error, KrabError):
        # Already formatted as "[line N] Error: ..."
        click.echo(str(error), err=True)
        sys.exit(ExitCode.DATA_ERROR)

    elif isinstance(error, (FileNotFoundError, IsADirectoryError, PermissionError, UnicodeDecodeError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.NO_INPUT)

    elif isinstance(error, OSError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.IO_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.SOFTWARE)
