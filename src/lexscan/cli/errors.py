"""
Unified CLI Error Handling
==========================

Provides consistent error messages and exit codes for the lexscan CLI.

Copyright (c) 2026 lexscan Developers & Contributors
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from lexscan.errors import ConfigError, LexScanError


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    IO_ERROR = 1         # Input could not be read or output written
    INVALID_ARGS = 2     # Invalid options or configuration
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    if isinstance(error, ConfigError):
        # Already formatted with "error:" and "hint:" lines
        click.echo(str(error), err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, LexScanError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.IO_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, OSError):
        # Output file could not be written
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.IO_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
