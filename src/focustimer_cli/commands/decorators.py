"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer
from pydantic import ValidationError

from focustimer_cli.models.focus.errors import (
    ConfigurationError,
    InvalidTransitionError,
)
from focustimer_cli.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_INVALID_STATE,
    get_exit_code_name,
)
from focustimer_cli.utils.logger import get_logger
from focustimer_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Log, time and translate errors of a command function."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except typer.BadParameter as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                get_exit_code_name(ERROR_INVALID_ARGS),
                e.format_message(),
            )
            format_error(e.format_message())
            raise typer.Exit(code=ERROR_INVALID_ARGS) from e

        except (AppError, ConfigurationError, InvalidTransitionError, ValidationError) as e:
            elapsed = time.monotonic() - start
            if isinstance(e, AppError):
                code = e.exit_code
            elif isinstance(e, InvalidTransitionError):
                code = ERROR_INVALID_STATE
            else:
                code = ERROR_CONFIG
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                get_exit_code_name(code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
