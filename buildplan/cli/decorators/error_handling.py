"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from buildplan.core.errors import (
    BuildPlanError,
    ConfigError,
    ParseError,
    ProcessError,
    SchemaError,
)
from buildplan.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def _fail(event: str, error: Exception, **context: Any) -> None:
    logger.error(event, error=str(error), **context)
    typer.echo(f"Error: {error}", err=True)
    print_stack_trace_if_verbose()
    raise typer.Exit(1) from error


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator turning buildplan errors into a logged message and exit code 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.Abort, typer.BadParameter):
            raise
        except ParseError as e:
            _fail("parse_error", e, line_number=e.line_number)
        except SchemaError as e:
            _fail("schema_error", e, missing_key=e.missing_key)
        except ProcessError as e:
            _fail("process_error", e, exit_code=e.exit_code)
        except ConfigError as e:
            _fail("configuration_error", e)
        except BuildPlanError as e:
            _fail("buildplan_error", e)
        except FileNotFoundError as e:
            _fail("file_not_found", e)
        except Exception as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
