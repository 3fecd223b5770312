"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from converterxmlcsv.core.config import ConfigError
from converterxmlcsv.core.errors import ErrorCode
from converterxmlcsv.core.model import UnsupportedKind
from converterxmlcsv.output.console import Style
from converterxmlcsv.services.errors import ConvertError, ParseError, ReadError, WriteError

if TYPE_CHECKING:
    from converterxmlcsv.output.console import ConsoleProtocol

__all__ = ["convert_error_exit_code", "print_config_error", "print_convert_error"]


def _hint(console: ConsoleProtocol, hint: str | None) -> None:
    if hint:
        console.print(f"hint: {hint}", Style.DIM)


def print_convert_error(error: ConvertError, console: ConsoleProtocol) -> None:
    """Print a conversion error with appropriate formatting."""
    match error:
        case UnsupportedKind():
            console.error(error.message)
            _hint(console, error.hint)
        case ParseError(message=message, hint=hint):
            console.error(message)
            _hint(console, hint)
        case ReadError() | WriteError():
            console.error(error.message)


def convert_error_exit_code(error: ConvertError) -> int:
    match error:
        case UnsupportedKind():
            return int(ErrorCode.USER_ERROR)
        case ParseError():
            return int(ErrorCode.PARSE_ERROR)
        case ReadError() | WriteError():
            return int(ErrorCode.IO_ERROR)


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    _hint(console, error.hint)
