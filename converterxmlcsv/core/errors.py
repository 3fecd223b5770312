"""Error codes for CLI exit status.

Each failure category maps to a stable shell exit code:
- 0: Success
- 1: User error (bad arguments, unsupported file kind, cancelled selection)
- 2: Environment error (invalid config file)
- 3: Parse error (malformed XML, missing required elements)
- 5: I/O error (file not found, permission denied, write failure)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the converter CLI."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    PARSE_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
