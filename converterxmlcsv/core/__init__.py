"""Core domain types and logic."""

from .config import Config, ConfigError, load_config
from .errors import ErrorCode
from .model import Company, Document, DocumentKind, Employee, UnsupportedKind, detect_kind
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    # errors
    "ErrorCode",
    # model
    "Company",
    "Document",
    "DocumentKind",
    "Employee",
    "UnsupportedKind",
    "detect_kind",
    # result
    "Err",
    "Ok",
    "Result",
]
