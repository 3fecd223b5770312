from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from converterxmlcsv.core.model import UnsupportedKind


@dataclass(frozen=True, slots=True)
class ParseError:
    path: Path
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ReadError:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"Cannot read {self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class WriteError:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"Cannot write {self.path}: {self.reason}"


ConvertError = UnsupportedKind | ParseError | ReadError | WriteError
