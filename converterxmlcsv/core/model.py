"""Domain types for commission and voucher exports."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "Company",
    "Document",
    "DocumentKind",
    "Employee",
    "UnsupportedKind",
    "detect_kind",
    "parse_amount",
]

_AMOUNT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class DocumentKind(Enum):
    """Export type, taken from the file name prefix."""

    COMISSAO = "comissao"
    VALES = "vales"

    def __str__(self) -> str:
        return self.value

    @property
    def has_meta_premio(self) -> bool:
        return self is DocumentKind.COMISSAO


@dataclass(frozen=True, slots=True)
class UnsupportedKind:
    path: Path
    prefix: str

    @property
    def message(self) -> str:
        return f"Unsupported file type: {self.path.name}"

    @property
    def hint(self) -> str:
        kinds = ", ".join(f"{k.value}_*.xml" for k in DocumentKind)
        return f"file name must start with one of: {kinds}"


@dataclass(frozen=True, slots=True)
class Employee:
    cpf: str
    valor: str
    meta_premio: str | None = None


@dataclass(frozen=True, slots=True)
class Company:
    fantasia: str
    razao: str
    cnpj: str
    mes_ano: str
    employees: tuple[Employee, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    kind: DocumentKind
    company: Company


def detect_kind(path: Path) -> Result[DocumentKind, UnsupportedKind]:
    """Detect the export type from the stem prefix before the first ``_``.

    ``comissao_2024-01.xml`` and ``comissao.xml`` are commission files;
    ``comissao2024.xml`` is not.
    """
    prefix = path.stem.split("_", 1)[0]
    for kind in DocumentKind:
        if prefix == kind.value:
            return Ok(kind)
    return Err(UnsupportedKind(path=path, prefix=prefix))


def parse_amount(text: str | None) -> float:
    """Parse a decimal amount; missing or invalid values count as zero.

    Only plain ASCII decimal notation is accepted (optional sign, digits,
    one dot, exponent, ``inf``/``nan``), so ``1_000`` and non-ASCII digits
    count as zero.
    """
    if not text:
        return 0.0
    candidate = text.strip()
    if _AMOUNT.fullmatch(candidate) is None:
        return 0.0
    return float(candidate)
