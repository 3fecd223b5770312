"""CSV export of parsed commission and voucher documents."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from pathlib import Path

from converterxmlcsv.core.config import DEFAULT_DELIMITER, DEFAULT_ENCODING
from converterxmlcsv.core.model import Document, DocumentKind, detect_kind, parse_amount
from converterxmlcsv.core.result import Err, Ok, Result
from converterxmlcsv.platform.files import atomic_write_text
from converterxmlcsv.services.errors import ConvertError, WriteError
from converterxmlcsv.services.parser import parse_document

__all__ = [
    "COMISSAO_HEADER",
    "VALES_HEADER",
    "ConversionSummary",
    "ConvertOptions",
    "convert",
    "convert_file",
    "csv_path_for",
    "render_csv",
]

_COMPANY_HEADER = ("Fantasia", "Razao", "CNPJ", "MesAno")
VALES_HEADER = (*_COMPANY_HEADER, "CPF", "Valor")
COMISSAO_HEADER = (*VALES_HEADER, "MetaPremio")


@dataclass(frozen=True, slots=True)
class ConvertOptions:
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    output_dir: Path | None = None


@dataclass(frozen=True, slots=True)
class ConversionSummary:
    """Outcome of a conversion.

    ``written`` is False when the document has no employees; in that case no
    CSV file is created and ``output`` is where it would have gone.
    """

    source: Path
    output: Path
    kind: DocumentKind
    count: int
    total_valor: float
    total_meta_premio: float
    written: bool


def csv_path_for(source: Path, output_dir: Path | None = None) -> Path:
    """Return the CSV path for an XML source (same stem, ``.csv`` extension)."""
    target = source.with_suffix(".csv")
    if output_dir is None:
        return target
    return output_dir / target.name


def _rows(document: Document) -> list[tuple[str, ...]]:
    company = document.company
    prefix = (company.fantasia, company.razao, company.cnpj, company.mes_ano)
    if document.kind.has_meta_premio:
        return [(*prefix, e.cpf, e.valor, e.meta_premio or "") for e in company.employees]
    return [(*prefix, e.cpf, e.valor) for e in company.employees]


def render_csv(document: Document, *, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Render the header and one row per employee."""
    header = COMISSAO_HEADER if document.kind.has_meta_premio else VALES_HEADER
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(_rows(document))
    return buffer.getvalue()


def convert(
    document: Document,
    source: Path,
    *,
    options: ConvertOptions | None = None,
) -> Result[ConversionSummary, WriteError]:
    """Write the CSV for a parsed document and report totals."""
    opts = options or ConvertOptions()
    employees = document.company.employees
    output = csv_path_for(source, opts.output_dir)

    total_valor = sum(parse_amount(e.valor) for e in employees)
    total_meta = 0.0
    if document.kind.has_meta_premio:
        total_meta = sum(parse_amount(e.meta_premio) for e in employees)

    written = False
    if employees:
        content = render_csv(document, delimiter=opts.delimiter)
        try:
            atomic_write_text(output, content, encoding=opts.encoding)
        except UnicodeEncodeError as e:
            return Err(WriteError(path=output, reason=f"cannot encode as {opts.encoding}: {e.reason}"))
        except OSError as e:
            return Err(WriteError(path=output, reason=e.strerror or str(e)))
        written = True

    return Ok(
        ConversionSummary(
            source=source,
            output=output,
            kind=document.kind,
            count=len(employees),
            total_valor=total_valor,
            total_meta_premio=total_meta,
            written=written,
        )
    )


def convert_file(
    path: Path,
    *,
    options: ConvertOptions | None = None,
) -> Result[ConversionSummary, ConvertError]:
    """Detect, parse and convert a single XML file."""
    kind_result = detect_kind(path)
    if isinstance(kind_result, Err):
        return kind_result

    parsed = parse_document(path, kind_result.value)
    if isinstance(parsed, Err):
        return parsed

    return convert(parsed.value, path, options=options)
