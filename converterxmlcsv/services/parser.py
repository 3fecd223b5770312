"""XML parsing for commission and voucher exports.

Expected layout (the root element name is not checked):

    <Comissao>
      <Empresa>
        <Fantasia>...</Fantasia>
        <Razao>...</Razao>
        <CNPJ>...</CNPJ>
        <MesAno>...</MesAno>
        <Funcionario>
          <CPF>...</CPF>
          <Valor>...</Valor>
          <MetaPremio>...</MetaPremio>   (optional)
        </Funcionario>
        ...
      </Empresa>
    </Comissao>
"""

from __future__ import annotations

from pathlib import Path
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as SafeET

from converterxmlcsv.core.model import Company, Document, DocumentKind, Employee
from converterxmlcsv.core.result import Err, Ok, Result
from converterxmlcsv.services.errors import ParseError, ReadError

__all__ = ["parse_document"]

_COMPANY_FIELDS = ("Fantasia", "Razao", "CNPJ", "MesAno")


class _MissingElement(Exception):
    def __init__(self, parent: str, name: str) -> None:
        super().__init__(f"<{parent}> is missing required element <{name}>")
        self.parent = parent
        self.name = name


def _required_text(parent: Element, name: str) -> str:
    child = parent.find(name)
    if child is None:
        raise _MissingElement(parent.tag, name)
    return (child.text or "").strip()


def _optional_text(parent: Element, name: str) -> str | None:
    child = parent.find(name)
    if child is None:
        return None
    return (child.text or "").strip()


def _employee(node: Element) -> Employee:
    return Employee(
        cpf=_required_text(node, "CPF"),
        valor=_required_text(node, "Valor"),
        meta_premio=_optional_text(node, "MetaPremio"),
    )


def _build_document(root: Element, kind: DocumentKind) -> Document:
    """Raises _MissingElement if a required element is absent."""
    empresa = root.find("Empresa")
    if empresa is None:
        raise _MissingElement(root.tag, "Empresa")

    fantasia, razao, cnpj, mes_ano = (_required_text(empresa, f) for f in _COMPANY_FIELDS)
    employees = tuple(_employee(node) for node in empresa.findall("Funcionario"))

    return Document(
        kind=kind,
        company=Company(
            fantasia=fantasia,
            razao=razao,
            cnpj=cnpj,
            mes_ano=mes_ano,
            employees=employees,
        ),
    )


def parse_document(path: Path, kind: DocumentKind) -> Result[Document, ParseError | ReadError]:
    """Parse an export file into a Document."""
    try:
        tree = SafeET.parse(path)
    except FileNotFoundError:
        return Err(ReadError(path=path, reason="file not found"))
    except PermissionError:
        return Err(ReadError(path=path, reason="permission denied"))
    except OSError as e:
        return Err(ReadError(path=path, reason=e.strerror or str(e)))
    except SafeET.ParseError as e:
        return Err(ParseError(path=path, message=f"Malformed XML in {path.name}: {e}"))
    except DefusedXmlException as e:
        return Err(
            ParseError(
                path=path,
                message=f"Refusing to parse {path.name}: {e}",
                hint="entity declarations and external references are not allowed",
            )
        )

    try:
        return Ok(_build_document(tree.getroot(), kind))
    except _MissingElement as e:
        return Err(
            ParseError(
                path=path,
                message=f"Invalid {kind} file {path.name}: {e}",
                hint=f"every <{e.parent}> needs a <{e.name}> element",
            )
        )
