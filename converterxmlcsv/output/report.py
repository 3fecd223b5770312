"""Banner and conversion summary rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from converterxmlcsv.output.console import Style

if TYPE_CHECKING:
    from converterxmlcsv.output.console import ConsoleProtocol
    from converterxmlcsv.services.converter import ConversionSummary

__all__ = ["EMPTY_DOCUMENT_WARNING", "format_brl", "print_banner", "print_summary"]

APP_TITLE = "Welcome to the XML to CSV converter!"
AUTHOR = "Jorge Beserra <jorgebeserra@gmail.com>"
REPOSITORY_URL = "https://github.com/jorgebeserra/conversorxmlcsv"

EMPTY_DOCUMENT_WARNING = (
    "The XML file contains no employees. No data will be exported to CSV."
)


def format_brl(amount: float) -> str:
    return f"R$ {amount:.2f}"


def print_banner(console: ConsoleProtocol) -> None:
    console.header(APP_TITLE)
    console.print(f"Developed by {AUTHOR}", Style.WARNING)
    console.print(f"GitHub repository: {REPOSITORY_URL}", Style.WARNING)
    console.newline()


def print_summary(summary: ConversionSummary, console: ConsoleProtocol) -> None:
    if not summary.written:
        console.warning(EMPTY_DOCUMENT_WARNING)
        return

    console.success(f"Data exported to {summary.output} successfully!")
    console.success(f"Employees: {summary.count}.")
    if summary.kind.has_meta_premio:
        console.success(f"Total commission: {format_brl(summary.total_valor)}")
        console.success(f"Total goal bonus: {format_brl(summary.total_meta_premio)}")
    else:
        console.success(f"Total vouchers: {format_brl(summary.total_valor)}")
