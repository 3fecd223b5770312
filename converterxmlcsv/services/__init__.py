"""Conversion services: discovery, parsing and CSV export."""

from .converter import ConversionSummary, ConvertOptions, convert, convert_file, csv_path_for
from .discovery import find_xml_files
from .errors import ConvertError, ParseError, ReadError, WriteError
from .parser import parse_document

__all__ = [
    "ConversionSummary",
    "ConvertError",
    "ConvertOptions",
    "ParseError",
    "ReadError",
    "WriteError",
    "convert",
    "convert_file",
    "csv_path_for",
    "find_xml_files",
    "parse_document",
]
