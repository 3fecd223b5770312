from __future__ import annotations

from pathlib import Path

__all__ = ["find_xml_files"]


def find_xml_files(directory: Path) -> list[Path]:
    """Return the ``*.xml`` files directly inside directory, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted((p for p in directory.glob("*.xml") if p.is_file()), key=lambda p: p.name)
