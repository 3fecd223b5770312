"""Typed configuration loading.

The converter runs with built-in defaults. An optional ``converterxmlcsv.toml``
overrides them:

    [csv]
    delimiter = ";"
    encoding = "utf-8"

    [output]
    directory = "exports"

    [ui]
    pause_on_exit = true
    banner = true
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_raw_str, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_DELIMITER",
    "DEFAULT_ENCODING",
    "Config",
    "ConfigError",
    "discover_config",
    "CsvConfig",
    "OutputConfig",
    "UiConfig",
    "load_config",
    "validate_delimiter",
]

CONFIG_FILENAME = "converterxmlcsv.toml"
DEFAULT_DELIMITER = ";"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


def validate_delimiter(value: str) -> str:
    """Return value if it is usable as a CSV delimiter, else raise ValueError."""
    if len(value) != 1:
        raise ValueError(f"delimiter must be a single character, got {value!r}")
    if value in {'"', "\r", "\n"}:
        raise ValueError(f"delimiter cannot be {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class CsvConfig:
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Where CSV files are written.

    ``directory`` None means next to the source XML. A relative directory is
    resolved against the source file's parent.
    """

    directory: Path | None = None

    def resolve_for(self, source: Path) -> Path | None:
        if self.directory is None:
            return None
        if self.directory.is_absolute():
            return self.directory
        return source.parent / self.directory


@dataclass(frozen=True, slots=True)
class UiConfig:
    pause_on_exit: bool = True
    banner: bool = True


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    csv: CsvConfig = field(default_factory=CsvConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, source: Path | None = None) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a value is present but unusable.
        """
        csv_table: StrDict = get_table(data, "csv") or {}
        output: StrDict = get_table(data, "output") or {}
        ui: StrDict = get_table(data, "ui") or {}

        delimiter = validate_delimiter(get_raw_str(csv_table, "delimiter") or DEFAULT_DELIMITER)
        encoding = get_str(csv_table, "encoding") or DEFAULT_ENCODING
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {encoding}") from e

        directory = get_str(output, "directory")
        pause = get_bool(ui, "pause_on_exit")
        banner = get_bool(ui, "banner")

        return cls(
            csv=CsvConfig(delimiter=delimiter, encoding=encoding),
            output=OutputConfig(directory=Path(directory).expanduser() if directory else None),
            ui=UiConfig(
                pause_on_exit=True if pause is None else pause,
                banner=True if banner is None else banner,
            ),
            source=source,
        )

    def with_overrides(
        self,
        *,
        delimiter: str | None = None,
        output_dir: Path | None = None,
        no_pause: bool = False,
    ) -> Config:
        """Apply command-line overrides on top of the loaded config.

        A relative ``output_dir`` is resolved against the working directory,
        unlike the ``[output] directory`` key, which is relative to each source.
        """
        config = self
        if delimiter is not None:
            config = replace(config, csv=replace(config.csv, delimiter=validate_delimiter(delimiter)))
        if output_dir is not None:
            config = replace(config, output=OutputConfig(directory=output_dir.expanduser().resolve()))
        if no_pause:
            config = replace(config, ui=replace(config.ui, pause_on_exit=False))
        return config


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value, source=path))
    except ValueError as e:
        return Err(
            ConfigError(
                f"Invalid config: {e}",
                path=path,
                hint="see [csv], [output] and [ui] tables",
            )
        )


def discover_config(directory: Path) -> Path | None:
    """Return the default config path in directory, if present."""
    candidate = directory / CONFIG_FILENAME
    return candidate if candidate.is_file() else None
