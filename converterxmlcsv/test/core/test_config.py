"""Tests for converterxmlcsv.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from converterxmlcsv.core.config import (
    CONFIG_FILENAME,
    Config,
    CsvConfig,
    OutputConfig,
    UiConfig,
    discover_config,
    load_config,
    validate_delimiter,
)
from converterxmlcsv.core.result import Err, Ok


class TestDefaults:
    def test_config_defaults(self) -> None:
        config = Config()
        assert config.csv == CsvConfig(delimiter=";", encoding="utf-8")
        assert config.output.directory is None
        assert config.ui == UiConfig(pause_on_exit=True, banner=True)
        assert config.source is None

    def test_frozen(self) -> None:
        config = CsvConfig()
        with pytest.raises(AttributeError):
            config.delimiter = ","  # type: ignore[misc]


class TestFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_all_tables(self) -> None:
        config = Config.from_dict(
            {
                "csv": {"delimiter": ",", "encoding": "latin-1"},
                "output": {"directory": "exports"},
                "ui": {"pause_on_exit": False, "banner": False},
            }
        )
        assert config.csv.delimiter == ","
        assert config.csv.encoding == "latin-1"
        assert config.output.directory == Path("exports")
        assert config.ui.pause_on_exit is False
        assert config.ui.banner is False

    def test_tab_delimiter_is_kept(self) -> None:
        config = Config.from_dict({"csv": {"delimiter": "\t"}})
        assert config.csv.delimiter == "\t"

    def test_wrong_types_fall_back_to_defaults(self) -> None:
        config = Config.from_dict({"csv": "nope", "ui": {"banner": "yes"}})
        assert config.csv == CsvConfig()
        assert config.ui.banner is True

    def test_multi_char_delimiter_raises(self) -> None:
        with pytest.raises(ValueError, match="single character"):
            Config.from_dict({"csv": {"delimiter": ";;"}})

    def test_unknown_encoding_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown encoding"):
            Config.from_dict({"csv": {"encoding": "klingon-8"}})


class TestValidateDelimiter:
    @pytest.mark.parametrize("value", [";", ",", "|", "\t"])
    def test_accepts(self, value: str) -> None:
        assert validate_delimiter(value) == value

    @pytest.mark.parametrize("value", ["", "ab", '"', "\n", "\r"])
    def test_rejects(self, value: str) -> None:
        with pytest.raises(ValueError):
            validate_delimiter(value)


class TestOutputConfig:
    def test_none_means_next_to_source(self) -> None:
        assert OutputConfig().resolve_for(Path("/data/comissao.xml")) is None

    def test_relative_resolves_against_source_parent(self) -> None:
        out = OutputConfig(directory=Path("csv"))
        assert out.resolve_for(Path("/data/comissao.xml")) == Path("/data/csv")

    def test_absolute_is_kept(self, tmp_path: Path) -> None:
        out = OutputConfig(directory=tmp_path)
        assert out.resolve_for(Path("/data/comissao.xml")) == tmp_path


class TestOverrides:
    def test_no_overrides_is_identity(self) -> None:
        config = Config()
        assert config.with_overrides() == config

    def test_overrides_apply(self, tmp_path: Path) -> None:
        config = Config().with_overrides(delimiter=",", output_dir=tmp_path, no_pause=True)
        assert config.csv.delimiter == ","
        assert config.csv.encoding == "utf-8"
        assert config.output.directory == tmp_path.resolve()
        assert config.ui.pause_on_exit is False

    def test_relative_output_dir_resolves_against_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        config = Config().with_overrides(output_dir=Path("out"))

        assert config.output.directory == (tmp_path / "out").resolve()
        assert config.output.resolve_for(Path("/data/vales.xml")) == (tmp_path / "out").resolve()

    def test_invalid_delimiter_override_raises(self) -> None:
        with pytest.raises(ValueError):
            Config().with_overrides(delimiter="::")


class TestLoadConfig:
    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[csv]\ndelimiter = ","\n\n[ui]\nbanner = false\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.csv.delimiter == ","
        assert result.value.ui.banner is False
        assert result.value.source == path

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_syntax(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[csv\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML syntax" in result.error.message

    def test_invalid_value_has_hint(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[csv]\ndelimiter = "::"\n', encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert result.error.path == path
        assert result.error.hint is not None


class TestDiscoverConfig:
    def test_found(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("", encoding="utf-8")
        assert discover_config(tmp_path) == path

    def test_absent(self, tmp_path: Path) -> None:
        assert discover_config(tmp_path) is None
