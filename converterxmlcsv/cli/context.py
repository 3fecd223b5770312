from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from converterxmlcsv.core.config import Config, discover_config, load_config
from converterxmlcsv.core.errors import ErrorCode
from converterxmlcsv.core.result import Err
from converterxmlcsv.output.console import ConsoleProtocol, RichConsole
from converterxmlcsv.output.errors import print_config_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(
    *,
    config_path: Path | None = None,
    verbose: bool = False,
    delimiter: str | None = None,
    output_dir: Path | None = None,
    no_pause: bool = False,
    cwd: Path | None = None,
) -> CLIContext:
    """Load config (explicit path, else ``converterxmlcsv.toml`` in cwd) and apply overrides."""
    console = RichConsole(verbose=verbose)

    path = config_path or discover_config(cwd or Path.cwd())
    config = Config()
    if path is not None:
        result = load_config(path)
        if isinstance(result, Err):
            print_config_error(result.error, console)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = result.value
        console.debug(f"Using config {path}")

    try:
        config = config.with_overrides(
            delimiter=delimiter,
            output_dir=output_dir,
            no_pause=no_pause,
        )
    except ValueError as e:
        console.error(f"invalid --delimiter: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(config=config, console=console)
