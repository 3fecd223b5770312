from __future__ import annotations

import sys
from pathlib import Path

import typer

from converterxmlcsv import __version__
from converterxmlcsv.cli.context import CLIContext, build_context
from converterxmlcsv.cli.selector import SelectorOption, choose_one, is_interactive_terminal
from converterxmlcsv.core.errors import ErrorCode
from converterxmlcsv.core.model import detect_kind
from converterxmlcsv.core.result import Err, Ok
from converterxmlcsv.output.console import Style
from converterxmlcsv.output.errors import convert_error_exit_code, print_convert_error
from converterxmlcsv.output.report import print_banner, print_summary
from converterxmlcsv.services.converter import ConvertOptions, convert_file
from converterxmlcsv.services.discovery import find_xml_files

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
    help="Convert commission (comissao_*.xml) and voucher (vales_*.xml) files to CSV.",
)

NO_FILES_MESSAGE = "No XML files were found in the folder."


def _kind_label(path: Path) -> str:
    match detect_kind(path):
        case Ok(kind):
            return str(kind)
        case Err(_):
            return "unsupported"


def _options_for(ctx: CLIContext, source: Path) -> ConvertOptions:
    return ConvertOptions(
        delimiter=ctx.config.csv.delimiter,
        encoding=ctx.config.csv.encoding,
        output_dir=ctx.config.output.resolve_for(source),
    )


def _convert_one(ctx: CLIContext, source: Path) -> int:
    """Convert source and print the outcome. Returns the exit code."""
    ctx.console.debug(f"Converting {source}")
    match convert_file(source, options=_options_for(ctx, source)):
        case Ok(summary):
            ctx.console.debug(f"Parsed {summary.count} employee(s) from {summary.kind} file")
            print_summary(summary, ctx.console)
            return int(ErrorCode.OK)
        case Err(error):
            print_convert_error(error, ctx.console)
            return convert_error_exit_code(error)


def _wait_for_enter(ctx: CLIContext) -> None:
    if not ctx.config.ui.pause_on_exit or not is_interactive_terminal():
        return
    ctx.console.print("Press Enter to exit...", Style.INFO)
    sys.stdin.readline()


def _list_files(ctx: CLIContext, directory: Path, files: list[Path]) -> None:
    if not files:
        ctx.console.print(NO_FILES_MESSAGE, Style.ERROR)
        return
    rows = [(path.name, _kind_label(path)) for path in files]
    ctx.console.table(f"XML files in {directory}", ["File", "Type"], rows)


def _convert_all(ctx: CLIContext, files: list[Path]) -> int:
    first_failure = int(ErrorCode.OK)
    for path in files:
        ctx.console.newline()
        ctx.console.print(path.name, Style.BOLD)
        code = _convert_one(ctx, path)
        if code and not first_failure:
            first_failure = code
    return first_failure


@app.command()
def convert(
    file: Path | None = typer.Argument(
        None,
        help="XML file to convert. When omitted, pick one from --dir.",
        show_default=False,
    ),
    directory: Path = typer.Option(
        Path("."),
        "--dir",
        "-d",
        help="Folder searched for *.xml files.",
        file_okay=False,
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Write CSV files here instead of next to the XML.",
    ),
    delimiter: str | None = typer.Option(None, "--delimiter", help="CSV delimiter (default ';')."),
    all_: bool = typer.Option(False, "--all", help="Convert every XML file in --dir."),
    list_: bool = typer.Option(False, "--list", help="List XML files in --dir and exit."),
    no_pause: bool = typer.Option(False, "--no-pause", help="Do not wait for Enter before exiting."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: ./converterxmlcsv.toml if present).",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostic output."),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Convert commission or voucher XML files to CSV."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    ctx = build_context(
        config_path=config,
        verbose=verbose,
        delimiter=delimiter,
        output_dir=output_dir,
        no_pause=no_pause,
    )

    if ctx.config.ui.banner and not list_:
        print_banner(ctx.console)

    if file is not None:
        code = _convert_one(ctx, file)
        if code:
            raise typer.Exit(code=code)
        return

    files = find_xml_files(directory)
    ctx.console.debug(f"Found {len(files)} XML file(s) in {directory.resolve()}")

    if list_:
        _list_files(ctx, directory, files)
        return

    if not files:
        ctx.console.print(NO_FILES_MESSAGE, Style.ERROR)
        return

    if all_:
        code = _convert_all(ctx, files)
        if code:
            raise typer.Exit(code=code)
        return

    options = [SelectorOption(value=path, label=path.name, detail=_kind_label(path)) for path in files]
    selection = choose_one(title="Choose the XML file to convert:", options=options)
    if selection.action == "cancel" or selection.value is None:
        ctx.console.error("Selection cancelled")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    code = _convert_one(ctx, selection.value)
    _wait_for_enter(ctx)
    if code:
        raise typer.Exit(code=code)


def main() -> None:
    app()
