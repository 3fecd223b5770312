"""Arrow-key file selector with a numbered-prompt fallback."""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

import typer

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SelectorOption(Generic[T]):
    value: T
    label: str
    detail: str | None = None


@dataclass(frozen=True, slots=True)
class SelectorResult(Generic[T]):
    action: Literal["select", "cancel"]
    value: T | None
    index: int


def is_interactive_terminal() -> bool:
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _color_enabled() -> bool:
    if not is_interactive_terminal():
        return False
    if os.getenv("NO_COLOR") is not None:
        return False
    return os.getenv("TERM", "").lower() != "dumb"


def _paint(text: str, *codes: str) -> str:
    if not _color_enabled() or not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _clear() -> None:
    sys.stdout.write("\x1b[2J\x1b[H")


def _read_key() -> str:
    if os.name == "nt":
        import msvcrt

        ch = msvcrt.getwch()
        if ch in ("\r", "\n"):
            return "enter"
        if ch in ("q", "Q", "\x1b", "\x03"):
            return "cancel"
        if ch in ("\x00", "\xe0"):
            ch2 = msvcrt.getwch()
            if ch2 == "H":
                return "up"
            if ch2 == "P":
                return "down"
        return "other"

    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch in ("\r", "\n"):
            return "enter"
        if ch in ("q", "Q", "\x03"):
            return "cancel"
        if ch == "\x1b":
            c2 = sys.stdin.read(1)
            if c2 == "[":
                c3 = sys.stdin.read(1)
                if c3 == "A":
                    return "up"
                if c3 == "B":
                    return "down"
            return "cancel"
        return "other"
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def _pad(text: str, width: int) -> str:
    return _truncate(text, width).ljust(width)


def _cols() -> int:
    return max(60, min(120, shutil.get_terminal_size((100, 30)).columns))


def _line(widths: list[int]) -> str:
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _style_selected(text: str) -> str:
    return _paint(text, "1", "30", "46")


def _render(*, title: str, options: list[SelectorOption[object]], index: int) -> None:
    _clear()
    print(_paint(title, "1", "96"))
    print()

    cols = _cols()
    idx_w = 4
    option_w = max(20, min(48, int(cols * 0.45)))
    detail_w = max(12, cols - (idx_w + option_w + 10))
    widths = [idx_w, option_w, detail_w]

    print(_line(widths))
    print(
        _row(
            [
                _paint(_pad("Sel", idx_w), "1", "95"),
                _paint(_pad("File", option_w), "1", "95"),
                _paint(_pad("Type", detail_w), "1", "95"),
            ]
        )
    )
    print(_line(widths))

    for i, opt in enumerate(options):
        marker = f">>{i + 1:02d}" if i == index else f"  {i + 1:02d}"
        cells = [
            _pad(marker, idx_w),
            _pad(opt.label.strip(), option_w),
            _pad((opt.detail or "").strip(), detail_w),
        ]
        if i == index:
            print(_row([_style_selected(c) for c in cells]))
        else:
            print(_row([_paint(cells[0], "36"), _paint(cells[1], "97"), _paint(cells[2], "2", "37")]))

    print(_line(widths))
    print()
    print(
        _paint("Keys:", "1", "96")
        + " "
        + _paint("Up/Down", "1", "97")
        + " + Enter, "
        + _paint("q", "1", "97")
        + ": cancel"
    )
    sys.stdout.flush()


def select_one(
    *,
    title: str,
    options: list[SelectorOption[T]],
    initial_index: int = 0,
) -> SelectorResult[T]:
    """Let the user pick one option with the arrow keys. Requires a TTY."""
    if not options:
        raise ValueError("selector requires at least one option")
    if not is_interactive_terminal():
        raise RuntimeError("interactive selector requires a TTY")

    idx = max(0, min(initial_index, len(options) - 1))
    casted: list[SelectorOption[object]] = [
        SelectorOption(value=o.value, label=o.label, detail=o.detail) for o in options
    ]

    while True:
        _render(title=title, options=casted, index=idx)
        key = _read_key()

        if key == "up":
            idx = (idx - 1) % len(options)
            continue
        if key == "down":
            idx = (idx + 1) % len(options)
            continue
        if key == "enter":
            return SelectorResult(action="select", value=options[idx].value, index=idx)
        if key == "cancel":
            return SelectorResult(action="cancel", value=None, index=idx)


def prompt_one(
    *,
    title: str,
    options: list[SelectorOption[T]],
    initial_index: int = 0,
) -> SelectorResult[T]:
    """Numbered-list fallback for when stdin/stdout is not a terminal.

    Entering 0 cancels.
    """
    if not options:
        raise ValueError("selector requires at least one option")

    typer.echo(title)
    for i, opt in enumerate(options, start=1):
        suffix = f"  ({opt.detail})" if opt.detail else ""
        typer.echo(f"  {i}) {opt.label}{suffix}")

    default = max(0, min(initial_index, len(options) - 1)) + 1
    while True:
        choice: int = typer.prompt("Number", default=default, type=int)
        if choice == 0:
            return SelectorResult(action="cancel", value=None, index=default - 1)
        if 1 <= choice <= len(options):
            return SelectorResult(action="select", value=options[choice - 1].value, index=choice - 1)
        typer.echo(f"Choose a number between 1 and {len(options)} (0 to cancel).")


def choose_one(
    *,
    title: str,
    options: list[SelectorOption[T]],
    initial_index: int = 0,
) -> SelectorResult[T]:
    if is_interactive_terminal():
        return select_one(title=title, options=options, initial_index=initial_index)
    return prompt_one(title=title, options=options, initial_index=initial_index)
