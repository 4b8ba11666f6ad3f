"""Interactive CLI for inspecting, matching and negotiating MIME types."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import FileHistory
from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from .config import settings
from .errors import MimeTypeError
from .media_type import MediaType
from .negotiation import parse_accept, rank

console = Console()

_QUIT = frozenset({"/quit", "/exit"})

HELP = Text.from_markup(
    "Type a MIME type to inspect it, or:\n"
    "  [bold]/match[/bold] PATTERN CANDIDATE   compare two MIME types\n"
    "  [bold]/accept[/bold] HEADER -- OFFER, ...  rank offers against an Accept header\n"
    "  [bold]/quit[/bold]                      exit"
)


def describe(mime: MediaType) -> Table:
    table = Table(title=Text(str(mime)), show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    for key, value in mime.to_dict().items():
        if key == "value":
            continue
        if key == "parameters":
            value = ", ".join(f"{k}={v}" for k, v in value.items()) or "-"
        table.add_row(key, Text("-" if value is None else str(value)))
    return table


def compare(pattern: MediaType, candidate: MediaType) -> Table:
    table = Table(title=Text(f"{pattern}  vs  {candidate}"))
    table.add_column("relation")
    table.add_column("result")
    checks = (
        ("includes", pattern.includes(candidate)),
        ("included by", candidate.includes(pattern)),
        ("compatible", pattern.is_compatible_with(candidate)),
        ("equals", pattern.equals(candidate)),
        ("same type/subtype", pattern.equals_type_and_subtype(candidate)),
    )
    for name, result in checks:
        table.add_row(name, "[green]yes[/green]" if result else "[red]no[/red]")
    return table


def negotiate_table(header: str, offers: Sequence[str]) -> Table:
    ranges = parse_accept(header)
    table = Table(title=Text("Accept: " + ", ".join(str(r) for r in ranges)))
    table.add_column("#", justify="right")
    table.add_column("offer")
    table.add_column("q", justify="right")
    for idx, (offer, quality) in enumerate(rank(ranges, offers), start=1):
        table.add_row(str(idx), Text(str(offer)), f"{quality:.3f}")
    return table


def render(line: str) -> RenderableType | None:
    """Turn one input line into something to print; ``None`` for blank input.

    Raises :class:`MimeTypeError` for invalid MIME types.
    """
    text = line.strip()
    if not text:
        return None
    if text in ("/help", "?"):
        return HELP
    if text.startswith("/match"):
        try:
            args = shlex.split(text[len("/match"):])
        except ValueError:
            args = []
        if len(args) != 2:
            return Text("usage: /match PATTERN CANDIDATE", style="yellow")
        return compare(MediaType.parse(args[0]), MediaType.parse(args[1]))
    if text.startswith("/accept"):
        header, sep, offers = text[len("/accept"):].partition("--")
        names = [o.strip() for o in offers.split(",") if o.strip()]
        if not sep or not names:
            return Text("usage: /accept HEADER -- OFFER, OFFER", style="yellow")
        return negotiate_table(header.strip(), names)
    if text.startswith("/"):
        return Text(f"unknown command {text.split()[0]}; try /help", style="yellow")
    return describe(MediaType.parse(text))


def _print(line: str) -> bool:
    try:
        out = render(line)
    except MimeTypeError as exc:
        console.print(Text(str(exc), style="red"))
        return False
    if out is not None:
        console.print(out)
    return True


def _repl() -> None:
    cfg = settings.cfg
    cfg.ensure_dirs()
    console.print("[bold green]mimekit[/bold green]\nType [bold]/help[/bold] for commands, [bold]/quit[/bold] to exit.\n")
    session: PromptSession[str] = PromptSession(history=FileHistory(str(cfg.cli_history_path)))
    while True:
        try:
            line = session.prompt(HTML("<b>mime &gt;</b> "))
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip().lower() in _QUIT:
            break
        _print(line)
    console.print("[dim]Goodbye.[/dim]")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the REPL, or render each argument once when arguments are given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _repl()
        return 0
    ok = True
    for arg in args:
        ok = _print(arg) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
