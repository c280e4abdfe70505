"""CLI entry point for checkin-directives.

Invoked as::

    checkin-directives [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m checkin_directives.cli.main

Commands
--------
scan        Preview the effect of a commit message's directives
grammar     Show the active directive patterns
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from checkin_directives.grammar import DirectiveGrammar
    from checkin_directives.options import CheckinOptions

console = Console()
err_console = Console(stderr=True)


def _read_message(path: str) -> str:
    """Read a commit message file (``-`` for stdin), exiting on error."""
    if path == "-":
        return click.get_text_stream("stdin").read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_grammar_or_exit(path: str | None) -> "DirectiveGrammar":
    """Load a grammar file, printing errors and exiting on failure."""
    from checkin_directives.grammar import DEFAULT_GRAMMAR, GrammarError, load_grammar

    if path is None:
        return DEFAULT_GRAMMAR
    try:
        return load_grammar(path)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)
    except GrammarError as exc:
        err_console.print(f"[red]Grammar error[/red] in {path}: {exc}")
        sys.exit(1)


def _load_options_or_exit(path: str | None) -> "CheckinOptions":
    """Load starting checkin options from YAML, exiting on failure."""
    from checkin_directives.options import CheckinOptions, OptionsError, OptionsSerializer

    if path is None:
        return CheckinOptions()
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)
    try:
        return OptionsSerializer().from_yaml(text)
    except OptionsError as exc:
        err_console.print(f"[red]Options error[/red] in {path}: {exc}")
        sys.exit(1)


def _options_table(options: "CheckinOptions") -> Table:
    table = Table(title="Checkin options", show_lines=True)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")

    table.add_row("comment", escape(options.comment) or "[dim](empty)[/dim]")
    table.add_row("associate", ", ".join(options.work_items_to_associate) or "[dim]-[/dim]")
    table.add_row("resolve", ", ".join(options.work_items_to_resolve) or "[dim]-[/dim]")
    table.add_row("force", "[yellow]yes[/yellow]" if options.force else "no")
    table.add_row("override reason", escape(options.override_reason) or "[dim]-[/dim]")
    for name, value in sorted(options.checkin_notes.items()):
        table.add_row(f"note: {escape(name)}", escape(value))
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="checkin-directives")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Apply and undo commit message directives on TFS checkin options."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from checkin_directives import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]checkin-directives[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# grammar command
# ---------------------------------------------------------------------------


@cli.command(name="grammar")
@click.option("--grammar", "grammar_path", default=None, help="YAML grammar file overriding the defaults")
def grammar_command(grammar_path: str | None) -> None:
    """Show the directive patterns in effect."""
    grammar = _load_grammar_or_exit(grammar_path)

    table = Table(title="Directive grammar", show_lines=True)
    table.add_column("Directive", style="bold", no_wrap=True)
    table.add_column("Pattern")

    table.add_row("work item", escape(grammar.work_item_pattern.pattern))
    table.add_row("force", escape(grammar.force_pattern.pattern))
    if grammar.checkin_note_pattern is not None:
        table.add_row("checkin note", escape(grammar.checkin_note_pattern.pattern))
    else:
        table.add_row("checkin note", "[dim](disabled)[/dim]")
    table.add_row("associate keyword", grammar.associate_keyword)
    table.add_row("resolve keyword", grammar.resolve_keyword)
    console.print(table)


# ---------------------------------------------------------------------------
# scan command
# ---------------------------------------------------------------------------


@cli.command(name="scan")
@click.argument("file", type=click.Path(exists=False, allow_dash=True))
@click.option("--grammar", "grammar_path", default=None, help="YAML grammar file overriding the defaults")
@click.option("--options", "options_path", default=None, help="YAML file with starting checkin options")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="How to render the resulting options",
)
@click.option("--output", "-o", default=None, help="Write json/yaml output to this file")
def scan_command(
    file: str,
    grammar_path: str | None,
    options_path: str | None,
    output_format: str,
    output: str | None,
) -> None:
    """Preview what a commit message's directives do to a checkin.

    FILE is the path to the commit message, or - for stdin.  The
    options are restored to their starting values once rendered.
    """
    from checkin_directives.options import OptionsSerializer
    from checkin_directives.scanner import DirectiveScanner

    message = _read_message(file)
    grammar = _load_grammar_or_exit(grammar_path)
    options = _load_options_or_exit(options_path)

    output_format = output_format.lower()
    # json/yaml on stdout must stay parseable, so notices go to stderr
    notices = sys.stdout if output_format == "table" else sys.stderr
    scanner = DirectiveScanner(notices, grammar)
    with scanner.scan(options, message):
        if output_format == "table":
            console.print(_options_table(options))
            return

        serializer = OptionsSerializer()
        if output_format == "json":
            text = serializer.to_json(options, indent=2)
        else:
            text = serializer.to_yaml(options)

        if output:
            Path(output).write_text(text, encoding="utf-8")
            console.print(f"[green]Options written to[/green] {output}")
        else:
            click.echo(text.rstrip("\n"))


if __name__ == "__main__":
    cli()
