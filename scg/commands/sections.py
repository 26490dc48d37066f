"""Komenda: scg sections — podgląd drzewa sekcji jednego pliku markdown."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from data_model.documents import Section, SectionTree
from generator.errors import ProviderError
from layout.config import LayoutConfig
from layout.metrics import count_images, count_lines, measure
from md_parser.parser import parse_sections
from vault.provider import VaultProvider

console = Console()


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _row(table: Table, section: Section, text: str, cfg: LayoutConfig) -> None:
    indent = "  " * (section.level - 1)
    table.add_row(
        str(section.level),
        indent + (escape(section.title) if section.title else "[dim](pusty)[/dim]"),
        str(count_lines(text)),
        str(count_images(text, cfg.image_extensions)),
        str(measure(text, cfg)),
    )


def _show_tree(tree: SectionTree, cfg: LayoutConfig) -> None:
    if not tree:
        console.print("[yellow]Brak sekcji (dokument bez nagłówków \"# \").[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LVL",     justify="right", no_wrap=True, style="dim")
    table.add_column("TYTUŁ",   no_wrap=False, max_width=60, style="bold cyan")
    table.add_column("LINIE",   justify="right", no_wrap=True)
    table.add_column("OBRAZKI", justify="right", no_wrap=True)
    table.add_column("WYS.",    justify="right", no_wrap=True)

    count = 0
    for section in tree:
        # Wysokość węzła tytułu liczona z całego spanu, podsekcji z samej treści
        if section.text:
            _row(table, section, section.text, cfg)
            count += 1
        for child in section.children:
            _row(table, child, child.body, cfg)
            count += 1

    console.print()
    console.print(table)
    console.print(f"  [dim]{count} sekcji[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    md_path = Path(args.md_file)
    if not md_path.is_file():
        console.print(f"[red]Plik nie istnieje:[/red] {md_path}")
        raise SystemExit(1)

    try:
        cfg = LayoutConfig.from_env()
        cfg.validate()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    try:
        document = VaultProvider(md_path.parent).read(md_path)
    except ProviderError as e:
        console.print(f"[red]Błąd odczytu:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(f"Parsowanie [bold]{escape(document.name)}[/bold] …")
    _show_tree(parse_sections(document.text), cfg)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "sections",
        help="Pokazuje drzewo sekcji pliku markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje plik markdown na sekcje "# " i podsekcje "## " i wyświetla je wraz
z szacowaną wysokością węzła (linie * SCG_LINE_HEIGHT + obrazki * SCG_IMAGE_HEIGHT).

Przykłady:
  scg sections Notes.md
        """,
    )
    p.add_argument(
        "md_file",
        metavar="PLIK.md",
        help="Ścieżka do pliku markdown.",
    )
    p.set_defaults(func=run)
