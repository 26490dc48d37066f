"""Komenda: scg generate — układa sekcje dokumentów vaulta na płótnie."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from canvas.sink import JsonCanvasSink, MemorySink
from data_model.nodes import NodeDescriptor, NodeKind
from generator.errors import SinkError
from generator.pipeline import GenerationReport, generate
from layout.config import LayoutConfig, default_name_filter
from vault.provider import VaultProvider

console = Console()


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_nodes(nodes: Sequence[NodeDescriptor]) -> None:
    if not nodes:
        console.print("[yellow]Brak węzłów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("KOL",   justify="right", no_wrap=True, style="dim")
    table.add_column("TYP",   no_wrap=True)
    table.add_column("X",     justify="right", no_wrap=True)
    table.add_column("Y",     justify="right", no_wrap=True)
    table.add_column("W×H",   justify="right", no_wrap=True)
    table.add_column("TEKST", no_wrap=False, max_width=60)

    for node in nodes:
        kind_style = "bold cyan" if node.kind is NodeKind.TITLE else "green"
        table.add_row(
            str(node.column),
            f"[{kind_style}]{node.kind}[/{kind_style}]",
            str(node.x),
            str(node.y),
            f"{node.width}×{node.height}",
            escape(node.text.split("\n", 1)[0][:80]),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(nodes)} węzłów[/dim]\n")


def _show_report(report: GenerationReport) -> None:
    for issue in report.issues:
        console.print(
            f"[yellow]Pominięto[/yellow] [bold]{escape(issue.document)}[/bold] "
            f"[dim]({issue.code})[/dim]: {escape(issue.message)}"
        )


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def _build_config(args: argparse.Namespace) -> LayoutConfig:
    try:
        cfg = LayoutConfig.from_env().replace(
            line_height=args.line_height,
            image_height=args.image_height,
            gap=args.gap,
            column_width=args.column_width,
            node_width=args.node_width,
            sub_x_offset=args.sub_x_offset,
        )
        cfg.validate()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)
    return cfg


def run(args: argparse.Namespace) -> None:
    vault_path = Path(args.vault)
    if not vault_path.is_dir():
        console.print(f"[red]Katalog nie istnieje:[/red] {vault_path}")
        raise SystemExit(1)

    cfg = _build_config(args)
    name_filter: str = args.filter if args.filter is not None else default_name_filter()
    out_path = Path(args.out) if args.out else vault_path / "summary.canvas"

    provider = VaultProvider(vault_path)
    sink = MemorySink() if args.dry_run else JsonCanvasSink(out_path, append=args.append)

    console.print(
        f"Generowanie płótna z [bold]{vault_path}[/bold] "
        f"(filtr=[cyan]{escape(repr(name_filter))}[/cyan]) …"
    )

    try:
        report = generate(provider, sink, name_filter, cfg)
    except SinkError as e:
        console.print(f"[red]Błąd zapisu płótna:[/red] {escape(str(e))}")
        raise SystemExit(1)

    _show_report(report)

    if report.is_empty:
        console.print(f"[yellow]Brak dokumentów pasujących do filtra {escape(repr(name_filter))}.[/yellow]")
        return

    if args.dry_run or args.show:
        _show_nodes(report.nodes)

    if args.dry_run:
        console.print(
            f"[dim]--dry-run: {len(report.nodes)} węzłów w {len(report.documents)} kolumnach, "
            f"bez zapisu.[/dim]"
        )
    else:
        console.print(
            f"[green]Canvas:[/green] {out_path}  "
            f"({len(report.nodes)} węzłów, {len(report.documents)} kolumn)"
        )


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "generate",
        help="Układa sekcje dokumentów w kolumnach i zapisuje plik .canvas.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dla każdego dokumentu pasującego do filtra (posortowane po nazwie) tworzy
kolumnę węzłów: nagłówek "# " jako węzeł tekstowy, każda podsekcja "## "
jako osadzenie ![[dokument#sekcja]]. Wynik trafia do pliku JSON Canvas.

Przykłady:
  scg generate ~/vault --filter SPL
  scg generate ~/vault --filter SPL --out ~/vault/SPL.canvas --show
  scg generate ~/vault --append --out ~/vault/Board.canvas
  scg generate ~/vault --dry-run --gap 80
        """,
    )
    p.add_argument(
        "vault",
        metavar="KATALOG",
        help="Katalog z plikami markdown (przeszukiwany rekurencyjnie).",
    )
    p.add_argument(
        "--filter",
        metavar="TEKST",
        default=None,
        help="Podciąg nazwy pliku, case-sensitive (domyślnie: SCG_FILTER lub wszystkie).",
    )
    p.add_argument(
        "--out",
        metavar="PLIK.canvas",
        default=None,
        help="Plik wyjściowy (domyślnie: KATALOG/summary.canvas).",
    )
    p.add_argument(
        "--append",
        action="store_true",
        help="Dopisz do istniejącego płótna (upsert po id), zamiast je nadpisywać.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Tylko policz layout i wyświetl węzły, bez zapisu.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę węzłów po zapisie.",
    )

    g = p.add_argument_group("layout (nadpisuje SCG_*)")
    g.add_argument("--line-height",  type=int, default=None, metavar="PX")
    g.add_argument("--image-height", type=int, default=None, metavar="PX")
    g.add_argument("--gap",          type=int, default=None, metavar="PX")
    g.add_argument("--column-width", type=int, default=None, metavar="PX")
    g.add_argument("--node-width",   type=int, default=None, metavar="PX")
    g.add_argument("--sub-x-offset", type=int, default=None, metavar="PX")
    p.set_defaults(func=run)
