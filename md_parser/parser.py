"""
md_parser/parser.py — podział tekstu markdown na dwupoziomowe drzewo sekcji.

Architektura (dwa przebiegi):
  tekst → linie → granice "# " → fragmenty poziomu 1
  → w każdym fragmencie granice "## " → h1Text + fragmenty poziomu 2
  → SectionTree

Parser nigdy nie zgłasza błędów: tekst bez nagłówków daje pustą listę.

Kluczowe funkcje publiczne:
  parse_sections(text) -> SectionTree
"""

from __future__ import annotations

from data_model.documents import Section, SectionTree
from md_parser.markers import H1, H2, HeadingMarker


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_sections(text: str) -> SectionTree:
    """
    Parsuje tekst dokumentu i zwraca sekcje poziomu 1 w kolejności dokumentu.

    Treść przed pierwszym nagłówkiem "# " jest pomijana. Fragment, w którym
    "# " jest od razu zakończony przez "## " (pusty h1Text), nie daje sekcji
    poziomu 1; jego dzieci trafiają do sekcji-kontenera z pustym tekstem,
    żeby zachować kolejność w kolumnie.
    """
    tree: SectionTree = []
    # Końce linii "\r\n" i "\r" traktowane jak "\n"
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    for chunk in _split_chunks(lines, H1):
        # Linia tytułu nigdy nie jest granicą "## " (np. "# ## x")
        head, *rest = chunk
        h1_lines, *sub_chunks = _split_at(rest, H2)
        h1_lines.insert(0, head)
        section = Section(level=1, text="\n".join(h1_lines))
        section.children = [
            Section(level=2, text="\n".join(sub)) for sub in sub_chunks
        ]
        tree.append(section)
    return tree


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _split_at(lines: list[str], marker: HeadingMarker) -> list[list[str]]:
    """
    Dzieli linie na granicach markera. Pierwszy element to linie przed
    pierwszym markerem (może być pusty); każdy następny zaczyna się od
    tytułu nagłówka z usuniętym markerem.
    """
    chunks: list[list[str]] = [[]]
    for line in lines:
        if marker.matches(line):
            chunks.append([marker.strip(line)])
        else:
            chunks[-1].append(line)
    return chunks


def _split_chunks(lines: list[str], marker: HeadingMarker) -> list[list[str]]:
    # Fragment przed pierwszym nagłówkiem nie jest sekcją
    return _split_at(lines, marker)[1:]
