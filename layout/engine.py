"""
layout/engine.py — rozmieszczenie sekcji dokumentów w kolumnach płótna.

Architektura:
  list[Document] → (indeks kolumny, Document)
  → parse_sections() → SectionTree
  → layout_column() z kursorem (previous_y, previous_height) tej kolumny
  → list[NodeDescriptor] w kolejności: kolumna, potem kolejność w tekście

Każda kolumna ma własny kursor przekazywany jawnie przez jej przejście, więc
kolumny są od siebie niezależne. Węzły w kolumnie spełniają:
  y[n+1] >= y[n] + height[n] + gap

Kluczowe funkcje publiczne:
  layout_documents(documents, config) -> list[NodeDescriptor]
  layout_column(document, column, config) -> list[NodeDescriptor]
  embed_reference(document, title) -> str
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from data_model.documents import Document, Section
from data_model.nodes import NodeDescriptor, NodeKind
from layout.config import LayoutConfig
from layout.metrics import measure
from md_parser.parser import parse_sections


@dataclass(frozen=True, slots=True)
class LayoutCursor:
    """Pozycja zapisu w kolumnie; (0, 0) na początku każdego dokumentu."""
    previous_y: int = 0
    previous_height: int = 0

    def next_y(self, gap: int) -> int:
        return self.previous_y + self.previous_height + gap

    def moved_to(self, y: int, height: int) -> LayoutCursor:
        return LayoutCursor(previous_y=y, previous_height=height)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def layout_documents(
    documents: Sequence[Document],
    config: LayoutConfig | None = None,
) -> list[NodeDescriptor]:
    """
    Zwraca węzły wszystkich dokumentów; dokument o indeksie i trafia do
    kolumny i (x = i * column_width). Dokument bez nagłówków nie daje węzłów,
    ale jego kolumna pozostaje zarezerwowana.
    """
    cfg = config or LayoutConfig()
    nodes: list[NodeDescriptor] = []
    for column, document in enumerate(documents):
        nodes.extend(layout_column(document, column, cfg))
    return nodes


def layout_column(
    document: Document,
    column: int,
    config: LayoutConfig | None = None,
) -> list[NodeDescriptor]:
    """Rozmieszcza sekcje jednego dokumentu w kolumnie o podanym indeksie."""
    cfg = config or LayoutConfig()
    x = column * cfg.column_width
    cursor = LayoutCursor()
    nodes: list[NodeDescriptor] = []

    for section in parse_sections(document.text):
        # Pusty h1Text: brak węzła tytułu, dzieci idą dalej tym samym kursorem
        if section.text:
            node, cursor = _place(
                NodeKind.TITLE, document.name, column, x, cursor,
                text="# " + section.text,
                height=measure(section.text, cfg),
                config=cfg,
            )
            nodes.append(node)

        for child in section.children:
            node, cursor = _place(
                NodeKind.CONTENT, document.name, column, x + cfg.sub_x_offset, cursor,
                text=embed_reference(document, child),
                height=measure(child.body, cfg),
                config=cfg,
            )
            nodes.append(node)

    return nodes


def embed_reference(document: Document, section: Section | str) -> str:
    """
    Zwraca referencję osadzenia w formacie ![[<nazwa-bez-rozszerzenia>#<tytuł>]].

    Każde wystąpienie " #c" jest zamieniane na " c": renderer traktuje
    fragmenty zaczynające się od "#c" specjalnie (np. "Topic #cats" →
    "Topic cats"). Inne fragmenty "#..." zostają bez zmian.
    """
    title = section if isinstance(section, str) else section.title
    return f"![[{document.base_name}#{title}]]".replace(" #c", " c")


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _place(
    kind: NodeKind,
    document: str,
    column: int,
    x: int,
    cursor: LayoutCursor,
    *,
    text: str,
    height: int,
    config: LayoutConfig,
) -> tuple[NodeDescriptor, LayoutCursor]:
    y = cursor.next_y(config.gap)
    node = NodeDescriptor(
        kind=kind,
        document=document,
        column=column,
        x=x,
        y=y,
        width=config.node_width,
        height=height,
        text=text,
    )
    return node, cursor.moved_to(y, height)
