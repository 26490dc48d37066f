"""
data_model/nodes.py — deskryptory węzłów emitowanych na płótno.

NodeDescriptor powstaje raz na sekcję w trakcie layoutu i nie jest potem
modyfikowany. Pozycja i rozmiar są w pikselach płótna.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class NodeKind(StrEnum):
    TITLE   = "title"     # nagłówek "# " z treścią
    CONTENT = "content"   # osadzenie ![[dokument#sekcja]]


@dataclass(frozen=True, slots=True)
class NodeDescriptor:
    kind: NodeKind
    document: str        # nazwa dokumentu źródłowego, np. "Notes.md"
    column: int          # indeks dokumentu (0-based)
    x: int
    y: int
    width: int
    height: int
    text: str

    @property
    def bottom(self) -> int:
        return self.y + self.height
