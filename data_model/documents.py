"""
data_model/documents.py — model dokumentu markdown i jego sekcji.

Document to nazwa pliku + surowy tekst (niezmienny po odczycie).
Section odpowiada jednemu nagłówkowi "# " lub "## " wraz z treścią do
następnego nagłówka; zbiór sekcji najwyższego poziomu tworzy SectionTree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Document:
    name: str            # nazwa pliku z rozszerzeniem, np. "Notes.md"
    text: str

    @property
    def base_name(self) -> str:
        """Nazwa bez rozszerzenia, używana w referencjach ![[...]]."""
        return PurePosixPath(self.name).stem


@dataclass(slots=True)
class Section:
    level: int           # 1 = "# ", 2 = "## "
    text: str            # pierwsza linia (tytuł, bez markera) + treść
    children: list[Section] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.text.partition("\n")[0]

    @property
    def body(self) -> str:
        return self.text.partition("\n")[2]


# Sekcje poziomu 1 w kolejności dokumentu.
SectionTree: TypeAlias = list[Section]
