"""
md_parser/markers.py — markery nagłówków markdown rozpoznawane przez parser.

Każdy HeadingMarker zawiera:
  - prefix: dokładny początek linii (marker + spacja)
  - level : głębokość hierarchii (1 = najwyższy)

Modelowane są tylko dwa poziomy; "### " i głębsze zostają w treści sekcji.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HeadingMarker:
    prefix: str
    level: int

    def matches(self, line: str) -> bool:
        return line.startswith(self.prefix)

    def strip(self, line: str) -> str:
        """Zwraca linię bez markera (tytuł nagłówka)."""
        return line[len(self.prefix):]


H1 = HeadingMarker(prefix="# ", level=1)
H2 = HeadingMarker(prefix="## ", level=2)
