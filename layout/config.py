"""
layout/config.py — stałe layoutu płótna, konfigurowane przez zmienne środowiskowe.

Zmienne środowiskowe (wszystkie opcjonalne):
  SCG_LINE_HEIGHT       wysokość jednej linii tekstu (domyślnie 30)
  SCG_IMAGE_HEIGHT      dodatkowa wysokość za linię z obrazkiem (250)
  SCG_GAP               odstęp pionowy między węzłami (50)
  SCG_COLUMN_WIDTH      odstęp poziomy między kolumnami dokumentów (700)
  SCG_NODE_WIDTH        szerokość węzła (500)
  SCG_SUB_X_OFFSET      wcięcie węzłów podsekcji względem tytułu (50)
  SCG_IMAGE_EXTENSIONS  rozszerzenia obrazków, po przecinku (".png,.jpg")

Opcjonalnie plik .env w katalogu głównym projektu.
"""

from __future__ import annotations

import dataclasses
import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")

_ENV_PREFIX = "SCG_"
_INT_FIELDS = (
    "line_height",
    "image_height",
    "gap",
    "column_width",
    "node_width",
    "sub_x_offset",
)


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """
    Parametry deterministycznego layoutu.

    Domyślne wartości są jawnymi stałymi; ta sama konfiguracja i te same
    dokumenty zawsze dają identyczną listę węzłów.
    """

    line_height: int = 30
    image_height: int = 250
    gap: int = 50
    column_width: int = 700
    node_width: int = 500
    sub_x_offset: int = 50
    image_extensions: tuple[str, ...] = (".png", ".jpg")

    def validate(self) -> None:
        if self.line_height <= 0:
            raise ValueError("line_height musi być > 0")
        if self.image_height < 0:
            raise ValueError("image_height musi być >= 0")
        if self.gap < 0:
            raise ValueError("gap musi być >= 0")
        if self.node_width <= 0:
            raise ValueError("node_width musi być > 0")
        if self.sub_x_offset < 0:
            raise ValueError("sub_x_offset musi być >= 0")
        # Węzeł podsekcji kończy się na x + sub_x_offset + node_width
        if self.column_width < self.node_width + self.sub_x_offset:
            raise ValueError(
                "column_width musi być >= node_width + sub_x_offset "
                f"({self.node_width + self.sub_x_offset}), inaczej kolumny nachodzą na siebie"
            )
        if not self.image_extensions or not all(self.image_extensions):
            raise ValueError("image_extensions nie może być puste")

    def replace(self, **changes: object) -> LayoutConfig:
        """Kopia z nadpisanymi polami; wartości None są ignorowane."""
        return dataclasses.replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls) -> LayoutConfig:
        """Buduje konfigurację z SCG_* (brak zmiennej → wartość domyślna)."""
        changes: dict[str, object] = {}
        for name in _INT_FIELDS:
            var = _ENV_PREFIX + name.upper()
            raw = os.getenv(var)
            if raw is None or not raw.strip():
                continue
            try:
                changes[name] = int(raw)
            except ValueError:
                raise ValueError(f"Zmienna {var} musi być liczbą całkowitą, otrzymano: {raw!r}") from None

        raw_ext = os.getenv(_ENV_PREFIX + "IMAGE_EXTENSIONS")
        if raw_ext and raw_ext.strip():
            changes["image_extensions"] = tuple(e.strip() for e in raw_ext.split(",") if e.strip())

        return cls().replace(**changes)


def default_name_filter() -> str:
    """Filtr nazw plików z SCG_FILTER (domyślnie pusty, czyli wszystkie dokumenty)."""
    return os.getenv(_ENV_PREFIX + "FILTER", "")
