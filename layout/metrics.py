"""
layout/metrics.py — heurystyczna wysokość bloku tekstu.

To NIE jest pomiar renderowanego tekstu (brak metryk glifów, zawijania
linii itp.). Wysokość to:

  liczba_linii * line_height + liczba_linii_z_obrazkiem * image_height

Linie liczone są po "\n" (pusta linia na końcu też się liczy). Linia
z obrazkiem to linia zawierająca (case-sensitive) jedno z rozszerzeń
z LayoutConfig.image_extensions.
"""

from __future__ import annotations

from layout.config import LayoutConfig


def count_lines(text: str) -> int:
    return len(text.split("\n"))


def count_images(text: str, extensions: tuple[str, ...]) -> int:
    return sum(
        1 for line in text.split("\n")
        if any(ext in line for ext in extensions)
    )


def measure(text: str, config: LayoutConfig | None = None) -> int:
    """Zwraca szacowaną wysokość węzła dla tekstu (w pikselach płótna)."""
    cfg = config or LayoutConfig()
    return (
        count_lines(text) * cfg.line_height
        + count_images(text, cfg.image_extensions) * cfg.image_height
    )
