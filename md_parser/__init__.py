"""
md_parser — parser markdown do dwupoziomowego drzewa sekcji.

Publiczne API:
  parse_sections(text)   → SectionTree
  H1, H2                 markery nagłówków
"""

from .markers import H1, H2, HeadingMarker
from .parser import parse_sections

__all__ = [
    "H1",
    "H2",
    "HeadingMarker",
    "parse_sections",
]
