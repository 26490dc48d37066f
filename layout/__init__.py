"""
layout — deterministyczny layout sekcji na płótnie.

Publiczne API:
  LayoutConfig                          stałe layoutu (+ from_env)
  measure(text, config)                 → szacowana wysokość węzła
  layout_documents(documents, config)   → list[NodeDescriptor]
  layout_column(document, column, cfg)  → list[NodeDescriptor]
  embed_reference(document, section)    → "![[nazwa#tytuł]]"
"""

from .config import LayoutConfig, default_name_filter
from .engine import LayoutCursor, embed_reference, layout_column, layout_documents
from .metrics import count_images, count_lines, measure

__all__ = [
    "LayoutConfig",
    "default_name_filter",
    "LayoutCursor",
    "embed_reference",
    "layout_column",
    "layout_documents",
    "count_images",
    "count_lines",
    "measure",
]
