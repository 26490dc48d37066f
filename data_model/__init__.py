"""
data_model — struktury danych generatora płótna.

Użycie:
  from data_model import Document, Section, NodeDescriptor, ...

Moduły:
  documents — Document, Section, SectionTree
  nodes     — NodeKind, NodeDescriptor
"""

from .documents import (
    Document,
    Section,
    SectionTree,
)
from .nodes import (
    NodeKind,
    NodeDescriptor,
)

__all__ = [
    # documents
    "Document",
    "Section",
    "SectionTree",
    # nodes
    "NodeKind",
    "NodeDescriptor",
]
