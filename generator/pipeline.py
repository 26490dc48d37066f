"""
generator/pipeline.py — pełny przebieg: dostawca dokumentów → layout → sink.

Zasady błędów:
  - ProviderError  → DocumentIssue w raporcie, kolumna pusta (indeks
                     zarezerwowany), przebieg trwa dalej.
  - SinkError      → propaguje do wywołującego; nic nie jest ponawiane.
  - brak dokumentów pasujących do filtra → pusty raport, sink nie jest
                     wywoływany; to nie jest błąd.

Publiczne API:
  generate(provider, sink, name_filter, config) -> GenerationReport
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Protocol

from data_model.documents import Document
from data_model.nodes import NodeDescriptor
from generator.errors import DocumentIssue, ProviderError
from layout.config import LayoutConfig
from layout.engine import layout_column

if TYPE_CHECKING:
    from canvas.sink import NodeSink


class DocumentProvider(Protocol):
    def documents(self, name_filter: str = "") -> Iterable[Document | ProviderError]:
        ...


@dataclass(slots=True)
class GenerationReport:
    """
    Wynik jednego przebiegu.

    - name_filter: użyty filtr nazw
    - documents:   nazwy dokumentów w kolejności kolumn (także pominiętych)
    - nodes:       wyemitowane węzły
    - issues:      problemy z pojedynczymi dokumentami
    """

    name_filter: str
    documents: list[str] = field(default_factory=list)
    nodes: list[NodeDescriptor] = field(default_factory=list)
    issues: list[DocumentIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def is_empty(self) -> bool:
        return not self.documents


def generate(
    provider: DocumentProvider,
    sink: NodeSink,
    name_filter: str = "",
    config: LayoutConfig | None = None,
) -> GenerationReport:
    cfg = config or LayoutConfig()
    cfg.validate()

    report = GenerationReport(name_filter=name_filter)
    for column, item in enumerate(provider.documents(name_filter)):
        if isinstance(item, ProviderError):
            report.documents.append(item.document)
            report.issues.append(DocumentIssue(
                code=item.code,
                document=item.document,
                message=item.message,
            ))
            continue
        report.documents.append(item.name)
        report.nodes.extend(layout_column(item, column, cfg))

    if report.is_empty:
        return report

    # Jedna emisja po ułożeniu wszystkich kolumn, bez częściowych zapisów
    sink.emit(report.nodes)
    return report
