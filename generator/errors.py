"""
generator/errors.py — kody błędów, wyjątki i struktura raportu generowania.

ProviderError — nie udało się odczytać jednego dokumentu; kolumna jest
    pomijana, reszta przebiegu trwa dalej.
SinkError     — zapis/emisja węzłów nie powiodła się; kończy przebieg.
DocumentIssue — pojedynczy problem zapisany w GenerationReport.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów generatora."""

    PROVIDER_READ = "E_PROVIDER_READ"
    SINK_WRITE    = "E_SINK_WRITE"


class ProviderError(Exception):
    """Odczyt treści dokumentu nie powiódł się."""

    code = ErrorCode.PROVIDER_READ

    def __init__(self, document: str, message: str) -> None:
        super().__init__(f"{document}: {message}")
        self.document = document
        self.message = message


class SinkError(Exception):
    """Sink odrzucił emisję węzłów."""

    code = ErrorCode.SINK_WRITE


@dataclass(slots=True)
class DocumentIssue:
    """
    Problem z jednym dokumentem (nie przerywa przebiegu).

    - code:     stały identyfikator klasy błędu (ErrorCode)
    - document: nazwa dokumentu
    - message:  czytelny opis
    """

    code: ErrorCode
    document: str
    message: str
