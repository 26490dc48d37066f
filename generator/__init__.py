"""
generator — orkiestracja: dokumenty → węzły → sink.

Publiczne API:
  generate(provider, sink, name_filter, config)   → GenerationReport
  ProviderError, SinkError, ErrorCode, DocumentIssue
"""

from .errors import DocumentIssue, ErrorCode, ProviderError, SinkError
from .pipeline import DocumentProvider, GenerationReport, generate

__all__ = [
    "DocumentIssue",
    "ErrorCode",
    "ProviderError",
    "SinkError",
    "DocumentProvider",
    "GenerationReport",
    "generate",
]
