"""
canvas/sink.py — odbiorcy węzłów (NodeSink) i zapis do formatu JSON Canvas.

Format pliku .canvas (Obsidian / JSON Canvas 1.0):
  {"nodes": [{"id", "type": "text", "text", "x", "y", "width", "height"}, ...],
   "edges": [...]}

Identyfikatory węzłów są deterministyczne (sha1 z nazwy dokumentu, kolumny
i pozycji w kolumnie), więc ponowne uruchomienie daje identyczny plik.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Protocol, Sequence

from data_model.nodes import NodeDescriptor
from generator.errors import SinkError


class NodeSink(Protocol):
    def emit(self, nodes: Sequence[NodeDescriptor]) -> None:
        ...


class MemorySink:
    """Trzyma wyemitowane węzły w pamięci (testy, --dry-run)."""

    def __init__(self) -> None:
        self.batches: list[list[NodeDescriptor]] = []

    @property
    def nodes(self) -> list[NodeDescriptor]:
        return [n for batch in self.batches for n in batch]

    def emit(self, nodes: Sequence[NodeDescriptor]) -> None:
        self.batches.append(list(nodes))


# ---------------------------------------------------------------------------
# JSON Canvas
# ---------------------------------------------------------------------------

def document_prefix(document: str) -> str:
    """8 znaków hex wspólne dla wszystkich węzłów jednego dokumentu."""
    return hashlib.sha1(document.encode("utf-8")).hexdigest()[:8]


def node_id(node: NodeDescriptor, index: int) -> str:
    """
    16 znaków hex: prefiks dokumentu + (kolumna, pozycja w kolumnie).

    Tekst węzła nie wchodzi do id, więc edycja sekcji podmienia węzeł
    zamiast dokładać nowy obok starego.
    """
    key = f"{node.column}:{index}"
    return document_prefix(node.document) + hashlib.sha1(key.encode("utf-8")).hexdigest()[:8]


def to_canvas_nodes(nodes: Sequence[NodeDescriptor]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    per_column: dict[int, int] = {}
    for node in nodes:
        index = per_column.get(node.column, 0)
        per_column[node.column] = index + 1
        out.append({
            "id": node_id(node, index),
            "type": "text",
            "text": node.text,
            "x": node.x,
            "y": node.y,
            "width": node.width,
            "height": node.height,
        })
    return out


def _is_generated_by(canvas_node: dict[str, Any], prefixes: set[str]) -> bool:
    node_id_ = canvas_node.get("id")
    return isinstance(node_id_, str) and len(node_id_) == 16 and node_id_[:8] in prefixes


class JsonCanvasSink:
    """
    Zapisuje węzły do pliku .canvas.

    append=False → plik jest nadpisywany (tylko wygenerowane węzły).
    append=True  → istniejący plik jest wczytywany; wszystkie wcześniej
                   wygenerowane węzły dokumentów z tej emisji (rozpoznawane
                   po prefiksie id) są zastępowane nowymi, obce węzły
                   i krawędzie zostają.
    """

    def __init__(self, path: str | Path, append: bool = False) -> None:
        self.path = Path(path)
        self.append = append

    def emit(self, nodes: Sequence[NodeDescriptor]) -> None:
        canvas = self._load() if self.append else {"nodes": [], "edges": []}

        generated = to_canvas_nodes(nodes)
        prefixes = {document_prefix(n.document) for n in nodes}
        generated_ids = {n["id"] for n in generated}
        kept = [
            n for n in canvas["nodes"]
            if n.get("id") not in generated_ids and not _is_generated_by(n, prefixes)
        ]
        canvas["nodes"] = kept + generated

        data = json.dumps(canvas, ensure_ascii=False, indent="\t")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(data + "\n", encoding="utf-8")
        except OSError as e:
            raise SinkError(f"Nie można zapisać {self.path}: {e}") from e

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"nodes": [], "edges": []}
        try:
            canvas = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SinkError(f"Nie można wczytać {self.path}: {e}") from e
        if (
            not isinstance(canvas, dict)
            or not isinstance(canvas.get("nodes", []), list)
            or not isinstance(canvas.get("edges", []), list)
            or not all(isinstance(n, dict) for n in canvas.get("nodes", []))
        ):
            raise SinkError(f"Nieprawidłowy format pliku canvas: {self.path}")
        canvas.setdefault("nodes", [])
        canvas.setdefault("edges", [])
        return canvas
