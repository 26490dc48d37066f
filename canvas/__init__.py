"""
canvas — odbiorcy węzłów layoutu.

Publiczne API:
  NodeSink             protokół: emit(nodes)
  MemorySink           węzły w pamięci
  JsonCanvasSink       zapis do pliku .canvas (JSON Canvas)
  to_canvas_nodes()    NodeDescriptor → dict węzła JSON Canvas
"""

from .sink import JsonCanvasSink, MemorySink, NodeSink, document_prefix, node_id, to_canvas_nodes

__all__ = [
    "JsonCanvasSink",
    "MemorySink",
    "NodeSink",
    "document_prefix",
    "node_id",
    "to_canvas_nodes",
]
