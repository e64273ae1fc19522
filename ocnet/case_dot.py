"""DOT (Graphviz) rendering of case graphs."""

from __future__ import annotations

import os
import uuid

from .case import CaseGraph, Event


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def case_graph_to_dot(graph: CaseGraph, dpi_factor: float | None = None) -> str:
    """Render a case graph as a strict directed DOT graph.

    Events are ellipses, objects are boxes; edges are labelled with their type.
    """
    lines = [f"strict digraph {_quote(str(uuid.uuid4()))} {{", "  rankdir=LR"]
    if dpi_factor is not None:
        lines.append(f"  dpi={dpi_factor * 96.0:g}")
    for node in graph.nodes.values():
        shape = "ellipse" if isinstance(node, Event) else "box"
        lines.append(
            f"  {_quote(str(node.id))} [label={_quote(node.type_name)}, shape={shape}]"
        )
    for edge in graph.edges.values():
        lines.append(
            f"  {_quote(str(edge.source))} -> {_quote(str(edge.target))}"
            f" [label={_quote(edge.edge_type.value)}]"
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_case_graph_dot(
    graph: CaseGraph, path: str | os.PathLike[str], dpi_factor: float | None = None
) -> None:
    """Write the DOT rendering of a case graph to a file."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(case_graph_to_dot(graph, dpi_factor))