"""JSON serialisation of case graphs."""

from __future__ import annotations

import json
from typing import Any

from .case import CaseGraph, Edge, EdgeType, Event, Node, Object


def _node_to_dict(node: Node) -> dict[str, Any]:
    if isinstance(node, Event):
        return {"type": "EventNode", "data": {"id": node.id, "event_type": node.event_type}}
    return {"type": "ObjectNode", "data": {"id": node.id, "object_type": node.object_type}}


def _node_from_dict(data: dict[str, Any]) -> Node:
    kind = data["type"]
    content = data["data"]
    if kind == "EventNode":
        return Event(int(content["id"]), str(content["event_type"]))
    if kind == "ObjectNode":
        return Object(int(content["id"]), str(content["object_type"]))
    raise ValueError(f"unknown node type: {kind!r}")


def _edge_to_dict(edge: Edge) -> dict[str, Any]:
    return {
        "id": edge.id,
        "from": edge.source,
        "to": edge.target,
        "edge_type": edge.edge_type.value,
    }


def _edge_from_dict(data: dict[str, Any]) -> Edge:
    return Edge(
        id=int(data["id"]),
        source=int(data["from"]),
        target=int(data["to"]),
        edge_type=EdgeType(data["edge_type"]),
    )


def case_graph_to_dict(graph: CaseGraph) -> dict[str, Any]:
    """Convert a case graph into JSON-compatible data."""
    return {
        "nodes": {str(node_id): _node_to_dict(node) for node_id, node in graph.nodes.items()},
        "edges": {str(edge_id): _edge_to_dict(edge) for edge_id, edge in graph.edges.items()},
        "adjacency": {str(node_id): list(ids) for node_id, ids in graph.adjacency.items()},
        "counter": graph.counter,
    }


def case_graph_from_dict(data: dict[str, Any]) -> CaseGraph:
    """Build a case graph from data produced by case_graph_to_dict."""
    try:
        return CaseGraph(
            nodes={int(k): _node_from_dict(v) for k, v in data["nodes"].items()},
            edges={int(k): _edge_from_dict(v) for k, v in data["edges"].items()},
            adjacency={int(k): [int(i) for i in v] for k, v in data["adjacency"].items()},
            counter=int(data["counter"]),
        )
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"failed to deserialize case graph: {exc!r}") from exc


def serialize_case_graph(graph: CaseGraph) -> str:
    return json.dumps(case_graph_to_dict(graph))


def deserialize_case_graph(text: str) -> CaseGraph:
    """Parse a JSON string into a case graph; raise ValueError on bad input."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"failed to deserialize case graph: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("failed to deserialize case graph: expected a JSON object")
    return case_graph_from_dict(data)