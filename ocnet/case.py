"""Object-centric case graphs: events, objects and typed edges between them."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union


class _CaseNode:
    """Common behaviour of case graph nodes: identity is the node id."""

    id: int

    @property
    def is_event(self) -> bool:
        return isinstance(self, Event)

    @property
    def is_object(self) -> bool:
        return isinstance(self, Object)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _CaseNode):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class Event(_CaseNode):
    """An event node of a case graph."""

    id: int
    event_type: str

    @property
    def type_name(self) -> str:
        return self.event_type


@dataclass(eq=False)
class Object(_CaseNode):
    """An object node of a case graph."""

    id: int
    object_type: str

    @property
    def type_name(self) -> str:
        return self.object_type


Node = Union[Event, Object]


class EdgeType(Enum):
    """Kind of relation an edge expresses."""

    DF = "DF"  # event to event (directly follows)
    O2O = "O2O"  # object to object
    E2O = "E2O"  # event to object


@dataclass(frozen=True)
class Edge:
    """A directed, typed edge between two nodes identified by id."""

    id: int
    source: int
    target: int
    edge_type: EdgeType


@dataclass
class CaseStats:
    """Node and edge counts of a case graph."""

    query_event_counts: dict[str, int]
    query_object_counts: dict[str, int]
    query_edge_counts: dict[EdgeType, int]
    edge_type_counts: dict[tuple[EdgeType, str, str], int]

    def _stat_lines(self) -> Iterator[str]:
        yield "Detailed edge counts:"
        df_count = 0
        for (edge_type, from_type, to_type), count in self.edge_type_counts.items():
            if edge_type is EdgeType.DF:
                df_count += count
            yield f"Edge: ({edge_type.value},{from_type},{to_type}) Difference: {count}"
        yield f"Total DF edges: {df_count}"

    def format_stats(self) -> str:
        """Render the detailed edge counts as text."""
        return "\n".join(self._stat_lines())

    def pretty_print(self) -> None:
        """Print the detailed edge counts, one line per edge kind."""
        for line in self._stat_lines():
            print(line)


@dataclass
class CaseGraph:
    """A graph of events and objects connected by DF, O2O and E2O edges."""

    nodes: dict[int, Node] = field(default_factory=dict)
    edges: dict[int, Edge] = field(default_factory=dict)
    adjacency: dict[int, list[int]] = field(default_factory=dict)
    counter: int = 0

    def new_id(self) -> int:
        """Return a fresh id, counting up from 1."""
        self.counter += 1
        return self.counter

    def get_edge_between(self, source_id: int, target_id: int) -> Edge | None:
        return next(
            (
                edge
                for edge in self.edges.values()
                if edge.source == source_id and edge.target == target_id
            ),
            None,
        )

    def add_node(self, node: Node) -> None:
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge) -> None:
        """Store an edge and register it with both of its endpoints."""
        self.edges[edge.id] = edge
        self.adjacency.setdefault(edge.source, []).append(edge.id)
        self.adjacency.setdefault(edge.target, []).append(edge.id)

    def get_node(self, node_id: int) -> Node | None:
        return self.nodes.get(node_id)

    def get_edge(self, edge_id: int) -> Edge | None:
        return self.edges.get(edge_id)

    def get_connected_edges(self, node_id: int) -> list[int] | None:
        """Ids of edges touching the node, or None if it has none registered."""
        return self.adjacency.get(node_id)

    def get_neighbors_by_edge_type(self, node_id: int, edge_type: EdgeType) -> list[int]:
        """Targets of the edges of the given type that touch the node."""
        neighbors = []
        for edge_id in self.adjacency.get(node_id, ()):
            edge = self.edges.get(edge_id)
            if edge is not None and edge.edge_type is edge_type:
                neighbors.append(edge.target)
        return neighbors

    def count_nodes_by_type(self) -> tuple[dict[str, int], dict[str, int]]:
        """Count events per event type and objects per object type."""
        event_counts: Counter[str] = Counter()
        object_counts: Counter[str] = Counter()
        for node in self.nodes.values():
            if isinstance(node, Event):
                event_counts[node.event_type] += 1
            else:
                object_counts[node.object_type] += 1
        return dict(event_counts), dict(object_counts)

    def count_edges_by_type(self) -> dict[EdgeType, int]:
        return dict(Counter(edge.edge_type for edge in self.edges.values()))

    def count_edges_by_type_distinct(self) -> dict[tuple[EdgeType, str, str], int]:
        """Count edges per (edge type, source node type, target node type)."""
        counts: Counter[tuple[EdgeType, str, str]] = Counter()
        for edge in self.edges.values():
            from_type = self._require_node(edge.source).type_name
            to_type = self._require_node(edge.target).type_name
            counts[(edge.edge_type, from_type, to_type)] += 1
        return dict(counts)

    def get_case_stats(self) -> CaseStats:
        event_counts, object_counts = self.count_nodes_by_type()
        return CaseStats(
            query_event_counts=event_counts,
            query_object_counts=object_counts,
            query_edge_counts=self.count_edges_by_type(),
            edge_type_counts=self.count_edges_by_type_distinct(),
        )

    def _require_node(self, node_id: int) -> Node:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise KeyError(f"node {node_id} is not part of the graph") from None