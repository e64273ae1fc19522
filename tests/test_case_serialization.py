import json

import pytest

from ocnet.case import CaseGraph, Edge, EdgeType, Event, Object
from ocnet.case_serialization import (
    case_graph_from_dict,
    case_graph_to_dict,
    deserialize_case_graph,
    serialize_case_graph,
)


def _graph():
    graph = CaseGraph()
    e1 = Event(graph.new_id(), "A")
    e2 = Event(graph.new_id(), "B")
    o1 = Object(graph.new_id(), "Person")
    for node in (e1, e2, o1):
        graph.add_node(node)
    graph.add_edge(Edge(graph.new_id(), e1.id, e2.id, EdgeType.DF))
    graph.add_edge(Edge(graph.new_id(), e2.id, o1.id, EdgeType.E2O))
    return graph


def test_node_wire_format():
    data = case_graph_to_dict(_graph())
    assert data["nodes"]["1"] == {"type": "EventNode", "data": {"id": 1, "event_type": "A"}}
    assert data["nodes"]["3"] == {
        "type": "ObjectNode",
        "data": {"id": 3, "object_type": "Person"},
    }


def test_edge_wire_format():
    data = case_graph_to_dict(_graph())
    assert data["edges"]["4"] == {"id": 4, "from": 1, "to": 2, "edge_type": "DF"}
    assert data["counter"] == 5


def test_string_round_trip():
    graph = _graph()
    restored = deserialize_case_graph(serialize_case_graph(graph))
    assert restored.nodes == graph.nodes
    assert {k: v.type_name for k, v in restored.nodes.items()} == {
        k: v.type_name for k, v in graph.nodes.items()
    }
    assert [n.is_event for n in restored.nodes.values()] == [
        n.is_event for n in graph.nodes.values()
    ]
    assert restored.edges == graph.edges
    assert restored.adjacency == graph.adjacency
    assert restored.counter == graph.counter


def test_round_trip_keeps_behaviour():
    restored = deserialize_case_graph(serialize_case_graph(_graph()))
    assert restored.get_neighbors_by_edge_type(1, EdgeType.DF) == [2]
    assert restored.new_id() == 6


def test_dict_round_trip_through_json():
    graph = _graph()
    data = json.loads(json.dumps(case_graph_to_dict(graph)))
    assert case_graph_to_dict(case_graph_from_dict(data)) == case_graph_to_dict(graph)


def test_empty_graph_round_trip():
    restored = deserialize_case_graph(serialize_case_graph(CaseGraph()))
    assert restored.nodes == {}
    assert restored.edges == {}
    assert restored.counter == 0


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        deserialize_case_graph("not json")


def test_missing_key_raises():
    with pytest.raises(ValueError):
        deserialize_case_graph(json.dumps({"nodes": {}, "edges": {}}))


def test_unknown_node_type_raises():
    data = case_graph_to_dict(_graph())
    data["nodes"]["1"]["type"] = "Mystery"
    with pytest.raises(ValueError):
        case_graph_from_dict(data)


def test_unknown_edge_type_raises():
    data = case_graph_to_dict(_graph())
    data["edges"]["4"]["edge_type"] = "XX"
    with pytest.raises(ValueError):
        case_graph_from_dict(data)