# ocnet

Building blocks for object-centric process mining. It is written in pure
Python and needs no third-party packages.

## Modules

- **`ocnet.case`**: case graphs. `Event` and `Object` nodes are joined by
  typed `Edge`s of kind `EdgeType.DF` (directly follows), `EdgeType.E2O`
  (event to object) or `EdgeType.O2O` (object to object).
  `CaseGraph` stores nodes, edges and an adjacency list, and hands out fresh
  ids with `new_id()`. It answers neighbour queries by edge type. It also
  counts nodes and edges by type: `get_case_stats()` returns a `CaseStats`,
  which can render or print the detailed edge counts.
- **`ocnet.case_serialization`**: `serialize_case_graph` turns a case graph
  into a JSON string. `deserialize_case_graph` reads it back. The
  dictionary-level forms are `case_graph_to_dict` and `case_graph_from_dict`.
  Bad input raises `ValueError`.
- **`ocnet.case_dot`**: `case_graph_to_dot` gives the text of a strict
  directed Graphviz DOT graph. Events are drawn as ellipses, objects as boxes,
  and each edge is labelled with its type. An optional `dpi_factor` sets
  `dpi` to `dpi_factor * 96`. `export_case_graph_dot` writes that text to a
  file.
- **`ocnet.petri_net`**: object-centric Petri nets. `ObjectCentricPetriNet`
  holds typed `Place`s, `Transition`s, and `InputArc`s and `OutputArc`s. An
  arc can be variable and carries a weight. The net gives pre-sets and
  post-sets of places and transitions. Adding an arc that names an unknown
  place or transition raises `KeyError`.
- **`ocnet.marking`**: `Marking` assigns multisets of `OCToken`s to places.
  It lists every `Binding` with which a transition can fire. Variable arcs
  may take any non-empty subset of the common tokens. It can fire a
  transition with a binding, check for final markings, and find dead places.
  Helpers: `cartesian_product`, `power_set`, `power_multiset`.
- **`ocnet.reachability`**: `ReachabilityCache` answers whether one place can
  reach another and remembers each answer. It only moves between places of
  the same object type.
- **`ocnet.multiset`**: `intersect_multisets` intersects several multisets,
  keeping each element at its smallest count.
- **`ocnet.permutation`**: `next_permutation` steps through the permutations
  of a list. Each list advances in lexicographic order and wraps around after
  the last permutation. `next_index_permutation` is the underlying step.
  `reset_permutations` clears the remembered positions.

## Example

```python
from ocnet.marking import Marking
from ocnet.petri_net import ObjectCentricPetriNet
from ocnet.reachability import ReachabilityCache

net = ObjectCentricPetriNet()
start = net.add_place("start", "order", initial=True)
done = net.add_place("done", "order", final_place=True)
place_order = net.add_transition("place order")
net.add_input_arc(start.id, place_order.id)
net.add_output_arc(place_order.id, done.id)

print(ReachabilityCache(net).is_reachable(start.id, done.id))  # True

marking = Marking(net)
marking.add_initial_token_count(start.id, 1)
binding = marking.get_firing_combinations(place_order)[0]
marking.fire_transition(place_order, binding)
print(marking.is_final_has_tokens())  # True
```

```python
from ocnet.case import CaseGraph, Edge, EdgeType, Event, Object
from ocnet.case_dot import case_graph_to_dot
from ocnet.case_serialization import deserialize_case_graph, serialize_case_graph

graph = CaseGraph()
graph.add_node(Event(1, "A"))
graph.add_node(Object(2, "Person"))
graph.add_edge(Edge(1, 1, 2, EdgeType.E2O))

copy = deserialize_case_graph(serialize_case_graph(graph))
print(copy.get_neighbors_by_edge_type(1, EdgeType.E2O))  # [2]
print(case_graph_to_dot(graph))
```

## What it does not do

- The package has no reader for Petri nets or event logs stored in files.
  Nets and case graphs are built in code, and case graphs can also come from
  the package's own JSON format.
- It does not compute shortest paths between places, and it does not
  compute which transitions every path must pass through. Only yes/no
  reachability is offered.
- It does not render images. The DOT text must be passed to Graphviz
  separately.
- There is no command-line tool. Everything is used as a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```