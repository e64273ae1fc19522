"""Object-centric process mining: case graphs, Petri nets, markings and reachability."""

__version__ = "0.3.20"

__all__ = [
    "case",
    "case_serialization",
    "case_dot",
    "petri_net",
    "multiset",
    "permutation",
    "reachability",
    "marking",
]