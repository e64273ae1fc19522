"""Cached reachability between places of an object-centric Petri net."""

from __future__ import annotations

import threading
from collections import deque
from uuid import UUID

from .petri_net import ObjectCentricPetriNet


class ReachabilityCache:
    """Answers whether one place can reach another, remembering the answers.

    Reachability follows place -> transition -> place steps and only moves
    into places of the same object type as the place being left.
    """

    def __init__(self, petri_net: ObjectCentricPetriNet) -> None:
        self.petri_net = petri_net
        self._cache: dict[tuple[UUID, UUID], bool] = {}
        self._lock = threading.Lock()

    def is_reachable(self, from_place_id: UUID, to_place_id: UUID) -> bool:
        """True if the target place can be reached from the source place."""
        if from_place_id == to_place_id:
            return True

        key = (from_place_id, to_place_id)
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = self._bfs_reachable(from_place_id, to_place_id)
        with self._lock:
            self._cache[key] = result
        return result

    def _bfs_reachable(self, from_place_id: UUID, to_place_id: UUID) -> bool:
        net = self.petri_net
        visited_places = {from_place_id}
        visited_transitions: set[UUID] = set()
        queue = deque([from_place_id])

        while queue:
            place = net.get_place(queue.popleft())
            if place is None:
                continue
            for input_arc in place.output_arcs:
                transition_id = input_arc.target_transition_id
                if transition_id in visited_transitions:
                    continue
                visited_transitions.add(transition_id)

                transition = net.get_transition(transition_id)
                if transition is None:
                    continue

                for output_arc in transition.output_arcs:
                    next_place_id = output_arc.target_place_id
                    next_place = net.places[next_place_id]
                    if next_place.oc_object_type != place.oc_object_type:
                        continue
                    if next_place_id == to_place_id:
                        return True
                    if next_place_id not in visited_places:
                        visited_places.add(next_place_id)
                        queue.append(next_place_id)

        return False