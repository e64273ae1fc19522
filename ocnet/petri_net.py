"""Object-centric Petri nets: typed places, transitions and the arcs between them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from uuid import UUID


@dataclass(eq=False)
class InputArc:
    """An arc from a place into a transition."""

    source_place_id: UUID
    target_transition_id: UUID
    variable: bool = False
    weight: int = 1
    id: UUID = field(default_factory=uuid.uuid4)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, InputArc):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class OutputArc:
    """An arc from a transition into a place."""

    source_transition_id: UUID
    target_place_id: UUID
    variable: bool = False
    weight: int = 1
    id: UUID = field(default_factory=uuid.uuid4)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OutputArc):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class Place:
    """A place holding tokens of a single object type."""

    name: str | None
    object_type: str
    initial: bool = False
    final_place: bool = False
    id: UUID = field(default_factory=uuid.uuid4)
    input_arcs: set[OutputArc] = field(default_factory=set)
    output_arcs: set[InputArc] = field(default_factory=set)

    @property
    def oc_object_type(self) -> str:
        return self.object_type

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Place):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class Transition:
    """A transition; its name is the event type it produces."""

    name: str
    label: str | None = None
    silent: bool = False
    id: UUID = field(default_factory=uuid.uuid4)
    input_arcs: set[InputArc] = field(default_factory=set)
    output_arcs: set[OutputArc] = field(default_factory=set)

    @property
    def event_type(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Transition):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class ObjectCentricPetriNet:
    """Places, transitions and arcs, each stored by id."""

    places: dict[UUID, Place] = field(default_factory=dict)
    transitions: dict[UUID, Transition] = field(default_factory=dict)
    input_arcs: dict[UUID, InputArc] = field(default_factory=dict)
    output_arcs: dict[UUID, OutputArc] = field(default_factory=dict)

    def add_place(
        self,
        name: str | None,
        object_type: str,
        initial: bool = False,
        final_place: bool = False,
    ) -> Place:
        place = Place(name=name, object_type=object_type, initial=initial, final_place=final_place)
        self.places[place.id] = place
        return place

    def get_place(self, place_id: UUID) -> Place | None:
        return self.places.get(place_id)

    def get_initial_places(self) -> list[Place]:
        return [place for place in self.places.values() if place.initial]

    def get_final_places(self) -> list[Place]:
        return [place for place in self.places.values() if place.final_place]

    def get_final_place_for_type(self, object_type: str) -> Place | None:
        return next(
            (
                place
                for place in self.places.values()
                if place.object_type == object_type and place.final_place
            ),
            None,
        )

    def add_transition(self, name: str, label: str | None = None, silent: bool = False) -> Transition:
        transition = Transition(name=name, label=label, silent=silent)
        self.transitions[transition.id] = transition
        return transition

    def get_transition(self, transition_id: UUID) -> Transition | None:
        return self.transitions.get(transition_id)

    def add_input_arc(
        self,
        source_place_id: UUID,
        target_transition_id: UUID,
        variable: bool = False,
        weight: int = 1,
    ) -> InputArc:
        """Connect a place to a transition; raise KeyError if either is unknown."""
        place = self.places.get(source_place_id)
        if place is None:
            raise KeyError(f"Source place with ID {source_place_id} does not exist.")
        transition = self.transitions.get(target_transition_id)
        if transition is None:
            raise KeyError(f"Target transition with ID {target_transition_id} does not exist.")
        arc = InputArc(source_place_id, target_transition_id, variable, weight)
        self.input_arcs[arc.id] = arc
        place.output_arcs.add(arc)
        transition.input_arcs.add(arc)
        return arc

    def add_output_arc(
        self,
        source_transition_id: UUID,
        target_place_id: UUID,
        variable: bool = False,
        weight: int = 1,
    ) -> OutputArc:
        """Connect a transition to a place; raise KeyError if either is unknown."""
        transition = self.transitions.get(source_transition_id)
        if transition is None:
            raise KeyError(f"Source transition with ID {source_transition_id} does not exist.")
        place = self.places.get(target_place_id)
        if place is None:
            raise KeyError(f"Target place with ID {target_place_id} does not exist.")
        arc = OutputArc(source_transition_id, target_place_id, variable, weight)
        self.output_arcs[arc.id] = arc
        transition.output_arcs.add(arc)
        place.input_arcs.add(arc)
        return arc

    def get_input_arc(self, arc_id: UUID) -> InputArc | None:
        return self.input_arcs.get(arc_id)

    def get_output_arc(self, arc_id: UUID) -> OutputArc | None:
        return self.output_arcs.get(arc_id)

    def get_pre_set_of_place(self, place_id: UUID) -> list[Transition]:
        place = self.places.get(place_id)
        if place is None:
            return []
        return [
            self.transitions[arc.source_transition_id]
            for arc in place.input_arcs
            if arc.source_transition_id in self.transitions
        ]

    def get_post_set_of_place(self, place_id: UUID) -> list[Transition]:
        place = self.places.get(place_id)
        if place is None:
            return []
        return [
            self.transitions[arc.target_transition_id]
            for arc in place.output_arcs
            if arc.target_transition_id in self.transitions
        ]

    def get_pre_set_of_transition(self, transition_id: UUID) -> list[Place]:
        transition = self.transitions.get(transition_id)
        if transition is None:
            return []
        return [
            self.places[arc.source_place_id]
            for arc in transition.input_arcs
            if arc.source_place_id in self.places
        ]

    def get_post_set_of_transition(self, transition_id: UUID) -> list[Place]:
        transition = self.transitions.get(transition_id)
        if transition is None:
            return []
        return [
            self.places[arc.target_place_id]
            for arc in transition.output_arcs
            if arc.target_place_id in self.places
        ]

    def get_input_arcs_for_place(self, place_id: UUID) -> set[OutputArc]:
        return set(self._require_place(place_id).input_arcs)

    def get_output_arcs_for_place(self, place_id: UUID) -> set[InputArc]:
        return set(self._require_place(place_id).output_arcs)

    def get_input_arcs_for_transition(self, transition_id: UUID) -> set[InputArc]:
        return set(self._require_transition(transition_id).input_arcs)

    def get_output_arcs_for_transition(self, transition_id: UUID) -> set[OutputArc]:
        return set(self._require_transition(transition_id).output_arcs)

    def _require_place(self, place_id: UUID) -> Place:
        try:
            return self.places[place_id]
        except KeyError:
            raise KeyError(f"Place not found: {place_id}") from None

    def _require_transition(self, transition_id: UUID) -> Transition:
        try:
            return self.transitions[transition_id]
        except KeyError:
            raise KeyError(f"Transition not found: {transition_id}") from None