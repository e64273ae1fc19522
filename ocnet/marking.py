"""Token markings of object-centric Petri nets and the bindings that fire transitions."""

from __future__ import annotations

import itertools
import threading
from collections import Counter
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeVar
from uuid import UUID

from .multiset import intersect_multisets
from .petri_net import ObjectCentricPetriNet, Place, Transition
from .reachability import ReachabilityCache

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

_token_ids = itertools.count()
_token_lock = threading.Lock()


@dataclass(frozen=True)
class OCToken:
    """A token standing for one object; tokens are told apart by id."""

    id: int

    @classmethod
    def new(cls) -> OCToken:
        """Create a token with a process-wide unique id."""
        with _token_lock:
            return cls(next(_token_ids))


@dataclass
class PlaceBinding:
    """Tokens a binding takes out of one input place."""

    place_id: UUID
    consumed: list[OCToken]
    count: int = 1


@dataclass(eq=False)
class ObjectBindingInfo:
    """The tokens of one object type that take part in a firing."""

    object_type: str
    tokens: list[OCToken]
    place_bindings: list[PlaceBinding] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObjectBindingInfo):
            return self.tokens == other.tokens
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class Binding:
    """One way of firing a transition: the tokens chosen per object type."""

    transition_id: UUID
    object_binding_info: dict[str, ObjectBindingInfo] = field(default_factory=dict)

    @classmethod
    def from_combinations(
        cls, transition_id: UUID, combinations: Iterable[ObjectBindingInfo]
    ) -> Binding:
        """Build a binding from one binding info per object type."""
        return cls(
            transition_id=transition_id,
            object_binding_info={info.object_type: info for info in combinations},
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Binding):
            return (
                self.transition_id == other.transition_id
                and self.object_binding_info == other.object_binding_info
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return ", ".join(
            f"{info.object_type}: {len(info.tokens)}"
            for info in self.object_binding_info.values()
        )


def cartesian_product(pools: Sequence[Sequence[T]]) -> list[list[T]]:
    """All ways of picking one item from each pool, in order."""
    return [list(combination) for combination in itertools.product(*pools)]


def power_set(bag: Mapping[H, int]) -> list[set[H]]:
    """All subsets of the distinct items of a multiset, the empty set first."""
    items = [item for item, count in bag.items() if count > 0]
    return [
        {item for position, item in enumerate(items) if mask & (1 << position)}
        for mask in range(1 << len(items))
    ]


def power_multiset(bag: Mapping[H, int]) -> list[Counter[H]]:
    """All non-empty sub-multisets of a multiset."""
    subsets: list[Counter[H]] = [Counter()]
    for item, count in bag.items():
        if count <= 0:
            continue
        existing = list(subsets)
        for times in range(1, count + 1):
            for subset in existing:
                extended = Counter(subset)
                extended[item] += times
                subsets.append(extended)
    return subsets[1:]


def _remove_up_to(bag: Counter[OCToken], token: OCToken, count: int) -> None:
    remaining = bag.get(token, 0) - count
    if remaining > 0:
        bag[token] = remaining
    else:
        bag.pop(token, None)


class Marking:
    """Assignment of token multisets to the places of a Petri net."""

    def __init__(self, petri_net: ObjectCentricPetriNet) -> None:
        self.petri_net = petri_net
        self.assignments: dict[UUID, Counter[OCToken]] = {}

    def _place(self, place_id: UUID) -> Place:
        place = self.petri_net.get_place(place_id)
        if place is None:
            raise KeyError(f"Place not found: {place_id}")
        return place

    def _require_initial(self, place_id: UUID) -> None:
        if not self._place(place_id).initial:
            raise ValueError(f"Place {place_id} is not an initial place")

    def add_initial_token_count(self, place_id: UUID, count: int) -> list[int]:
        """Put `count` fresh tokens into an initial place and return their ids."""
        self._require_initial(place_id)
        bag = self.assignments.setdefault(place_id, Counter())
        token_ids = []
        for _ in range(count):
            token = OCToken.new()
            token_ids.append(token.id)
            bag[token] += 1
        return token_ids

    def add_initial_tokens(self, place_id: UUID, tokens: Mapping[OCToken, int]) -> None:
        """Add a multiset of tokens to an initial place."""
        self._require_initial(place_id)
        self.add_tokens_unchecked(place_id, tokens)

    def add_tokens_unchecked(self, place_id: UUID, tokens: Mapping[OCToken, int]) -> None:
        """Add a multiset of tokens to any place, without checking the place."""
        bag = self.assignments.setdefault(place_id, Counter())
        for token, count in tokens.items():
            if count > 0:
                bag[token] += count

    def add_token_unchecked(self, place_id: UUID, token: OCToken) -> None:
        """Add one token to any place, without checking the place."""
        self.assignments.setdefault(place_id, Counter())[token] += 1

    def get_firing_combinations(self, transition: Transition) -> list[Binding]:
        """All bindings with which the transition can fire in this marking."""
        places_by_type: dict[str, list[tuple[UUID, Counter[OCToken]]]] = {}
        variable_by_type: dict[str, bool] = {}

        for arc in transition.input_arcs:
            place = self._place(arc.source_place_id)
            bag = self.assignments.get(arc.source_place_id, Counter())
            variable_by_type[place.oc_object_type] = arc.variable
            if bag.total() == 0:
                return []
            places_by_type.setdefault(place.oc_object_type, []).append(
                (arc.source_place_id, bag)
            )

        common_by_type: dict[str, Counter[OCToken]] = {}
        for object_type, places in places_by_type.items():
            common = intersect_multisets(bag for _, bag in places)
            if not common:
                return []
            common_by_type[object_type] = common

        per_type: list[list[ObjectBindingInfo]] = []
        for object_type, places in places_by_type.items():
            common = common_by_type[object_type]
            if variable_by_type[object_type]:
                choices = [
                    [token for token in common if token in subset]
                    for subset in power_set(common)[1:]
                ]
            else:
                choices = [[token] for token in common]
            per_type.append(
                [
                    ObjectBindingInfo(
                        object_type=object_type,
                        tokens=list(chosen),
                        place_bindings=[
                            PlaceBinding(place_id=place_id, consumed=list(chosen), count=1)
                            for place_id, _ in places
                        ],
                    )
                    for chosen in choices
                ]
            )

        if not per_type:
            return []
        return [
            Binding.from_combinations(transition.id, combination)
            for combination in cartesian_product(per_type)
        ]

    def fire_transition(self, transition: Transition, binding: Binding) -> None:
        """Consume the binding's tokens and put them into the output places."""
        for info in binding.object_binding_info.values():
            for place_binding in info.place_bindings:
                bag = self.assignments.get(place_binding.place_id)
                if bag is None:
                    raise KeyError(f"Place not found: {place_binding.place_id}")
                for token in place_binding.consumed:
                    _remove_up_to(bag, token, place_binding.count)

        for arc in transition.output_arcs:
            bag = self.assignments.setdefault(arc.target_place_id, Counter())
            place = self._place(arc.target_place_id)
            info = binding.object_binding_info.get(place.object_type)
            if info is None:
                raise KeyError(f"Binding has no tokens of object type {place.object_type!r}")
            for token in info.tokens:
                bag[token] += 1

    def is_enabled(self, transition: Transition) -> bool:
        """True if the transition has at least one binding."""
        return bool(self.get_firing_combinations(transition))

    def is_final(self) -> bool:
        """True if every place that holds tokens is a final place."""
        return all(
            not tokens or self._place(place_id).final_place
            for place_id, tokens in self.assignments.items()
        )

    def is_final_has_tokens(self) -> bool:
        """True if some tokens exist and all of them sit in final places."""
        has_tokens = any(tokens for tokens in self.assignments.values())
        return has_tokens and self.is_final()

    def get_initial_counts_per_type(self) -> dict[str, int]:
        """Number of tokens in the initial places, per object type."""
        counts: dict[str, int] = {}
        for place_id, tokens in self.assignments.items():
            place = self._place(place_id)
            if place.initial:
                counts[place.object_type] = tokens.total()
        return counts

    def has_dead_places(
        self,
        transition_enabled: Mapping[UUID, bool],
        reachability_cache: ReachabilityCache,
    ) -> list[UUID]:
        """Non-final places whose tokens can never be consumed again."""
        places_with_tokens = [
            place_id
            for place_id, bag in self.assignments.items()
            if bag and not self._place(place_id).final_place
        ]

        dead_places = []
        for place_id in places_with_tokens:
            place = self._place(place_id)

            if any(
                transition_enabled.get(arc.target_transition_id, False)
                for arc in place.output_arcs
            ):
                continue

            if any(
                other != place_id and reachability_cache.is_reachable(other, place_id)
                for other in places_with_tokens
            ):
                continue

            if not self._can_enable_consumer(place, reachability_cache):
                dead_places.append(place_id)

        return dead_places

    def _can_enable_consumer(
        self, place: Place, reachability_cache: ReachabilityCache
    ) -> bool:
        for arc in place.output_arcs:
            transition = self.petri_net.get_transition(arc.target_transition_id)
            if transition is None:
                continue
            other_inputs = [
                input_arc.source_place_id
                for input_arc in transition.input_arcs
                if input_arc.source_place_id != place.id
            ]
            if not other_inputs:
                continue
            if any(
                current != place.id and reachability_cache.is_reachable(current, input_id)
                for input_id in other_inputs
                for current in self.assignments
            ):
                return True
        return False