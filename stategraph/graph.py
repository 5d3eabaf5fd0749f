"""State graph: declared vocabulary plus the transition table."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from stategraph.transition import Transition
from stategraph.types import Event, EventsDef, State, StatesDef


@dataclass
class StateGraph:
    """Transition table keyed by origin state, then event.

    ``states`` and ``events`` are the authoritative vocabulary checked at
    trigger time. ``start``/``end`` are markers used only for rendering.
    All containers keep insertion order.
    """

    name: str = ""
    states: StatesDef = field(default_factory=dict)
    events: EventsDef = field(default_factory=dict)
    start: list[State] = field(default_factory=list)
    end: list[State] = field(default_factory=list)
    transitions: dict[State, dict[Event, Transition]] = field(default_factory=dict)

    def add(self, transition: Transition) -> Transition:
        """Store a transition, merging destinations into an existing record.

        Returns the record now stored under (origin, event).
        """
        bucket = self.transitions.setdefault(transition.origin, {})
        existing = bucket.get(transition.event)
        stored = transition if existing is None else existing.merged(transition)
        bucket[transition.event] = stored
        return stored

    def get(self, origin: State, event: Event) -> Transition | None:
        bucket = self.transitions.get(origin)
        if bucket is None:
            return None
        return bucket.get(event)

    def records(self) -> Iterator[Transition]:
        """All stored transitions in declaration order."""
        for bucket in self.transitions.values():
            yield from bucket.values()

    def has_nfa_exit(self, state: State) -> bool:
        """True if any transition leaving ``state`` is nondeterministic."""
        return any(
            not t.is_deterministic for t in self.transitions.get(state, {}).values()
        )

    @property
    def is_nfa(self) -> bool:
        return any(not t.is_deterministic for t in self.records())

    @property
    def kind(self) -> str:
        return "NFA" if self.is_nfa else "DFA"
