"""Transition record and the default pass-through action."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Iterable

from stategraph.types import NONE, Action, Event, State

if TYPE_CHECKING:
    from stategraph.processor import EventProcessor


def noop_action(ctx: Any, origin: State, event: Event, candidates: tuple[State, ...]) -> State:
    """Resolve to the first candidate, or NONE when there is none."""
    if not candidates:
        return NONE
    return candidates[0]


def unique(states: Iterable[State]) -> tuple[State, ...]:
    """Drop repeated states, keeping the first occurrence of each."""
    return tuple(dict.fromkeys(states))


@dataclass(frozen=True)
class Transition:
    """One (origin, event) mapping to one or more candidate destinations.

    More than one destination makes the transition nondeterministic: the
    action picks the actual outcome when it fires. ``processor`` overrides
    the machine's default hooks for this transition only.
    """

    origin: State
    event: Event
    destinations: tuple[State, ...]
    action: Action = noop_action
    processor: EventProcessor | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.destinations, str):
            object.__setattr__(self, "destinations", (self.destinations,))
        object.__setattr__(self, "destinations", unique(self.destinations))
        if not self.destinations:
            raise ValueError(
                f"Transition {self.origin!r} --{self.event}--> needs at least one destination"
            )

    @property
    def is_deterministic(self) -> bool:
        return len(self.destinations) == 1

    def merged(self, other: Transition) -> Transition:
        """Return a copy with ``other``'s destinations appended.

        Only destinations accumulate; ``other``'s action and processor
        are ignored.
        """
        return replace(self, destinations=self.destinations + other.destinations)

    def __str__(self) -> str:
        return f"{self.origin} --> {'|'.join(self.destinations)}: {self.event}"
