"""StateMachine - transition declaration and the trigger engine."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping

from stategraph import plantuml
from stategraph.graph import StateGraph
from stategraph.processor import EventProcessor
from stategraph.types import (
    ActionError,
    Event,
    FrozenMachineError,
    State,
    UndefinedTransitionError,
    UnknownEventError,
    UnknownStateError,
)

if TYPE_CHECKING:
    from stategraph.transition import Transition


class StateMachine:
    """A finite state machine built by declaration, then triggered.

    Declarations are only allowed until the machine is frozen, either by
    ``freeze()`` or by the first ``trigger()``. After that the machine is
    read-only and may be triggered from any number of threads.
    """

    def __init__(self, name: str = "", processor: EventProcessor | None = None) -> None:
        self._graph = StateGraph(name=name)
        self._processor = processor if processor is not None else EventProcessor()
        self._frozen: bool = False

    @property
    def name(self) -> str:
        return self._graph.name

    @property
    def graph(self) -> StateGraph:
        return self._graph

    @property
    def processor(self) -> EventProcessor:
        return self._processor

    @property
    def frozen(self) -> bool:
        return self._frozen

    # --- Declaration ---

    def _check_open(self) -> None:
        if self._frozen:
            raise FrozenMachineError(
                f"state machine {self._graph.name!r} is frozen; declare before triggering"
            )

    def rename(self, name: str) -> None:
        self._check_open()
        self._graph.name = name

    def declare_states(self, states: Mapping[State, str]) -> None:
        """Set the state vocabulary (state -> description)."""
        self._check_open()
        self._graph.states = dict(states)

    def declare_events(self, events: Mapping[Event, str]) -> None:
        """Set the event vocabulary (event -> description)."""
        self._check_open()
        self._graph.events = dict(events)

    def declare_start(self, states: Iterable[State]) -> None:
        self._check_open()
        self._graph.start = list(states)

    def declare_end(self, states: Iterable[State]) -> None:
        self._check_open()
        self._graph.end = list(states)

    def add_transitions(self, *transitions: Transition) -> None:
        """Add transitions, merging destinations of repeated (origin, event) pairs.

        Not checked against the declared vocabulary; that happens on trigger.
        """
        self._check_open()
        for transition in transitions:
            self._graph.add(transition)

    def set_default_hooks(self, processor: EventProcessor | None) -> None:
        """Replace the hooks used by transitions without their own processor."""
        self._check_open()
        self._processor = processor if processor is not None else EventProcessor()

    def freeze(self) -> None:
        self._frozen = True

    # --- Triggering ---

    def trigger(self, ctx: Any, origin: State, event: Event) -> State:
        """Fire the transition for (origin, event) and return the resulting state.

        Raises UnknownStateError, UnknownEventError or UndefinedTransitionError
        before any hook runs, and ActionError after ``on_action_failure`` when
        the action fails. Hook failures are reported on stderr and discarded.
        The returned state is whatever the action produced; it is not checked
        against the vocabulary or the candidate destinations.
        """
        self._frozen = True
        graph = self._graph
        if origin not in graph.states:
            raise UnknownStateError(origin)
        if event not in graph.events:
            raise UnknownEventError(event)
        transition = graph.get(origin, event)
        if transition is None:
            raise UndefinedTransitionError(origin, event)

        processor = transition.processor
        if processor is None:
            processor = self._processor
        candidates = transition.destinations

        _fire_hook("on_exit", processor.on_exit, ctx, origin, event)
        try:
            result = transition.action(ctx, origin, event, candidates)
        except ActionError as exc:
            _fire_hook(
                "on_action_failure", processor.on_action_failure,
                ctx, origin, event, candidates, exc,
            )
            raise
        except Exception as exc:
            _fire_hook(
                "on_action_failure", processor.on_action_failure,
                ctx, origin, event, candidates, exc,
            )
            raise ActionError(origin, event, exc) from exc

        _fire_hook("on_enter", processor.on_enter, ctx, result)
        return result

    # --- Rendering ---

    def show(self, config: plantuml.PlantUMLConfig | None = None) -> str:
        """PlantUML script for this machine plus online image links."""
        return plantuml.show(self._graph, config)


def _fire_hook(name: str, hook: Callable[..., None], *args: Any) -> None:
    """Call a hook, reporting and discarding any exception it raises."""
    try:
        hook(*args)
    except Exception:
        print(f"stategraph: {name} hook error: {sys.exc_info()[1]}", file=sys.stderr)
