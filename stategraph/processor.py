"""Lifecycle hooks invoked around a transition's action."""
from __future__ import annotations

from typing import Any, Callable

from stategraph.types import Event, State

ExitHook = Callable[[Any, State, Event], None]
FailureHook = Callable[[Any, State, Event, tuple[State, ...], BaseException], None]
EnterHook = Callable[[Any, State], None]


class EventProcessor:
    """Exit/failure/enter hooks. Every hook is a no-op; override any subset.

    Hooks report failure by raising. The machine reports and discards such
    failures, so a hook can never change the outcome of a trigger.
    """

    def on_exit(self, ctx: Any, state: State, event: Event) -> None:
        """Called before the action runs, while still in ``state``."""

    def on_action_failure(
        self,
        ctx: Any,
        origin: State,
        event: Event,
        candidates: tuple[State, ...],
        err: BaseException,
    ) -> None:
        """Called with the full candidate set when the action raised ``err``."""

    def on_enter(self, ctx: Any, state: State) -> None:
        """Called with the state the action resolved to."""


class CallbackProcessor(EventProcessor):
    """EventProcessor assembled from plain callables."""

    def __init__(
        self,
        on_exit: ExitHook | None = None,
        on_action_failure: FailureHook | None = None,
        on_enter: EnterHook | None = None,
    ) -> None:
        self._on_exit = on_exit
        self._on_action_failure = on_action_failure
        self._on_enter = on_enter

    def on_exit(self, ctx: Any, state: State, event: Event) -> None:
        if self._on_exit is not None:
            self._on_exit(ctx, state, event)

    def on_action_failure(
        self,
        ctx: Any,
        origin: State,
        event: Event,
        candidates: tuple[State, ...],
        err: BaseException,
    ) -> None:
        if self._on_action_failure is not None:
            self._on_action_failure(ctx, origin, event, candidates, err)

    def on_enter(self, ctx: Any, state: State) -> None:
        if self._on_enter is not None:
            self._on_enter(ctx, state)
