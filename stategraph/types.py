"""Shared type aliases and error types for stategraph."""
from __future__ import annotations

from typing import Any, Callable

State = str
Event = str

StatesDef = dict[State, str]
EventsDef = dict[Event, str]

Action = Callable[[Any, State, Event, tuple[State, ...]], State]

NONE: State = ""
START: State = "[*]"
END: State = "[*]"


class TransitionError(Exception):
    """Base class for trigger failures. ``state`` is the state paired with the failure."""

    state: State = NONE


class UnknownStateError(TransitionError):
    """Raised when the origin is not a declared state."""

    def __init__(self, origin: State) -> None:
        self.origin = origin
        super().__init__(f"state machine has no state {origin!r}")


class UnknownEventError(TransitionError):
    """Raised when the event is not a declared event."""

    def __init__(self, event: Event) -> None:
        self.event = event
        super().__init__(f"state machine has no event {event!r}")


class UndefinedTransitionError(TransitionError):
    """Raised when no transition is declared for (origin, event)."""

    def __init__(self, origin: State, event: Event) -> None:
        self.origin = origin
        self.event = event
        super().__init__(f"no transition defined for [{origin} --{event}--> ???]")


class ActionError(TransitionError):
    """Raised when a transition's action fails.

    Actions may raise this directly to report the state they ended in.
    Any other exception from an action is wrapped, with ``cause`` set to it.
    """

    def __init__(
        self,
        origin: State,
        event: Event,
        cause: BaseException | None = None,
        state: State = NONE,
    ) -> None:
        self.origin = origin
        self.event = event
        self.cause = cause
        self.state = state
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"action failed for [{origin} --{event}-->]{detail}")


class FrozenMachineError(RuntimeError):
    """Raised on a declaration after the machine was frozen."""
