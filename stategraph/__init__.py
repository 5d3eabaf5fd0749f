"""stategraph - Declarative finite state machines with lifecycle hooks."""
from __future__ import annotations

from stategraph.context import Context
from stategraph.graph import StateGraph
from stategraph.machine import StateMachine
from stategraph.plantuml import PlantUMLConfig
from stategraph.processor import CallbackProcessor, EventProcessor
from stategraph.transition import Transition, noop_action
from stategraph.types import (
    END,
    NONE,
    START,
    Action,
    ActionError,
    Event,
    EventsDef,
    FrozenMachineError,
    State,
    StatesDef,
    TransitionError,
    UndefinedTransitionError,
    UnknownEventError,
    UnknownStateError,
)

__all__ = [
    "StateMachine",
    "StateGraph",
    "Transition",
    "noop_action",
    "EventProcessor",
    "CallbackProcessor",
    "Context",
    "PlantUMLConfig",
    "State",
    "Event",
    "StatesDef",
    "EventsDef",
    "Action",
    "NONE",
    "START",
    "END",
    "TransitionError",
    "UnknownStateError",
    "UnknownEventError",
    "UndefinedTransitionError",
    "ActionError",
    "FrozenMachineError",
]
