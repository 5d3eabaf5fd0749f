"""Tests for Context and its use by actions."""
import time

import pytest

from stategraph import ActionError, Context, StateMachine, Transition


def test_values_lookup():
    ctx = Context(values={"user": "ada"})
    assert ctx.get("user") == "ada"
    assert ctx.get("missing", 7) == 7


def test_cancel():
    ctx = Context()
    assert ctx.cancelled is False
    assert ctx.done is False

    ctx.cancel()

    assert ctx.cancelled is True
    assert ctx.done is True


def test_no_deadline_never_expires():
    assert Context().expired is False


def test_with_timeout_expires():
    ctx = Context.with_timeout(0)
    assert ctx.expired is True
    assert ctx.done is True


def test_with_timeout_in_future():
    ctx = Context.with_timeout(60, values={"k": 1})
    assert ctx.expired is False
    assert ctx.deadline > time.monotonic()
    assert ctx.get("k") == 1


def test_negative_timeout_rejected():
    with pytest.raises(ValueError, match="timeout must be >= 0"):
        Context.with_timeout(-1)


def test_cancelled_context_observed_by_action():
    """The machine does not check cancellation; the action does."""
    # Arrange
    def action(ctx, origin, event, candidates):
        if ctx.done:
            raise RuntimeError("cancelled")
        return candidates[0]

    sm = StateMachine()
    sm.declare_states({"a": "", "b": ""})
    sm.declare_events({"go": ""})
    sm.add_transitions(Transition("a", "go", ["b"], action=action))
    ctx = Context()

    # Act & Assert
    assert sm.trigger(ctx, "a", "go") == "b"
    ctx.cancel()
    with pytest.raises(ActionError, match="cancelled"):
        sm.trigger(ctx, "a", "go")
