"""Caller context carried through a trigger to actions and hooks."""
from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Context:
    """Values, cancellation and an optional deadline for one or more triggers.

    The machine never inspects the context it is given. Actions that can
    block should check ``done`` and raise when it is set.
    ``deadline`` is a ``time.monotonic()`` timestamp.
    """

    values: Mapping[str, Any] = field(default_factory=dict)
    deadline: float | None = None
    _cancelled: threading.Event = field(
        default_factory=threading.Event, init=False, repr=False, compare=False,
    )

    @classmethod
    def with_timeout(cls, seconds: float, values: Mapping[str, Any] | None = None) -> Context:
        if seconds < 0:
            raise ValueError(f"timeout must be >= 0, got {seconds}")
        return cls(values=dict(values or {}), deadline=time.monotonic() + seconds)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def done(self) -> bool:
        return self.cancelled or self.expired
