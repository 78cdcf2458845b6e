"""Reactive cells: a single value that announces its changes.

A ReactiveCell holds one value and an ordered list of listeners. Accepted
writes call every listener synchronously with (new, old), in registration
order. Each notification pass iterates a snapshot of the listener list, so
listeners connected or disconnected mid-pass only affect later passes.

A disabled cell is frozen: writes neither store nor notify, and sends are
dropped. Re-enabling does not replay anything.

Thread safety: none. Confine a cell to one thread or guard it externally.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from reactcell._errors import InvalidListenerError
from reactcell._types import Listener, TypeTag
from reactcell.subscription import Subscription

T = TypeVar("T")

logger = logging.getLogger("reactcell.cell")


class ReactiveCell(Generic[T]):
    """A single value with change listeners and an enabled gate.

    By default a listener that raises aborts the rest of the pass and the
    exception reaches the caller of write()/send(). With isolate_errors=True
    failures are logged and the remaining listeners still run.
    """

    __slots__ = ("_value", "_enabled", "_listeners", "_isolate_errors")

    def __init__(self, value: T, *, isolate_errors: bool = False) -> None:
        self._value = value
        self._enabled = True
        self._listeners: list[Subscription] = []
        self._isolate_errors = isolate_errors

    def read(self) -> T:
        return self._value

    def write(self, value: T, force: bool = False) -> None:
        """Store value and notify listeners with (value, old).

        Skipped when the cell is disabled, or when value == current value
        and force is False.
        """
        if not self._enabled:
            return
        old = self._value
        changed = value != old
        if not changed and not force:
            return
        self._value = value
        self._notify(value, old)

    def send(self, value: T) -> None:
        """Notify listeners with (value, current) without storing value."""
        if not self._enabled:
            return
        self._notify(value, self._value)

    def listen(self, callback: Listener[T], call_immediately: bool = False) -> Subscription:
        """Register callback(new, old). Returns a Subscription to disconnect it.

        With call_immediately, callback(current, None) runs before returning.

        Usage:
            volume = ReactiveCell(5)
            sub = volume.listen(lambda new, old: print(old, "->", new))
            volume.write(7)   # prints 5 -> 7
            sub()             # disconnected
        """
        if not callable(callback):
            raise InvalidListenerError(
                f"listener must be callable, got {type(callback).__name__}"
            )
        sub = Subscription(self, callback)
        self._listeners.append(sub)
        logger.debug("Connected %r (%d listeners)", callback, len(self._listeners))
        if call_immediately:
            try:
                self._invoke(sub, self._value, None)
            except Exception:
                sub.disconnect()
                raise
        return sub

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, flag: bool) -> None:
        self._enabled = bool(flag)

    def set_enabled(self, flag: bool) -> None:
        """Open or close the gate. Does not notify."""
        self.enabled = flag

    def is_(self, query: Any) -> bool:
        return self._value == query

    def is_not(self, query: Any) -> bool:
        return not self.is_(query)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def clear(self) -> None:
        """Disconnect every listener."""
        count = len(self._listeners)
        self._listeners.clear()
        logger.debug("Cleared %d listeners", count)

    def _notify(self, new: Any, old: Any) -> None:
        for sub in list(self._listeners):
            self._invoke(sub, new, old)

    def _invoke(self, sub: Subscription, new: Any, old: Any) -> None:
        if not self._isolate_errors:
            sub.listener(new, old)
            return
        try:
            sub.listener(new, old)
        except Exception:
            logger.exception("Listener %r failed", sub.listener)

    def _has_entry(self, sub: Subscription) -> bool:
        return any(entry is sub for entry in self._listeners)

    def _remove_entry(self, sub: Subscription) -> None:
        """Remove one registration. Called by Subscription.disconnect()."""
        for i, entry in enumerate(self._listeners):
            if entry is sub:
                del self._listeners[i]
                logger.debug("Disconnected %r (%d listeners)", sub.listener, len(self._listeners))
                return

    def __repr__(self) -> str:
        state = "" if self._enabled else ", disabled"
        return f"ReactiveCell({self._value!r}{state})"

    # Runtime type queries, for cells holding values of mixed kinds.

    def type(self) -> TypeTag:
        return TypeTag.of(self._value)

    def type_is(self, tag: TypeTag | str) -> bool:
        return self.type() is TypeTag.coerce(tag)

    def type_is_not(self, tag: TypeTag | str) -> bool:
        return not self.type_is(tag)
