"""Subscription: the handle returned by ReactiveCell.listen().

Each handle owns the one registration entry it created, so registering the
same callback twice yields two handles that disconnect independently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from reactcell.cell import ReactiveCell


class Subscription:
    """Disposable handle for one listener registration.

    Call it (or .disconnect()) to stop receiving notifications. Repeated
    calls are no-ops. Also works as a context manager.
    """

    __slots__ = ("_cell", "_listener")

    def __init__(self, cell: ReactiveCell, listener: Callable) -> None:
        self._cell: ReactiveCell | None = cell
        self._listener = listener

    @property
    def listener(self) -> Callable:
        return self._listener

    @property
    def connected(self) -> bool:
        return self._cell is not None and self._cell._has_entry(self)

    def disconnect(self) -> None:
        """Remove this registration from its cell. Safe to call repeatedly."""
        cell, self._cell = self._cell, None
        if cell is not None:
            cell._remove_entry(self)

    def __call__(self) -> None:
        self.disconnect()

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info) -> None:
        self.disconnect()

    def __repr__(self) -> str:
        state = "connected" if self.connected else "disconnected"
        name = getattr(self._listener, "__name__", repr(self._listener))
        return f"Subscription({name}, {state})"
