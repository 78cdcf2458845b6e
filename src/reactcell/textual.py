"""Textual integration for reactcell. Opt-in, requires textual.

Bridged listeners are guarded: they skip while the app is not running or
is paused, swallow NoMatches from widget queries, and marshal calls made
off the registering thread through app.call_from_thread.
"""

import logging
import threading
from contextlib import contextmanager

from textual.css.query import NoMatches

from reactcell._errors import InvalidListenerError

logger = logging.getLogger("reactcell.textual")

# id(app) is present only while inside pause(app).
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Hold back bridged cell listeners while the app swaps widgets out.

    Cells keep storing writes; only the widget-facing callbacks are skipped.
    """
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """True when a bridged listener may touch widgets of app."""
    return app.is_running and id(app) not in _paused_apps


def listen(app, cell, callback, *, call_immediately=False):
    """cell.listen() that safely bridges to Textual widgets.

    Returns the cell's Subscription for the guarded wrapper.

    Usage:
        sub = stx.listen(app, volume, lambda new, old: app.query_one(Meter).update(new))
    """
    if not callable(callback):
        raise InvalidListenerError(
            f"listener must be callable, got {type(callback).__name__}"
        )

    _main = threading.get_ident()

    def _guarded(new, old):
        if not is_safe(app):
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_safe, new, old)
        else:
            _safe(new, old)

    def _safe(new, old):
        try:
            callback(new, old)
        except NoMatches:
            logger.debug("Skipped %r: widget not mounted", callback)

    _guarded.__name__ = getattr(callback, "__name__", "_guarded")
    return cell.listen(_guarded, call_immediately=call_immediately)
