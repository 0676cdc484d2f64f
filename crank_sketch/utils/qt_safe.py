# -*- coding: utf-8 -*-
"""Qt event safety helpers.

An uncaught exception inside a Qt event handler or slot can terminate the app.
These decorators log the traceback and keep the app alive.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def safe_event(fn: Callable[..., T]) -> Callable[..., T | None]:
    """Decorator for Qt event handlers (``self, event``)."""

    @functools.wraps(fn)
    def wrapper(self: Any, e: Any) -> T | None:
        try:
            return fn(self, e)
        except Exception:
            logger.exception("Unhandled error in %s", fn.__qualname__)
            try:
                e.ignore()
            except Exception:
                pass
            return None

    return wrapper


def safe_slot(fn: Callable[..., T]) -> Callable[..., T | None]:
    """Decorator for slots connected to Qt signals."""

    @functools.wraps(fn)
    def wrapper(*args: Any) -> T | None:
        try:
            return fn(*args)
        except Exception:
            logger.exception("Unhandled error in %s", fn.__qualname__)
            return None

    return wrapper
