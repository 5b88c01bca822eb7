# grossapp_api/core/deadline.py

"""
Per-request deadline.

The HTTP layer starts a deadline for every request; services check it
right before committing. A request that has already been answered with a
504 therefore never commits, even though its worker thread keeps running.
The deadline lives in a context variable, so it follows the request into
the threadpool that runs sync endpoints.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Tuple

from .exceptions import RequestTimeoutError

# (monotonic expiry, configured timeout) for the current request, if any.
_deadline: ContextVar[Optional[Tuple[float, float]]] = ContextVar(
    "grossapp_request_deadline", default=None
)


@contextmanager
def request_deadline(timeout_seconds: float) -> Iterator[None]:
    token = _deadline.set((time.monotonic() + timeout_seconds, timeout_seconds))
    try:
        yield
    finally:
        _deadline.reset(token)


def check_deadline() -> None:
    """Raise ``RequestTimeoutError`` if the current request has run out of time."""
    current = _deadline.get()
    if current is None:
        return
    expires_at, timeout_seconds = current
    if time.monotonic() >= expires_at:
        raise RequestTimeoutError(timeout_seconds)


__all__ = ["request_deadline", "check_deadline"]
