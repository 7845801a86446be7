"""Trailing-edge debounce for plain callables.

Each call cancels the pending invocation and schedules a new one after
`wait` seconds; only the last call of a burst runs. Every call returns a
Future that resolves with the result of the invocation it was folded into.
"""

import logging
import threading
from concurrent.futures import Future
from functools import update_wrapper
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Debounced:
    def __init__(self, func: Callable[..., Any], wait: float) -> None:
        self.func = func
        self.wait = wait
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[tuple, dict] | None = None
        self._waiters: list[Future] = []
        update_wrapper(self, func)

    def __call__(self, *args, **kwargs) -> Future:
        future: Future = Future()
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (args, kwargs)
            self._waiters.append(future)
            self._timer = threading.Timer(self.wait, self._fire)
            self._timer.daemon = True
            self._timer.start()
        return future

    def _fire(self) -> None:
        with self._lock:
            # superseded by a later call
            if self._timer is not threading.current_thread():
                return
            args, kwargs = self._pending  # type: ignore[misc]
            waiters, self._waiters = self._waiters, []
            self._timer = None
            self._pending = None
        try:
            result = self.func(*args, **kwargs)
        except Exception as e:
            logger.exception("Debounced call to %s failed", self.func)
            for future in waiters:
                if future.set_running_or_notify_cancel():
                    future.set_exception(e)
            return
        for future in waiters:
            if future.set_running_or_notify_cancel():
                future.set_result(result)


def debounce(wait: float) -> Callable[[Callable[..., Any]], Debounced]:
    def decorator(func: Callable[..., Any]) -> Debounced:
        return Debounced(func, wait)

    return decorator
