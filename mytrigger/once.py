"""execute a block of code only the first time it is reached"""
import functools
import logging
from typing import Callable, Optional, Any

from .edgedetector import AtomicEdgeTracker

active_logger = logging.getLogger(__name__)


class RunOnce:
    """
    flag which reports True on the first call to `first()` only, across all threads

    e.g.
    guard = RunOnce()
    if guard.first():
        # do something once
    """
    def __init__(self):
        self._state = AtomicEdgeTracker(False)

    @property
    def has_run(self) -> bool:
        return self._state.state

    def first(self) -> bool:
        return self._state.update(True).raised()

    def reset(self) -> None:
        self._state.update(False)


def run_once(func: Callable) -> Callable:
    """
    decorator so that `func` is executed on its first call only, later calls return None without executing

    the guard is exposed as `once` attribute of the returned function
    """
    guard = RunOnce()

    @functools.wraps(func)
    def inner(*args, **kwargs) -> Optional[Any]:
        if guard.first():
            active_logger.debug(f'running "{func.__name__}" for the first time')
            return func(*args, **kwargs)
        return None

    inner.once = guard
    return inner
