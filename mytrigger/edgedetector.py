import logging
import threading
from enum import IntEnum

from .changed import Ref, on_changed

active_logger = logging.getLogger(__name__)


class Signal(IntEnum):
    """
    transition of a boolean state from a single update
    """
    # state transitioned from True to False
    FELL = -1
    # state unchanged, either True or False
    LEVEL = 0
    # state transitioned from False to True
    RAISED = 1

    @classmethod
    def from_transition(cls, changed: bool, new_state: bool) -> 'Signal':
        if not changed:
            return cls.LEVEL
        return cls.RAISED if new_state else cls.FELL

    def raised(self) -> bool:
        return self > 0

    def fell(self) -> bool:
        return self < 0

    def changed(self) -> bool:
        return self != 0


class EdgeTracker:
    """
    detect when a boolean value changes from False to True (rising edge) and vice-versa (falling edge) comparing to
    previous state value

    e.g.
    state = EdgeTracker.default()
    state.update(False).changed()  # False, initialised to False
    state.update(True).raised()  # True
    state.update(True).changed()  # False
    state.update(False).fell()  # True
    """
    def __init__(self, initial: bool = False):
        self._ref: Ref[bool] = Ref(bool(initial))

    @classmethod
    def default(cls) -> 'EdgeTracker':
        return cls(False)

    @classmethod
    def from_bool(cls, state: bool) -> 'EdgeTracker':
        return cls(state)

    @property
    def state(self) -> bool:
        return self._ref.value

    def update(self, state: bool) -> Signal:
        """update state, return signal indicating rising, falling or no edge"""
        state = bool(state)
        signal = Signal.from_transition(on_changed(self._ref, state), state)
        if signal:
            active_logger.debug(f'{self!r} edge: {signal.name}')
        return signal

    def __bool__(self):
        return self.state

    def __repr__(self):
        return f'{self.__class__.__name__}({self.state})'


class AtomicEdgeTracker(EdgeTracker):
    """
    thread safe version of `EdgeTracker`, reading and swapping the stored state happens under a lock so that
    concurrent updates are seen in a single sequential order
    """
    def __init__(self, initial: bool = False):
        super().__init__(initial)
        self._lock = threading.Lock()

    def update(self, state: bool) -> Signal:
        with self._lock:
            return super().update(state)
