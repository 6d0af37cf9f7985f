"""detect when a stored value changes on assignment"""
import operator
from typing import Generic, TypeVar, Callable, Any, MutableMapping, MutableSequence, Union

T = TypeVar('T')


class Ref(Generic[T]):
    """
    mutable cell holding a single value, used as the storage location passed to `on_changed()`
    """
    __slots__ = ('value', )

    def __init__(self, value: T):
        self.value: T = value

    def __eq__(self, other):
        if isinstance(other, Ref):
            return self.value == other.value
        return NotImplemented

    def __repr__(self):
        return f'Ref({self.value!r})'


def on_changed(ref: Ref[T], value: T) -> bool:
    """
    assign `value` to `ref` and return True if it differs from the value previously held

    e.g.
    state = Ref((1, 2.0))
    on_changed(state, (2, 2.0))  # True, state.value is now (2, 2.0)
    on_changed(state, (2, 2.0))  # False
    """
    changed = ref.value != value
    ref.value = value
    return changed


def on_changed_attr(obj: Any, name: str, value: Any) -> bool:
    """
    same as `on_changed()` but storage location is attribute `name` of `obj`, attribute must already exist
    """
    changed = getattr(obj, name) != value
    setattr(obj, name, value)
    return changed


def on_changed_item(container: Union[MutableMapping, MutableSequence], key: Any, value: Any) -> bool:
    """
    same as `on_changed()` but storage location is `container[key]`, item must already exist
    """
    changed = container[key] != value
    container[key] = value
    return changed


class StateTracker(Generic[T]):
    """
    hold a value and report on each update whether it has changed

    `comparator(new_value, old_value)` decides what counts as a change, defaults to `operator.ne`. The new value is
    always stored regardless of the comparison result
    """
    def __init__(self, init_value: T, comparator: Callable[[T, T], bool] = operator.ne):
        self._ref: Ref[T] = Ref(init_value)
        self.comparator = comparator

    @property
    def value(self) -> T:
        return self._ref.value

    def update(self, new_value: T) -> bool:
        if self.comparator is operator.ne:
            return on_changed(self._ref, new_value)
        old_value = self._ref.value
        self._ref.value = new_value
        return bool(self.comparator(new_value, old_value))

    def __repr__(self):
        return f'StateTracker({self.value!r})'
