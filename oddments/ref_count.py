"""Single-threaded reference counting with strong and weak handles.

A :class:`RefCount` owns a share of a value; the value is released when the
last strong handle is dropped, even if weak handles remain. Handles are
dropped explicitly with ``drop()`` or by leaving a ``with`` block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_EMPTY: Any = object()


@dataclass(eq=False)
class _Control:
    """Shared bookkeeping for every handle to one value."""

    value: Any
    strong: int
    weak: int
    finalizer: Optional[Callable[[Any], None]] = None

    def release_value(self) -> Any:
        value = self.value
        self.value = _EMPTY
        return value


class StillShared(Exception):
    """Raised by :meth:`RefCount.try_unwrap` when other strong handles exist."""

    def __init__(self, ref: RefCount[Any]) -> None:
        super().__init__(f"value is held by {ref.strong_count()} strong references")
        self.ref = ref


def _dropped() -> ValueError:
    return ValueError("reference has already been dropped")


class RefCount(Generic[T]):
    """A strong, counted handle to a shared value.

    ``finalizer``, if given, is called with the value once the last strong
    handle is dropped. It is not called when the value is taken back with
    :meth:`try_unwrap`.
    """

    __slots__ = ("_control",)

    def __init__(self, value: T, finalizer: Optional[Callable[[T], None]] = None) -> None:
        self._control: Optional[_Control] = _Control(value, 1, 0, finalizer)

    @classmethod
    def _attach(cls, control: _Control) -> RefCount[T]:
        handle = cls.__new__(cls)
        handle._control = control
        return handle

    def _live(self) -> _Control:
        if self._control is None:
            raise _dropped()
        return self._control

    @property
    def value(self) -> T:
        """The shared value."""
        return self._live().value

    def clone(self) -> RefCount[T]:
        """Return another strong handle to the same value."""
        control = self._live()
        control.strong += 1
        return RefCount._attach(control)

    def drop(self) -> None:
        """Give up this handle; release the value if it was the last strong one."""
        control = self._live()
        self._control = None
        control.strong -= 1
        if control.strong == 0:
            value = control.release_value()
            if control.finalizer is not None:
                control.finalizer(value)

    def try_unwrap(self) -> T:
        """Take the value out if this is the only strong handle.

        Raises :class:`StillShared` otherwise; the handle stays usable then.
        """
        control = self._live()
        if control.strong != 1:
            raise StillShared(self)
        self._control = None
        control.strong = 0
        return control.release_value()

    def downgrade(self) -> WeakRef[T]:
        """Return a weak handle to the same value."""
        control = self._live()
        control.weak += 1
        return WeakRef._attach(control)

    def strong_count(self) -> int:
        return self._live().strong

    def weak_count(self) -> int:
        return self._live().weak

    def get_mut(self) -> Optional[T]:
        """Return the value if no other handle, strong or weak, can see it."""
        control = self._live()
        if control.strong == 1 and control.weak == 0:
            return control.value
        return None

    def ptr_eq(self, other: RefCount[T]) -> bool:
        """Whether both handles share the same allocation."""
        return self._live() is other._live()

    def __enter__(self) -> RefCount[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._control is not None:
            self.drop()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RefCount):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RefCount):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RefCount):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RefCount):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RefCount):
            return NotImplemented
        return self.value >= other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        if self._control is None:
            return "RefCount(<dropped>)"
        return f"RefCount({self._control.value!r})"


class WeakRef(Generic[T]):
    """A weak handle that does not keep the value alive.

    ``WeakRef()`` creates a handle that never upgrades.
    """

    __slots__ = ("_control",)

    def __init__(self) -> None:
        self._control: Optional[_Control] = _Control(_EMPTY, 0, 1)

    @classmethod
    def _attach(cls, control: _Control) -> WeakRef[T]:
        handle = cls.__new__(cls)
        handle._control = control
        return handle

    def _live(self) -> _Control:
        if self._control is None:
            raise _dropped()
        return self._control

    def clone(self) -> WeakRef[T]:
        control = self._live()
        control.weak += 1
        return WeakRef._attach(control)

    def drop(self) -> None:
        control = self._live()
        self._control = None
        control.weak -= 1

    def upgrade(self) -> Optional[RefCount[T]]:
        """Return a new strong handle, or None if the value is gone."""
        control = self._live()
        if control.strong == 0:
            return None
        control.strong += 1
        return RefCount._attach(control)

    def strong_count(self) -> int:
        return self._live().strong

    def weak_count(self) -> int:
        return self._live().weak

    def ptr_eq(self, other: WeakRef[T]) -> bool:
        return self._live() is other._live()

    def __enter__(self) -> WeakRef[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._control is not None:
            self.drop()

    def __repr__(self) -> str:
        if self._control is None:
            return "WeakRef(<dropped>)"
        return f"WeakRef(strong={self._control.strong}, weak={self._control.weak})"