"""Dynamically checked borrowing of a shared value.

A :class:`BorrowCell` hands out any number of shared :class:`Ref` guards, or
one exclusive :class:`RefMut` guard, never both at once. A guard holds its
borrow until it is released, explicitly, by leaving a ``with`` block, or when
it is garbage collected.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

_WRITING = -1


class AlreadyMutablyBorrowed(Exception):
    """Raised by the ``try_`` methods when the requested borrow is not available."""

    def __init__(self, message: str = "AlreadyMutablyBorrowed") -> None:
        super().__init__(message)


class AlreadyBorrowed(RuntimeError):
    """Raised by :meth:`BorrowCell.borrow` and :meth:`BorrowCell.borrow_mut` on a conflict."""


def _released() -> ValueError:
    return ValueError("borrow has already been released")


class BorrowCell(Generic[T]):
    """A mutable slot whose borrows are checked at run time."""

    __slots__ = ("_value", "_state")

    def __init__(self, value: T) -> None:
        self._value: Any = value
        # Number of shared borrows, or _WRITING while borrowed exclusively.
        self._state = 0

    def try_borrow(self) -> Ref[T]:
        """Borrow the value for reading; raise AlreadyMutablyBorrowed if it is being written."""
        if self._state == _WRITING:
            raise AlreadyMutablyBorrowed()
        self._state += 1
        return Ref(self)

    def try_borrow_mut(self) -> RefMut[T]:
        """Borrow the value exclusively; raise AlreadyMutablyBorrowed if it is borrowed at all."""
        if self._state != 0:
            raise AlreadyMutablyBorrowed()
        self._state = _WRITING
        return RefMut(self)

    def borrow(self) -> Ref[T]:
        """Borrow the value for reading; raise AlreadyBorrowed on a conflict."""
        try:
            return self.try_borrow()
        except AlreadyMutablyBorrowed:
            raise AlreadyBorrowed("already mutably borrowed") from None

    def borrow_mut(self) -> RefMut[T]:
        """Borrow the value exclusively; raise AlreadyBorrowed on a conflict."""
        try:
            return self.try_borrow_mut()
        except AlreadyMutablyBorrowed:
            raise AlreadyBorrowed("already borrowed") from None

    def __repr__(self) -> str:
        if self._state == _WRITING:
            return "BorrowCell(<borrowed>)"
        return f"BorrowCell({self._value!r})"


class Ref(Generic[T]):
    """A shared borrow of the value in a :class:`BorrowCell`."""

    __slots__ = ("_cell",)

    def __init__(self, cell: BorrowCell[T]) -> None:
        self._cell: Optional[BorrowCell[T]] = cell

    @property
    def value(self) -> T:
        if self._cell is None:
            raise _released()
        return self._cell._value

    def release(self) -> None:
        """End the borrow; releasing twice has no further effect."""
        cell = getattr(self, "_cell", None)
        if cell is not None:
            self._cell = None
            cell._state -= 1

    def __enter__(self) -> Ref[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        self.release()

    def __repr__(self) -> str:
        if self._cell is None:
            return "Ref(<released>)"
        return f"Ref({self._cell._value!r})"


class RefMut(Generic[T]):
    """An exclusive borrow of the value in a :class:`BorrowCell`."""

    __slots__ = ("_cell",)

    def __init__(self, cell: BorrowCell[T]) -> None:
        self._cell: Optional[BorrowCell[T]] = cell

    @property
    def value(self) -> T:
        if self._cell is None:
            raise _released()
        return self._cell._value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._cell is None:
            raise _released()
        self._cell._value = new_value

    def release(self) -> None:
        """End the borrow; releasing twice has no further effect."""
        cell = getattr(self, "_cell", None)
        if cell is not None:
            self._cell = None
            cell._state = 0

    def __enter__(self) -> RefMut[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        self.release()

    def __repr__(self) -> str:
        if self._cell is None:
            return "RefMut(<released>)"
        return f"RefMut({self._cell._value!r})"