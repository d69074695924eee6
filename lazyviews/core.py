from __future__ import annotations

from abc import ABCMeta, abstractmethod
from collections.abc import Sequence
import copy
from typing import (
    Any,
    Generic,
    Iterator,
    Optional,
    TypeVar,
    Union,
)


# Type variables
T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


# ======
# Cursor
# ======


class Cursor(Generic[T_co], metaclass=ABCMeta):
    """Bidirectional position within a sequence.

    A cursor is created by `begin()`/`end()` of a sequence or by copying
    another cursor. Calling a cursor class without arguments gives
    a *singular* cursor, bound to nothing. Singular cursor can only be
    assigned to (`assign()`), copied, destroyed or compared with another
    singular cursor.

    Cursors are compared by position and only within the one sequence
    they come from. Cursors are mutable, so they are unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    @property
    @abstractmethod
    def is_singular(self) -> bool:
        """`True` if cursor is not bound to any sequence."""

    @property
    @abstractmethod
    def value(self) -> T_co:
        """Element at current position. Reading it at end is a contract
        violation.
        """

    @abstractmethod
    def advance(self) -> Cursor[T_co]:
        """Move one position forward and return `self`."""

    @abstractmethod
    def retreat(self) -> Cursor[T_co]:
        """Move one position backward and return `self`."""

    @abstractmethod
    def _same_position(self, other: Any) -> bool:
        """Compare positions of two bound cursors of the same type."""

    def post_advance(self) -> Cursor[T_co]:
        """Move forward. Return copy of the cursor from before the move."""
        snapshot = self.copy()
        self.advance()
        return snapshot

    def post_retreat(self) -> Cursor[T_co]:
        """Move backward. Return copy of the cursor from before the move."""
        snapshot = self.copy()
        self.retreat()
        return snapshot

    def copy(self) -> Cursor[T_co]:
        return copy.copy(self)

    def assign(self, other: Cursor[T_co]) -> Cursor[T_co]:
        """Make `self` an independent copy of `other` in place."""
        assert type(other) is type(self), (
            f"can't assign {type(other).__name__} to {type(self).__name__}"
        )
        vars(self).update(vars(copy.copy(other)))
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        assert type(other) is type(self), (
            f"{type(self).__name__} compared with {type(other).__name__}"
        )
        if self.is_singular or other.is_singular:
            assert self.is_singular and other.is_singular, (
                "singular cursor compared with bound one"
            )
            return True
        return self._same_position(other)


# ==============
# SequenceCursor
# ==============


class SequenceCursor(Cursor[T]):
    """Index based cursor over a plain Python sequence.

    Over a mutable sequence `value` can be assigned and the assignment
    writes to the sequence.
    """

    def __init__(
            self,
            data: Optional[Sequence[T]] = None,
            index: int = 0,
    ) -> None:
        self._data = data
        self._index = index

    @property
    def is_singular(self) -> bool:
        return self._data is None

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> T:
        assert self._data is not None, "dereferencing singular cursor"
        assert 0 <= self._index < len(self._data), "dereferencing end"
        return self._data[self._index]

    @value.setter
    def value(self, value: T) -> None:
        assert self._data is not None, "dereferencing singular cursor"
        assert 0 <= self._index < len(self._data), "dereferencing end"
        # Immutable sequences raise `TypeError` here
        self._data[self._index] = value  # type: ignore[index]

    def advance(self) -> SequenceCursor[T]:
        assert self._data is not None, "advancing singular cursor"
        assert self._index < len(self._data), "advancing past end"
        self._index += 1
        return self

    def retreat(self) -> SequenceCursor[T]:
        assert self._data is not None, "retreating singular cursor"
        assert self._index > 0, "retreating before begin"
        self._index -= 1
        return self

    def _same_position(self, other: SequenceCursor[T]) -> bool:
        assert self._data is other._data, "cursors of different sequences"
        return self._index == other._index

    def __repr__(self) -> str:
        if self._data is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._data!r}, {self._index})"


# =====================
# BidirectionalSequence
# =====================


class BidirectionalSequence(Generic[T_co], metaclass=ABCMeta):
    """Sequence exposing `begin()` and `end()` cursors.

    Python iteration protocols are derived from the cursors: `iter()` walks
    from begin to end, `reversed()` walks from end back to begin.
    """

    @abstractmethod
    def begin(self) -> Cursor[T_co]:
        """Cursor at first element or equal to `end()` if there is none."""

    @abstractmethod
    def end(self) -> Cursor[T_co]:
        """Cursor past the last element."""

    def __iter__(self) -> Iterator[T_co]:
        cursor, stop = self.begin(), self.end()
        while cursor != stop:
            yield cursor.value
            cursor.advance()

    def __reversed__(self) -> Iterator[T_co]:
        start, cursor = self.begin(), self.end()
        while cursor != start:
            yield cursor.retreat().value

    def __contains__(self, value: object) -> bool:
        return any(elem is value or elem == value for elem in self)


SequenceLike = Union[BidirectionalSequence[T], Sequence[T]]


def is_sequence(obj: object) -> bool:
    """Return `True` if `obj` can be traversed with cursors."""
    return isinstance(obj, (BidirectionalSequence, Sequence))


def begin(seq: SequenceLike[T]) -> Cursor[T]:
    """Return begin cursor of a view or of a plain sequence."""
    if isinstance(seq, BidirectionalSequence):
        return seq.begin()
    if isinstance(seq, Sequence):
        return SequenceCursor(seq, 0)
    raise TypeError(f"'{type(seq).__name__}' object is not a sequence")


def end(seq: SequenceLike[T]) -> Cursor[T]:
    """Return end cursor of a view or of a plain sequence."""
    if isinstance(seq, BidirectionalSequence):
        return seq.end()
    if isinstance(seq, Sequence):
        return SequenceCursor(seq, len(seq))
    raise TypeError(f"'{type(seq).__name__}' object is not a sequence")
