from __future__ import annotations

from typing import (
    Any,
    Callable,
    Optional,
    TypeVar,
)

from lazyviews.core import (
    BidirectionalSequence,
    begin,
    Cursor,
    end,
    is_sequence,
    SequenceLike,
)
from lazyviews.utils import callable_name, check_callable, own


# Type variables
T = TypeVar("T")
U = TypeVar("U")


# Callable types
Predicate = Callable[[T], bool]
Function = Callable[[T], U]


def _check_base(base: object) -> None:
    if not is_sequence(base):
        raise TypeError(f"'{type(base).__name__}' object is not a sequence")


# =======
# RefView
# =======


class RefView(BidirectionalSequence[T]):
    """Non-owning pass-through view of a sequence owned by the caller.

    Cursors are the target's own cursors, so over a mutable target
    assigning `cursor.value` writes to the target.
    """

    def __init__(self, target: SequenceLike[T]) -> None:
        _check_base(target)
        self._target = target

    @property
    def target(self) -> SequenceLike[T]:
        return self._target

    def begin(self) -> Cursor[T]:
        return begin(self._target)

    def end(self) -> Cursor[T]:
        return end(self._target)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"


def ref(seq: SequenceLike[T]) -> RefView[T]:
    """Borrow `seq` without copying it."""
    return RefView(seq)


# ============
# FilteredView
# ============


class FilteredView(BidirectionalSequence[T]):
    """Read-only view of elements of `base` for which `predicate` holds.

    `base` is held as given. Predicate is called lazily, possibly many
    times for the same element, so it has to be pure.
    """

    def __init__(self, base: SequenceLike[T], predicate: Predicate[T]) -> None:
        _check_base(base)
        check_callable(predicate, "predicate")
        self._base = base
        self._predicate = predicate

    @property
    def base(self) -> SequenceLike[T]:
        return self._base

    @property
    def predicate(self) -> Predicate[T]:
        return self._predicate

    def begin(self) -> FilteredCursor[T]:
        cursor, stop = begin(self._base), end(self._base)
        while cursor != stop and not self._predicate(cursor.value):
            cursor.advance()
        return FilteredCursor(self, cursor)

    def end(self) -> FilteredCursor[T]:
        return FilteredCursor(self, end(self._base))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._base!r},"
            f" {callable_name(self._predicate)})"
        )


class FilteredCursor(Cursor[T]):

    def __init__(
            self,
            view: Optional[FilteredView[T]] = None,
            base: Optional[Cursor[T]] = None,
    ) -> None:
        assert (view is None) == (base is None), "half-bound cursor"
        self._view = view
        self._base = base

    @property
    def is_singular(self) -> bool:
        return self._view is None

    @property
    def value(self) -> T:
        assert self._base is not None, "dereferencing singular cursor"
        return self._base.value

    def advance(self) -> FilteredCursor[T]:
        assert self._view is not None and self._base is not None, (
            "advancing singular cursor"
        )
        predicate, stop = self._view.predicate, end(self._view.base)
        self._base.advance()
        while self._base != stop and not predicate(self._base.value):
            self._base.advance()
        return self

    def retreat(self) -> FilteredCursor[T]:
        """Move to previous matching element.

        There is no check against begin. Retreating from `begin()` is
        a contract violation.
        """
        assert self._view is not None and self._base is not None, (
            "retreating singular cursor"
        )
        predicate = self._view.predicate
        self._base.retreat()
        while not predicate(self._base.value):
            self._base.retreat()
        return self

    def _same_position(self, other: FilteredCursor[T]) -> bool:
        assert self._view is other._view, "cursors of different views"
        return self._base == other._base

    def __repr__(self) -> str:
        if self._base is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._base!r})"

    def __copy__(self) -> FilteredCursor[T]:
        if self._base is None:
            return type(self)()
        return type(self)(self._view, self._base.copy())


def filtered(seq: SequenceLike[T], predicate: Predicate[T]) -> FilteredView[T]:
    """Return view of elements of `seq` satisfying `predicate`.

    The view owns its sequence: plain sequences are copied, views are
    adopted. Wrap `seq` with `ref()` to borrow it instead.
    """
    return FilteredView(own(seq), predicate)


# ===============
# TransformedView
# ===============


class TransformedView(BidirectionalSequence[U]):
    """Read-only view of `function(x)` for each element `x` of `base`.

    `function` is called on every dereference and never during
    construction or traversal.
    """

    def __init__(self, base: SequenceLike[Any], function: Function[Any, U]) -> None:
        _check_base(base)
        check_callable(function, "function")
        self._base = base
        self._function = function

    @property
    def base(self) -> SequenceLike[Any]:
        return self._base

    @property
    def function(self) -> Function[Any, U]:
        return self._function

    def begin(self) -> TransformedCursor[U]:
        return TransformedCursor(self, begin(self._base))

    def end(self) -> TransformedCursor[U]:
        return TransformedCursor(self, end(self._base))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._base!r},"
            f" {callable_name(self._function)})"
        )


class TransformedCursor(Cursor[U]):

    def __init__(
            self,
            view: Optional[TransformedView[U]] = None,
            base: Optional[Cursor[Any]] = None,
    ) -> None:
        assert (view is None) == (base is None), "half-bound cursor"
        self._view = view
        self._base = base

    @property
    def is_singular(self) -> bool:
        return self._view is None

    @property
    def value(self) -> U:
        assert self._view is not None and self._base is not None, (
            "dereferencing singular cursor"
        )
        return self._view.function(self._base.value)

    def advance(self) -> TransformedCursor[U]:
        assert self._base is not None, "advancing singular cursor"
        self._base.advance()
        return self

    def retreat(self) -> TransformedCursor[U]:
        assert self._base is not None, "retreating singular cursor"
        self._base.retreat()
        return self

    def _same_position(self, other: TransformedCursor[U]) -> bool:
        assert self._view is other._view, "cursors of different views"
        return self._base == other._base

    def __repr__(self) -> str:
        if self._base is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._base!r})"

    def __copy__(self) -> TransformedCursor[U]:
        if self._base is None:
            return type(self)()
        return type(self)(self._view, self._base.copy())


def transformed(seq: SequenceLike[T], function: Function[T, U]) -> TransformedView[U]:
    """Return view of `function` applied to each element of `seq`.

    Ownership rules are the same as for `filtered()`.
    """
    return TransformedView(own(seq), function)
