from __future__ import annotations

import copy
from typing import Any, Callable, TypeVar

from lazyviews.core import BidirectionalSequence, is_sequence, SequenceLike


# Type variables
T = TypeVar("T")


# =========
# Ownership
# =========


def own(seq: SequenceLike[T]) -> SequenceLike[T]:
    """Return sequence that a view can hold as its own.

    Views are adopted as they are. They are never mutated through, so
    sharing one is the same as holding a copy, and `RefView` keeps
    borrowing its target. Plain sequences are shallow copied.
    """
    if isinstance(seq, BidirectionalSequence):
        return seq
    if not is_sequence(seq):
        raise TypeError(f"'{type(seq).__name__}' object is not a sequence")
    return copy.copy(seq)


# =========
# Callables
# =========


def check_callable(func: Any, role: str) -> None:
    if not callable(func):
        raise TypeError(f"{role} must be callable, not '{type(func).__name__}'")


def callable_name(func: Callable[..., Any]) -> str:
    """Short name of any callable for `repr` purposes."""
    name = getattr(func, "__qualname__", None)
    if name is None:
        name = getattr(func, "__name__", None)
    if name is None:
        # Function object (instance with `__call__`) or `functools.partial`
        name = f"{type(func).__qualname__}()"
    return name
