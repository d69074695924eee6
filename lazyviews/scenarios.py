"""Example pipelines over the integers 0..9 run by `lazyviews demo`."""
from __future__ import annotations

from typing import (
    Any,
    Callable,
    Final,
    List,
    Tuple,
)

from lazyviews.core import Cursor
from lazyviews.views import (
    filtered,
    FilteredCursor,
    ref,
    transformed,
    TransformedCursor,
)


# Constants
DEFAULT_SOURCE: Final[range] = range(10)


Scenario = Callable[[], List[Any]]


def nested_filter() -> List[int]:
    evens = filtered(list(DEFAULT_SOURCE), lambda x: x % 2 == 0)
    return list(filtered(evens, lambda x: x != 4))


def chained_transform() -> List[str]:
    doubled = transformed(list(DEFAULT_SOURCE), lambda x: x * 2)
    return list(transformed(doubled, lambda x: f'"{x}"'))


def ref_mutate_and_filter() -> List[int]:
    data = list(DEFAULT_SOURCE)
    ref(data).begin().value = 301
    return list(filtered(ref(data), lambda x: x % 3 != 0))


def is_odd(x: int) -> bool:
    return x % 2 == 1


def free_function_predicate() -> List[int]:
    return list(filtered(list(DEFAULT_SOURCE), is_odd))


class IsOdd:

    def __call__(self, x: int) -> bool:
        return x % 2 == 1


def function_object_predicate() -> List[int]:
    return list(filtered(list(DEFAULT_SOURCE), IsOdd()))


def singular_cursors() -> List[str]:
    """Create, copy and assign singular cursors without using them."""
    cursors: List[Cursor[Any]] = []
    for cursor_cls in (FilteredCursor, TransformedCursor):
        first, second = cursor_cls(), cursor_cls()
        first.assign(second)
        third = first.copy()
        cursors.extend((first, second, third))
    del cursors[:]
    return ["ok"]


SCENARIOS: Final[Tuple[Tuple[str, Scenario], ...]] = (
    ("Nested filter", nested_filter),
    ("Chained transform", chained_transform),
    ("Ref, mutate and filter", ref_mutate_and_filter),
    ("Free function predicate", free_function_predicate),
    ("Function object predicate", function_object_predicate),
    ("Singular cursors", singular_cursors),
)
