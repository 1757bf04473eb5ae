# (c) Nelen & Schuurmans

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Sequence
from typing import Any

from .types import T
from .value_object import ValueObject

__all__ = ["SortKey", "apply_sort"]


class SortKey(ValueObject):
    selector: Callable[[Any], Any]
    ascending: bool = True


def apply_sort(items: Iterable[T], keys: Sequence[SortKey]) -> list[T]:
    """Sort on one or more keys; the first key is the primary one.

    Python's sort is stable (also with ``reverse=True``), so sorting on the
    keys from last to first gives a multi-key sort and items with equal keys
    keep their relative order. ``None`` values sort after all others.
    """
    result = list(items)
    for key in reversed(keys):
        result.sort(key=_none_last(key.selector), reverse=not key.ascending)
    return result


def _none_last(selector: Callable[[Any], Any]) -> Callable[[Any], tuple[bool, Any]]:
    def sort_key(item: Any) -> tuple[bool, Any]:
        value = selector(item)
        return (value is None, value)

    return sort_key
