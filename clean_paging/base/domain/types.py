# (c) Nelen & Schuurmans

from collections.abc import Callable
from typing import Any
from typing import TypeVar

__all__ = ["Predicate", "Selector", "SortSelector", "FilterKey"]


T = TypeVar("T")

Predicate = Callable[[Any], bool]
Selector = Callable[[Any], str | None]
SortSelector = Callable[[Any], Any]
FilterKey = str
