# (c) Nelen & Schuurmans

import operator
from collections.abc import Iterable
from collections.abc import Iterator
from enum import Enum
from typing import Any
from typing import Generic

from nanoid import generate
from pydantic import model_validator

from .exceptions import InvalidArgument
from .field_path import resolve_field_path
from .types import FilterKey
from .types import Predicate
from .types import T
from .value_object import ValueObject

__all__ = [
    "Filter",
    "ComparisonFilter",
    "ComparisonOperator",
    "FilterSet",
    "as_predicate",
]

# Ref. https://digitalbazaar.github.io/base58-spec/
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
FILTER_KEY_SIZE = 10


class Filter(ValueObject):
    field: str
    values: list[Any]

    def as_predicate(self) -> Predicate:
        getter = resolve_field_path(self.field)
        values = self.values
        return lambda item: getter(item) in values


class ComparisonOperator(str, Enum):
    LT = "lt"
    LE = "le"
    GE = "ge"
    GT = "gt"
    EQ = "eq"
    NE = "ne"


class ComparisonFilter(Filter):
    operator: ComparisonOperator

    @model_validator(mode="after")
    def verify_no_operator_for_multiple_values(self):
        if len(self.values) != 1:
            raise ValueError("ComparisonFilter needs to have exactly one value")
        return self

    def as_predicate(self) -> Predicate:
        getter = resolve_field_path(self.field)
        compare = getattr(operator, self.operator.value)
        (value,) = self.values

        def predicate(item: Any) -> bool:
            actual = getter(item)
            if actual is None:
                return False
            return bool(compare(actual, value))

        return predicate


def as_predicate(predicate: Predicate | Filter | None) -> Predicate:
    if predicate is None:
        raise InvalidArgument("predicate")
    if isinstance(predicate, Filter):
        return predicate.as_predicate()
    return predicate


class FilterSet(Generic[T]):
    """Keyed predicates that are combined with AND."""

    def __init__(self):
        self._predicates: dict[FilterKey, Predicate] = {}

    def __len__(self) -> int:
        return len(self._predicates)

    def __contains__(self, key: object) -> bool:
        return key in self._predicates

    def __iter__(self) -> Iterator[FilterKey]:
        return iter(self._predicates)

    def new_key(self) -> FilterKey:
        while True:
            key = generate(BASE58, FILTER_KEY_SIZE)
            if key not in self._predicates:
                return key

    def set(self, key: FilterKey, predicate: Predicate) -> None:
        self._predicates[key] = predicate

    def remove(self, key: FilterKey) -> bool:
        return self._predicates.pop(key, None) is not None

    def clear(self) -> None:
        self._predicates.clear()

    def keys(self) -> frozenset[FilterKey]:
        return frozenset(self._predicates)

    def matches(self, item: T) -> bool:
        return all(predicate(item) for predicate in self._predicates.values())

    def apply(self, items: Iterable[T]) -> list[T]:
        if not self._predicates:
            return list(items)
        return [x for x in items if self.matches(x)]
