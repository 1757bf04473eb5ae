# (c) Nelen & Schuurmans

import re
from collections.abc import Callable
from collections.abc import Sequence
from enum import Enum
from functools import lru_cache
from typing import Any

from .exceptions import InvalidArgument
from .types import Selector
from .value_object import ValueObject

__all__ = ["Search", "SearchMode", "compile_wildcard", "match_term", "as_selectors"]


class SearchMode(str, Enum):
    ANY = "any"  # an item matches if one of the selected fields matches
    ALL = "all"  # an item matches only if every selected field matches


@lru_cache(maxsize=128)
def compile_wildcard(pattern: str) -> re.Pattern[str]:
    """Compile a ``*``/``?`` wildcard pattern into a case-insensitive regex.

    ``*`` matches any run of characters (including none) and ``?`` exactly one
    character. All other characters are literal. The pattern is meant to be
    used with ``fullmatch``, so it must cover the whole value.
    """
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def match_term(value: Any, term: str, use_wildcards: bool = False) -> bool:
    if value is None:
        return False
    value = str(value)
    if use_wildcards:
        return compile_wildcard(term).fullmatch(value) is not None
    return term.casefold() in value.casefold()


def as_selectors(selectors: Selector | Sequence[Selector] | None) -> tuple[Selector, ...]:
    if selectors is None:
        raise InvalidArgument("selector")
    if callable(selectors):
        return (selectors,)
    result = tuple(selectors)
    if not result:
        raise InvalidArgument("selector", "needs at least one item")
    if not all(callable(x) for x in result):
        raise InvalidArgument("selector", "must be callable")
    return result


class Search(ValueObject):
    selectors: tuple[Callable[[Any], Any], ...] = ()
    term: str | None = None
    use_wildcards: bool = False
    mode: SearchMode = SearchMode.ANY

    @property
    def is_active(self) -> bool:
        return bool(self.selectors) and bool(self.term and self.term.strip())

    def matches(self, item: Any) -> bool:
        term = self.term
        if not self.selectors or not term or not term.strip():
            return True
        results = (
            match_term(selector(item), term, self.use_wildcards)
            for selector in self.selectors
        )
        if self.mode is SearchMode.ALL:
            return all(results)
        return any(results)
