# (c) Nelen & Schuurmans

from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidArgument
from .types import SortSelector

__all__ = ["resolve_field_path"]


def _get(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def resolve_field_path(path: str) -> SortSelector:
    """Turn a dotted field path (``"department.name"``) into a selector.

    Each segment is looked up as a mapping key or else as an attribute. A
    missing segment, or a ``None`` halfway the path, makes the selector return
    ``None``.
    """
    if not path:
        raise InvalidArgument("path")
    names = path.split(".")

    def selector(obj: Any) -> Any:
        for name in names:
            if obj is None:
                return None
            obj = _get(obj, name)
        return obj

    selector.__name__ = f"field:{path}"
    return selector
