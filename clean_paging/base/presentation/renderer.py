# (c) Nelen & Schuurmans

from collections.abc import Callable
from collections.abc import Sequence
from typing import Any

from ..application import PagedView
from ..domain import Property

__all__ = ["bind_renderer"]


def bind_renderer(
    view: PagedView[Any], render: Callable[[Sequence[Any]], None]
) -> Callable[[], None]:
    """Render the current page now and after every change of it.

    Returns a function that unbinds the renderer again.
    """

    def on_change(sender: PagedView[Any], property: Property) -> None:
        if property is Property.CURRENT_PAGE_ITEMS:
            render(sender.current_page_items)

    view.subscribe(on_change)
    render(view.current_page_items)
    return lambda: view.unsubscribe(on_change)
