import pytest

from clean_paging import BadRequest
from clean_paging import PagedView
from clean_paging import PagedViewOptions


def test_defaults():
    options = PagedViewOptions()
    assert options.page_size == 50
    assert options.search_debounce_ms == 0


@pytest.mark.parametrize(
    "values", [{"page_size": 0}, {"page_size": -1}, {"search_debounce_ms": -5}]
)
def test_invalid(values):
    with pytest.raises(BadRequest):
        PagedViewOptions.create(**values)


def test_from_options(scheduler):
    options = PagedViewOptions(page_size=3, search_debounce_ms=200)
    view = PagedView.from_options(options, scheduler=scheduler)
    view.set_source("abcdefg")

    assert view.page_size == 3
    assert view.total_pages == 3

    view.set_search(lambda x: x, "b")  # no explicit delay: uses the default

    assert view.is_searching
    scheduler.advance(0.2)
    assert view.current_page_items == ["b"]
