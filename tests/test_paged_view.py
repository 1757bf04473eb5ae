from unittest.mock import call
from unittest.mock import Mock

import pytest

from clean_paging import BadRequest
from clean_paging import ComparisonFilter
from clean_paging import FiltersChanged
from clean_paging import InvalidArgument
from clean_paging import InvalidRange
from clean_paging import PageChanged
from clean_paging import PagedView
from clean_paging import PageSizeChanged
from clean_paging import Property
from clean_paging import SortChanged
from clean_paging import SourceChanged
from clean_paging import ViewEvent


@pytest.fixture
def listener(view: PagedView[int]) -> Mock:
    return view.subscribe(Mock())


@pytest.fixture
def handler(view: PagedView[int]) -> Mock:
    return view.events.register_handler(ViewEvent, Mock())


def notified(listener: Mock) -> list[Property]:
    return [c.kwargs["property"] for c in listener.call_args_list]


def test_init_empty(scheduler):
    view = PagedView(page_size=10, scheduler=scheduler)

    assert view.total_pages == 1
    assert view.current_page == 1
    assert view.current_page_items == []
    assert not view.has_next
    assert not view.has_previous
    assert view.is_source_empty
    assert view.is_empty
    assert not view.has_items
    assert view.total_items == 0


@pytest.mark.parametrize("page_size", [0, -1])
def test_init_invalid_page_size(page_size):
    with pytest.raises(InvalidRange):
        PagedView(page_size=page_size)


def test_init_negative_debounce():
    with pytest.raises(InvalidRange):
        PagedView(search_debounce_ms=-1)


def test_set_source():
    view = PagedView(page_size=2)
    view.set_source([1, 2, 3, 4, 5])

    assert view.total_pages == 3
    assert view.current_page == 1
    assert view.current_page_items == [1, 2]
    assert not view.is_source_empty


def test_set_source_none(view: PagedView[int]):
    with pytest.raises(InvalidArgument):
        view.set_source(None)

    assert view.total_items == 25


def test_set_source_copies(scheduler):
    items = [1, 2, 3]
    view = PagedView(page_size=2, scheduler=scheduler)
    view.set_source(items)
    items.append(4)

    assert view.total_items == 3


def test_set_source_resets_page_keeps_filters(view: PagedView[int]):
    view.add_filter(lambda x: x % 2 == 0)
    view.go_to_page(2)

    view.set_source(range(1, 41))

    assert view.current_page == 1
    assert view.total_items == 20
    assert view.current_page_items == [2, 4, 6, 8, 10]


def test_set_source_notifies(view: PagedView[int], listener: Mock, handler: Mock):
    view.set_source([1, 2])

    assert notified(listener) == [
        Property.CURRENT_PAGE_ITEMS,
        Property.CURRENT_PAGE,
        Property.TOTAL_PAGES,
        Property.HAS_NEXT,
        Property.HAS_PREVIOUS,
        Property.IS_EMPTY,
        Property.HAS_ITEMS,
        Property.IS_SOURCE_EMPTY,
        Property.TOTAL_ITEMS,
    ]
    listener.assert_called_with(view, property=Property.TOTAL_ITEMS)
    handler.assert_called_once_with(SourceChanged(total_items=2))


@pytest.mark.parametrize("size,total", [(1, 25), (5, 5), (7, 4), (25, 1), (100, 1)])
def test_total_pages(view: PagedView[int], size, total):
    view.set_page_size(size)

    assert view.total_pages == total
    assert len(view.current_page_items) <= size


def test_filters_and_composition(scheduler):
    view = PagedView(page_size=10, scheduler=scheduler)
    view.set_source(range(1, 11))

    view.add_filter(lambda x: x > 3)
    view.add_filter(lambda x: x < 8)

    assert list(view.filtered) == [4, 5, 6, 7]
    assert len(view.get_active_filters()) == 2


def test_add_filter_returns_key(view: PagedView[int]):
    key = view.add_filter(lambda x: x > 20)

    assert view.get_active_filters() == {key}
    view.remove_filter(key)
    assert view.total_items == 25


def test_add_filter_accepts_filter_objects(view: PagedView[int]):
    view.add_filter(ComparisonFilter(field="real", values=[23], operator="ge"))

    assert list(view.filtered) == [23, 24, 25]


def test_add_filter_none(view: PagedView[int], listener: Mock):
    with pytest.raises(InvalidArgument):
        view.add_filter(None)

    assert view.get_active_filters() == frozenset()
    assert not listener.called


@pytest.mark.parametrize("key,predicate", [(None, lambda x: True), ("k", None)])
def test_set_filter_none(view: PagedView[int], key, predicate):
    with pytest.raises(InvalidArgument):
        view.set_filter(key, predicate)

    assert view.get_active_filters() == frozenset()


def test_set_filter_replaces(view: PagedView[int]):
    view.set_filter("min", lambda x: x > 10)
    view.set_filter("min", lambda x: x > 20)

    assert view.get_active_filters() == {"min"}
    assert list(view.filtered) == [21, 22, 23, 24, 25]


def test_set_filter_remove_filter_round_trip(view: PagedView[int]):
    view.add_filter(lambda x: x % 2)
    before = list(view.filtered)

    view.set_filter("big", lambda x: x > 12)
    view.remove_filter("big")

    assert list(view.filtered) == before


def test_set_filter_preserves_position(view: PagedView[int]):
    view.go_to_page(3)  # offset 10

    view.set_filter("all", lambda x: True)
    assert view.current_page == 3

    view.set_filter("small", lambda x: x <= 12)  # only 3 pages remain
    assert view.current_page == 3
    assert view.current_page_items == [11, 12]

    view.set_filter("small", lambda x: x <= 6)  # clamped to the last page
    assert view.current_page == 2
    assert view.current_page_items == [6]


def test_set_filter_events(view: PagedView[int], handler: Mock):
    view.set_filter("a", lambda x: True)

    handler.assert_called_once_with(FiltersChanged(keys=frozenset({"a"})))


def test_remove_filter_unknown_is_noop(view: PagedView[int], listener: Mock, handler: Mock):
    view.remove_filter("unknown")

    assert not listener.called
    assert not handler.called


def test_remove_filter_none(view: PagedView[int]):
    with pytest.raises(InvalidArgument):
        view.remove_filter(None)


def test_remove_filter_preserves_position(view: PagedView[int]):
    view.set_filter("odd", lambda x: x % 2)
    view.go_to_page(2)

    view.remove_filter("odd")

    assert view.current_page == 2
    assert view.current_page_items == [6, 7, 8, 9, 10]


def test_clear_filters_resets_page(view: PagedView[int], handler: Mock):
    view.set_filter("a", lambda x: x > 2)
    view.go_to_page(3)
    handler.reset_mock()

    view.clear_filters()

    assert view.current_page == 1
    assert view.total_items == 25
    assert view.get_active_filters() == frozenset()
    handler.assert_called_once_with(FiltersChanged(keys=frozenset()))


def test_get_active_filters_is_snapshot(view: PagedView[int]):
    view.set_filter("a", lambda x: True)
    keys = view.get_active_filters()
    view.set_filter("b", lambda x: True)

    assert keys == {"a"}


def test_is_empty(view: PagedView[int]):
    view.set_filter("none", lambda x: False)

    assert view.is_empty
    assert not view.has_items
    assert not view.is_source_empty
    assert view.total_pages == 1
    assert view.current_page == 1


# sort


def test_sort(view: PagedView[int]):
    view.set_sort(lambda x: x, ascending=False)

    assert view.current_page_items == [25, 24, 23, 22, 21]
    assert view.is_sorted
    assert view.sort_ascending is False


def test_sort_none(view: PagedView[int]):
    with pytest.raises(InvalidArgument):
        view.set_sort(None)

    assert not view.is_sorted


@pytest.mark.parametrize(
    "selector,ascending", [("name", True), (lambda x: x, "sideways")]
)
def test_sort_invalid(view: PagedView[int], selector, ascending):
    view.go_to_page(2)
    listener = view.subscribe(Mock())

    with pytest.raises(BadRequest):
        view.set_sort(selector, ascending=ascending)

    assert not view.is_sorted
    assert view.current_page == 2
    assert not listener.called


def test_sort_replaces_previous(people, scheduler):
    view = PagedView(page_size=10, scheduler=scheduler)
    view.set_source(people)

    view.set_sort(lambda p: p.name)
    view.set_sort(lambda p: p.age)

    # only the age key is active; equal ages keep source order
    assert [p.name for p in view.filtered] == [
        "Frank",
        "Charlie",
        "Diana",
        "Alice",
        "Shrek",
        "Bob",
        "Eve",
    ]


def test_sort_clear_sort_round_trip(people, scheduler):
    view = PagedView(page_size=3, scheduler=scheduler)
    view.set_source(people)

    view.set_sort(lambda p: p.name, ascending=True)
    view.go_to_page(2)
    view.clear_sort()

    assert list(view.filtered) == people
    assert view.current_page == 1
    assert not view.is_sorted
    assert view.sort_ascending is None


def test_sort_preserves_position(view: PagedView[int]):
    view.go_to_page(4)

    view.set_sort(lambda x: -x)

    assert view.current_page == 4


def test_sort_notifies(view: PagedView[int], listener: Mock, handler: Mock):
    view.set_sort(lambda x: x)

    assert notified(listener)[-1] is Property.IS_SORTED
    handler.assert_called_once_with(SortChanged(is_sorted=True, ascending=True))

    handler.reset_mock()
    view.clear_sort()

    assert notified(listener)[-1] is Property.IS_SORTED
    handler.assert_called_once_with(SortChanged(is_sorted=False))


# navigation


def test_pagination_moves_between_pages(scheduler):
    view = PagedView(page_size=2, scheduler=scheduler)
    view.set_source([1, 2, 3, 4, 5, 6])

    assert (view.total_pages, view.current_page) == (3, 1)
    assert view.has_next and not view.has_previous

    view.next_page()
    assert view.current_page == 2
    assert view.has_next and view.has_previous
    assert view.current_page_items == [3, 4]

    view.next_page()
    assert view.current_page == 3
    assert not view.has_next and view.has_previous
    assert view.current_page_items == [5, 6]

    view.next_page()
    assert view.current_page == 3

    view.previous_page()
    view.previous_page()
    view.previous_page()
    assert view.current_page == 1
    assert view.current_page_items == [1, 2]


def test_previous_page_at_first_is_noop(view: PagedView[int], listener: Mock, handler: Mock):
    for _ in range(3):
        view.previous_page()

    assert view.current_page == 1
    assert not listener.called
    assert not handler.called


def test_next_page_at_last_is_noop(view: PagedView[int], listener: Mock):
    view.go_to_last_page()
    listener.reset_mock()

    for _ in range(3):
        view.next_page()

    assert view.current_page == view.total_pages == 5
    assert not listener.called


def test_next_page_notifies(view: PagedView[int], listener: Mock, handler: Mock):
    view.next_page()

    assert listener.call_args_list == [
        call(view, property=Property.CURRENT_PAGE_ITEMS),
        call(view, property=Property.CURRENT_PAGE),
        call(view, property=Property.HAS_NEXT),
        call(view, property=Property.HAS_PREVIOUS),
    ]
    handler.assert_called_once_with(PageChanged(page=2))


@pytest.mark.parametrize(
    "page,expected", [(3, 3), (10**9, 5), (0, 1), (-4, 1), (5, 5), (1, 1)]
)
def test_go_to_page_clamps(view: PagedView[int], page, expected):
    view.go_to_page(page)

    assert view.current_page == expected


def test_go_to_same_page_does_not_notify(view: PagedView[int], listener: Mock):
    view.go_to_page(1)
    view.go_to_page(-1)

    assert not listener.called


def test_go_to_first_and_last_page(view: PagedView[int]):
    view.go_to_last_page()
    assert view.current_page == 5
    assert view.current_page_items == [21, 22, 23, 24, 25]

    view.go_to_first_page()
    assert view.current_page == 1


def test_set_page_size_preserves_offset(view: PagedView[int]):
    view.go_to_page(3)  # offset 10

    view.set_page_size(10)

    assert view.current_page == 2
    assert view.current_page_items == list(range(11, 21))


def test_set_page_size_smaller(view: PagedView[int]):
    view.go_to_page(3)  # offset 10

    view.set_page_size(2)

    assert view.current_page == 6
    assert view.current_page_items == [11, 12]


@pytest.mark.parametrize("size", [0, -5])
def test_set_page_size_invalid(view: PagedView[int], size):
    with pytest.raises(InvalidRange):
        view.set_page_size(size)

    assert view.page_size == 5


def test_set_page_size_notifies(view: PagedView[int], listener: Mock, handler: Mock):
    view.set_page_size(7)

    assert Property.CURRENT_PAGE_ITEMS in notified(listener)
    assert notified(listener)[-1] is Property.PAGE_SIZE
    handler.assert_called_once_with(PageSizeChanged(page_size=7))


def test_page_snapshot(view: PagedView[int]):
    view.go_to_page(5)

    page = view.page()

    assert page.total == 25
    assert list(page.items) == [21, 22, 23, 24, 25]
    assert page.limit == 5
    assert page.offset == 20
    assert (page.page, page.total_pages) == (5, 5)


def test_unsubscribe(view: PagedView[int], listener: Mock):
    view.unsubscribe(listener)
    view.next_page()

    assert not listener.called


def test_views_are_independent(scheduler):
    a = PagedView(page_size=2, scheduler=scheduler)
    b = PagedView(page_size=2, scheduler=scheduler)
    listener = a.subscribe(Mock())
    handler = a.events.register_handler(ViewEvent, Mock())

    b.set_source([1, 2, 3])

    assert not listener.called
    assert not handler.called
    assert a.is_source_empty


def test_subscribe_as_decorator(view: PagedView[int]):
    seen = []

    @view.subscribe
    def on_change(sender, property):
        seen.append((sender, property))

    view.next_page()

    assert seen[0] == (view, Property.CURRENT_PAGE_ITEMS)
