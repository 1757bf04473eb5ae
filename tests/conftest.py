from dataclasses import dataclass

import pytest

from clean_paging import PagedView
from clean_paging.testing import ManualScheduler


@dataclass
class Person:
    name: str
    department: str
    age: int
    email: str | None = None


@pytest.fixture
def people() -> list[Person]:
    return [
        Person(name="Alice", department="Engineering", age=34),
        Person(name="Bob", department="HR", age=45),
        Person(name="Charlie", department="Sales", age=29),
        Person(name="Diana", department="Engineering", age=29),
        Person(name="Eve", department="Marketing", age=51),
        Person(name="Shrek", department="Support", age=38),
        Person(name="Frank", department="HR", age=23),
    ]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def view(scheduler) -> PagedView[int]:
    view: PagedView[int] = PagedView(page_size=5, scheduler=scheduler)
    view.set_source(range(1, 26))
    return view
