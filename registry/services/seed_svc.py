from __future__ import annotations

from typing import Iterator

from ..domain.age import calculate_age
from ..domain.employee import EmployeeRecord

DEFAULT_COUNT = 1_000_000
DEFAULT_EXTRA_COUNT = 100
DEFAULT_BIRTH_DATE = "1990-01-01"


def synthetic_employees(
    count: int = DEFAULT_COUNT,
    extra_count: int = DEFAULT_EXTRA_COUNT,
    birth_date: str = DEFAULT_BIRTH_DATE,
    now: float | None = None,
) -> Iterator[EmployeeRecord]:
    """
    Lazily yield `count` records Name0.. with gender alternating Male/Female by
    index parity, then `extra_count` records F0.. that are all Male, so they
    match the default criteria query.
    """
    age = calculate_age(birth_date, now)
    for i in range(count):
        gender = "Male" if i % 2 == 0 else "Female"
        yield EmployeeRecord(f"Name{i}", birth_date, gender, age)
    for i in range(extra_count):
        yield EmployeeRecord(f"F{i}", birth_date, "Male", age)
