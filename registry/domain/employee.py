from __future__ import annotations

from dataclasses import dataclass
from sqlite3 import Row

from .age import calculate_age


@dataclass(frozen=True)
class EmployeeRecord:
    """
    In-memory employee row. `age` is fixed when the record is built and is
    never recomputed from `birth_date` afterwards, including when read back.
    """
    full_name: str
    birth_date: str
    gender: str
    age: int

    @classmethod
    def create(cls, full_name: str, birth_date: str, gender: str, now: float | None = None) -> "EmployeeRecord":
        return cls(full_name, birth_date, gender, calculate_age(birth_date, now))

    @classmethod
    def from_row(cls, row: Row) -> "EmployeeRecord":
        return cls(row["fullname"], row["birthdate"], row["gender"], int(row["age"]))

    def to_params(self) -> tuple[str, str, str, int]:
        return (self.full_name, self.birth_date, self.gender, self.age)

    def format_line(self) -> str:
        return f"{self.full_name}, {self.birth_date}, {self.gender}, Age: {self.age}"
