import dataclasses

import pytest

from registry.domain.employee import EmployeeRecord


def test_create_computes_age_once(fixed_now):
    rec = EmployeeRecord.create("Ivan Petrov", "1990-05-20", "Male", now=fixed_now)
    assert rec == EmployeeRecord("Ivan Petrov", "1990-05-20", "Male", 36)


def test_format_line():
    rec = EmployeeRecord("Ivan Petrov", "1990-05-20", "Male", 36)
    assert rec.format_line() == "Ivan Petrov, 1990-05-20, Male, Age: 36"


def test_record_is_immutable():
    rec = EmployeeRecord("A", "1990-01-01", "Female", 30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.age = 31


def test_to_params_order():
    rec = EmployeeRecord("A", "1990-01-01", "Female", 30)
    assert rec.to_params() == ("A", "1990-01-01", "Female", 30)
