from __future__ import annotations

import itertools

import pytest

from src.class_attendance.class_attendance.attendance.repository import mark_attendance
from src.class_attendance.class_attendance.classes.repository import add_class
from src.class_attendance.class_attendance.storage.memory_store import InMemoryDatasetStore
from src.class_attendance.class_attendance.storage.model import Dataset
from src.class_attendance.class_attendance.students.repository import add_student


def counter_ids():
    counter = itertools.count(1)
    return lambda prefix: f"{prefix}_{next(counter)}"


@pytest.fixture
def ids():
    return counter_ids()


@pytest.fixture
def store():
    return InMemoryDatasetStore()


@pytest.fixture
def may_dataset(ids) -> Dataset:
    """Class C1 with Alice and Bob; two days of attendance in May 2024."""
    ds = Dataset.empty()
    ds, c1 = add_class(ds, "C1", id_factory=ids)
    ds, alice = add_student(ds, c1.id, "Alice", id_factory=ids)
    ds, bob = add_student(ds, c1.id, "Bob", id_factory=ids)
    ds = mark_attendance(ds, c1.id, "2024-05-01", {alice.id})
    ds = mark_attendance(ds, c1.id, "2024-05-02", {alice.id, bob.id})
    return ds
