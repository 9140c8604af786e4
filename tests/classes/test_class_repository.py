from __future__ import annotations

import pytest

from src.class_attendance.class_attendance.classes.repository import add_class, get_class, list_classes, update_class
from src.class_attendance.class_attendance.core.exceptions import InvalidOperation, NotFound
from src.class_attendance.class_attendance.storage.model import Dataset


def test_add_class_appends_with_fresh_id(ids):
    ds, a = add_class(Dataset.empty(), "Math", "A", id_factory=ids)
    ds, b = add_class(ds, "Science", id_factory=ids)

    assert list_classes(ds) == (a, b)
    assert a.id != b.id
    assert a.section == "A"
    assert b.section is None


def test_add_class_strips_name_and_blank_section():
    ds, group = add_class(Dataset.empty(), "  Math  ", "   ")

    assert group.name == "Math"
    assert group.section is None
    assert group.id.startswith("class_")


def test_add_class_rejects_empty_name():
    with pytest.raises(InvalidOperation):
        add_class(Dataset.empty(), "   ")


def test_add_class_never_reuses_existing_id():
    taken = iter(["class_1", "class_1", "class_2"])
    ds, first = add_class(Dataset.empty(), "Math", id_factory=lambda prefix: next(taken))
    ds, second = add_class(ds, "Art", id_factory=lambda prefix: next(taken))

    assert first.id == "class_1"
    assert second.id == "class_2"


def test_update_class_keeps_id_and_position(ids):
    ds, a = add_class(Dataset.empty(), "Math", id_factory=ids)
    ds, b = add_class(ds, "Science", id_factory=ids)

    ds = update_class(ds, a.id, "Mathematics", "B")

    assert [c.id for c in ds.classes] == [a.id, b.id]
    assert get_class(ds, a.id).name == "Mathematics"
    assert get_class(ds, a.id).section == "B"


def test_update_unknown_class_raises_not_found():
    with pytest.raises(NotFound):
        update_class(Dataset.empty(), "class_missing", "Math")


def test_failed_update_leaves_dataset_untouched(ids):
    ds, a = add_class(Dataset.empty(), "Math", id_factory=ids)

    with pytest.raises(InvalidOperation):
        update_class(ds, a.id, "")

    assert get_class(ds, a.id).name == "Math"
