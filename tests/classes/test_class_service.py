from __future__ import annotations

import pytest

from src.class_attendance.class_attendance.classes.service import ClassService
from src.class_attendance.class_attendance.core.exceptions import NotFound


def test_service_persists_added_class(store):
    svc = ClassService(store)

    group = svc.add_class("Math", "A")

    assert store.save_count == 1
    assert svc.list_classes() == (group,)
    assert svc.get_class(group.id) == group


def test_service_update_unknown_class_does_not_save(store):
    svc = ClassService(store)

    with pytest.raises(NotFound):
        svc.update_class("class_missing", "Math")

    assert store.save_count == 0
