from __future__ import annotations

from typing import Optional

from ..common.ids import IdFactory, fresh_id, new_id
from ..common.validators import optional_text, require_non_empty
from ..core.constants import CLASS_ID_PREFIX
from ..core.exceptions import NotFound
from ..storage.model import Dataset
from .model import ClassGroup


def list_classes(dataset: Dataset) -> tuple[ClassGroup, ...]:
    return dataset.classes


def find_class(dataset: Dataset, class_id: str) -> Optional[ClassGroup]:
    for c in dataset.classes:
        if c.id == class_id:
            return c
    return None


def get_class(dataset: Dataset, class_id: str) -> ClassGroup:
    found = find_class(dataset, class_id)
    if not found:
        raise NotFound(f"Class {class_id!r} does not exist")
    return found


def add_class(
    dataset: Dataset,
    name: str,
    section: Optional[str] = None,
    *,
    id_factory: IdFactory = new_id,
) -> tuple[Dataset, ClassGroup]:
    group = ClassGroup(
        id=fresh_id(CLASS_ID_PREFIX, dataset.all_ids(), id_factory),
        name=require_non_empty(name, "Class name"),
        section=optional_text(section),
    )
    return dataset.with_classes(dataset.classes + (group,)), group


def update_class(dataset: Dataset, class_id: str, name: str, section: Optional[str] = None) -> Dataset:
    """Rename a class in place; its id and position never change."""
    current = get_class(dataset, class_id)
    updated = ClassGroup(
        id=current.id,
        name=require_non_empty(name, "Class name"),
        section=optional_text(section),
    )
    return dataset.with_classes(updated if c.id == class_id else c for c in dataset.classes)
