from __future__ import annotations

import uuid
from typing import Callable, Container

IdFactory = Callable[[str], str]


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def fresh_id(prefix: str, taken: Container[str], id_factory: IdFactory = new_id) -> str:
    """Return an id from ``id_factory`` that is not in ``taken``."""
    candidate = id_factory(prefix)
    while candidate in taken:
        candidate = id_factory(prefix)
    return candidate
