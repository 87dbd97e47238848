from __future__ import annotations

import itertools
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


_ID_COUNTER = itertools.count(1)


def unique_id(prefix: str = "") -> str:
    """Return a process-unique identity token such as ``view12``."""
    return f"{prefix}{next(_ID_COUNTER)}"


@runtime_checkable
class Identified(Protocol):
    """Anything that carries a stable identity token."""

    cid: Hashable


def is_hashable(value: object) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def cid_of(obj: object) -> Hashable | None:
    """Return the usable identity token of ``obj`` or None.

    A token is usable when it is present, not None and hashable.
    """
    cid = getattr(obj, "cid", None)
    if cid is None or not is_hashable(cid):
        return None
    return cid


def is_view(obj: object) -> bool:
    return isinstance(obj, Identified) and cid_of(obj) is not None


@dataclass(eq=False)
class Model:
    """Minimal model-like object that views can be attached to.

    Equality is identity: two models are the same only if they are the same object.
    """

    attributes: dict[str, Any] = field(default_factory=dict)
    cid: str = field(default_factory=lambda: unique_id("c"))


@dataclass(eq=False)
class Collection:
    models: list[Model] = field(default_factory=list)
    cid: str = field(default_factory=lambda: unique_id("c"))


@dataclass(eq=False)
class View:
    """Reference item type for a container.

    Notes:
    - `model` and `collection` are optional relations, each indexed by its own `cid`.
    - `custom_index` is read by containers using the default `custom_index_property`.
    """

    model: Model | None = None
    collection: Collection | None = None
    custom_index: Hashable | None = None
    cid: str = field(default_factory=lambda: unique_id("view"))
