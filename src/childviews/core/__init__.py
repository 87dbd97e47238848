from __future__ import annotations

from .container import ChildViewContainer
from .errors import ContainerError, InvalidViewInput, NotAView
from .options import DEFAULT_CUSTOM_INDEX_PROPERTY, ContainerOptions
from .sequence import SequenceOps
from .views import Collection, Identified, Model, View, cid_of, is_hashable, is_view, unique_id

__all__ = [
    "ChildViewContainer",
    "ContainerOptions",
    "DEFAULT_CUSTOM_INDEX_PROPERTY",
    "SequenceOps",
    "ContainerError",
    "InvalidViewInput",
    "NotAView",
    "Identified",
    "View",
    "Model",
    "Collection",
    "cid_of",
    "is_hashable",
    "is_view",
    "unique_id",
]
