from __future__ import annotations

from .core.container import ChildViewContainer
from .core.errors import ContainerError, InvalidViewInput, NotAView
from .core.options import ContainerOptions
from .core.views import Collection, Identified, Model, View, unique_id

__all__ = [
    "ChildViewContainer",
    "ContainerOptions",
    "ContainerError",
    "InvalidViewInput",
    "NotAView",
    "Identified",
    "View",
    "Model",
    "Collection",
    "unique_id",
]
