from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .container import ChildViewContainer


DEFAULT_CUSTOM_INDEX_PROPERTY = "custom_index"


@dataclass
class ContainerOptions:
    """Construction options for a `ChildViewContainer`.

    Notes:
    - `parser` turns arbitrary input into a view; a falsy return means "unexpected format".
    - `initialize` runs once, after the initial views have been added. It is called as
      `initialize(container, options)`, not with the options alone, so the hook can seed
      or inspect the container it belongs to.
    - `custom_index_property` names the view attribute used when `add()` gets no explicit custom index.
    """

    parser: Callable[[Any], Any] | None = None
    initialize: Callable[["ChildViewContainer", "ContainerOptions"], None] | None = None
    custom_index_property: str = DEFAULT_CUSTOM_INDEX_PROPERTY

    def __post_init__(self) -> None:
        if self.parser is not None and not callable(self.parser):
            raise ValueError("parser must be callable")
        if self.initialize is not None and not callable(self.initialize):
            raise ValueError("initialize must be callable")
        prop = str(self.custom_index_property).strip() if self.custom_index_property is not None else ""
        if not prop:
            raise ValueError("custom_index_property cannot be empty")
        self.custom_index_property = prop

    @classmethod
    def from_any(cls, value: Any) -> "ContainerOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = sorted(str(k) for k in value if k not in known)
            if unknown:
                raise ValueError(f"Unknown container options: {', '.join(unknown)}")
            # None means "use the default" for every option.
            return cls(**{k: v for k, v in value.items() if v is not None})

        raise ValueError("Container options must be a ContainerOptions instance, a mapping, or None.")


__all__ = ["ContainerOptions", "DEFAULT_CUSTOM_INDEX_PROPERTY"]
