from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any

from .errors import ContainerError, InvalidViewInput, NotAView
from .options import ContainerOptions
from .sequence import SequenceOps
from .views import cid_of, is_hashable, is_view


class ChildViewContainer(SequenceOps):
    """Store child views by `cid` and look them up by model, collection or a custom key.

    Secondary indexes are last-write-wins: when two views share a model, collection
    or custom key, the index points at the one added most recently. Both views stay
    retrievable by `cid`.
    """

    def __init__(
        self,
        initial_views: Iterable[Any] | None = None,
        options: ContainerOptions | dict[str, Any] | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._views: dict[Hashable, Any] = {}
        self._index_by_model: dict[Hashable, Hashable] = {}
        self._index_by_collection: dict[Hashable, Hashable] = {}
        self._index_by_custom: dict[Hashable, Hashable] = {}

        self.options = ContainerOptions.from_any(options)
        self._logger = logger or logging.getLogger(__name__)

        self._add_initial_views(initial_views)

        if self.options.initialize is not None:
            self.options.initialize(self, self.options)

    @property
    def length(self) -> int:
        return len(self._views)

    def __len__(self) -> int:
        return len(self._views)

    def __contains__(self, item: object) -> bool:
        cid = cid_of(item)
        if cid is not None:
            return self._views.get(cid) is item
        return is_hashable(item) and item in self._views

    def __repr__(self) -> str:
        return f"ChildViewContainer(length={len(self._views)}, cids={list(self._views)!r})"

    def views(self) -> list[Any]:
        return list(self._views.values())

    def _coerce_view(self, value: Any) -> Any:
        parser = self.options.parser
        view = parser(value) if parser is not None else value
        if is_view(view):
            return view
        try:
            empty = not view
        except (TypeError, ValueError) as exc:
            # Arrays and frames refuse a truth test.
            raise NotAView(f"Cannot add non-view object to container: {value!r}", value) from exc
        if empty:
            raise InvalidViewInput(f"Couldn't add view {value!r}: unexpected format", value)
        raise NotAView(f"Cannot add non-view object to container: {value!r}", value)

    def _resolve_custom_index(self, view: Any, custom_index: Any) -> Any:
        if custom_index is None:
            custom_index = getattr(view, self.options.custom_index_property, None)
        if custom_index is not None and not is_hashable(custom_index):
            raise InvalidViewInput(
                f"Cannot index view {cid_of(view)!r} by unhashable custom index {custom_index!r}",
                custom_index,
            )
        return custom_index

    def _drop_index_entries(self, view_cid: Hashable) -> None:
        # Only entries that still point at this cid; a later view may own the key.
        for index in (self._index_by_model, self._index_by_collection, self._index_by_custom):
            for key in [k for k, cid in index.items() if cid == view_cid]:
                del index[key]

    def add(self, view: Any, custom_index: Any = None) -> None:
        """Add a view, indexing it by model, collection and custom index when present.

        Input the parser rejects, or anything without a usable `cid`, is reported
        through the logger and skipped. Adding a view whose `cid` is already stored
        replaces the earlier registration, index entries included.
        """
        try:
            view = self._coerce_view(view)
            custom_index = self._resolve_custom_index(view, custom_index)
        except ContainerError as exc:
            self._logger.error("%s", exc)
            return

        view_cid = cid_of(view)
        if view_cid in self._views:
            self._drop_index_entries(view_cid)
        self._views[view_cid] = view

        model_cid = cid_of(getattr(view, "model", None))
        if model_cid is not None:
            self._index_by_model[model_cid] = view_cid

        collection_cid = cid_of(getattr(view, "collection", None))
        if collection_cid is not None:
            self._index_by_collection[collection_cid] = view_cid

        if custom_index is not None:
            self._index_by_custom[custom_index] = view_cid

        self._logger.debug("Added view %r (length=%d)", view_cid, len(self._views))

    def remove(self, view: Any) -> None:
        """Forget a view and every index entry that points at it. Unknown views are ignored."""
        view_cid = cid_of(view)
        if view_cid is None or view_cid not in self._views:
            return

        self._drop_index_entries(view_cid)
        del self._views[view_cid]
        self._logger.debug("Removed view %r (length=%d)", view_cid, len(self._views))

    def find_by_cid(self, cid: Any) -> Any | None:
        if cid is None or not is_hashable(cid):
            return None
        return self._views.get(cid)

    def find_by_model(self, model: Any) -> Any | None:
        return self._find_indexed(self._index_by_model, cid_of(model))

    def find_by_collection(self, collection: Any) -> Any | None:
        return self._find_indexed(self._index_by_collection, cid_of(collection))

    def find_by_custom(self, index: Any) -> Any | None:
        if index is None or not is_hashable(index):
            return None
        return self._find_indexed(self._index_by_custom, index)

    def find_by_index(self, index: int) -> Any | None:
        """Return the view at `index` in insertion order.

        This is not a stable index: removing and adding views shifts positions.
        """
        if index < 0 or index >= len(self._views):
            return None
        return self.views()[index]

    def _find_indexed(self, index: dict[Hashable, Hashable], key: Hashable | None) -> Any | None:
        if key is None:
            return None
        return self.find_by_cid(index.get(key))

    def call(self, method: str, *args: Any) -> None:
        """Call `method` on every view that has it, like `function.call`."""
        self.apply(method, args)

    def apply(self, method: str, args: Iterable[Any] | None = None) -> None:
        """Call `method` on every view that has it, like `function.apply`."""
        args = tuple(args) if args is not None else ()
        for view in self.views():
            fn = getattr(view, method, None)
            if callable(fn):
                fn(*args)

    def _add_initial_views(self, views: Iterable[Any] | None) -> None:
        if views is None:
            return
        for view in views:
            self.add(view)


__all__ = ["ChildViewContainer"]
