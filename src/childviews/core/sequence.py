from __future__ import annotations

from typing import Any, Callable, Iterator


Predicate = Callable[[Any], Any]


class SequenceOps:
    """Read-only iteration helpers over a snapshot of stored views.

    Subclasses provide `views()`, which must return a fresh list on every call so
    callbacks can add or remove views without disturbing the traversal.
    """

    def views(self) -> list[Any]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        return iter(self.views())

    def to_list(self) -> list[Any]:
        return self.views()

    to_array = to_list

    def each(self, fn: Callable[[Any], Any]) -> None:
        for view in self.views():
            fn(view)

    for_each = each

    def map(self, fn: Callable[[Any], Any]) -> list[Any]:
        return [fn(view) for view in self.views()]

    def find(self, predicate: Predicate) -> Any | None:
        for view in self.views():
            if predicate(view):
                return view
        return None

    detect = find

    def filter(self, predicate: Predicate) -> list[Any]:
        return [view for view in self.views() if predicate(view)]

    select = filter

    def reject(self, predicate: Predicate) -> list[Any]:
        return [view for view in self.views() if not predicate(view)]

    def every(self, predicate: Predicate | None = None) -> bool:
        test = predicate or bool
        return all(test(view) for view in self.views())

    all = every

    def some(self, predicate: Predicate | None = None) -> bool:
        test = predicate or bool
        return any(test(view) for view in self.views())

    any = some

    def contains(self, value: Any) -> bool:
        return any(view is value or view == value for view in self.views())

    include = contains
    includes = contains

    def invoke(self, method: str, *args: Any) -> list[Any]:
        """Call `method` on every view and collect the results.

        Views without a callable `method` contribute None.
        """
        out: list[Any] = []
        for view in self.views():
            fn = getattr(view, method, None)
            out.append(fn(*args) if callable(fn) else None)
        return out

    def pluck(self, name: str) -> list[Any]:
        return [getattr(view, name, None) for view in self.views()]

    def first(self, n: int | None = None) -> Any:
        views = self.views()
        if n is None:
            return views[0] if views else None
        return views[: max(int(n), 0)]

    def last(self, n: int | None = None) -> Any:
        views = self.views()
        if n is None:
            return views[-1] if views else None
        n = max(int(n), 0)
        return views[max(len(views) - n, 0) :] if n else []

    def initial(self, n: int = 1) -> list[Any]:
        views = self.views()
        n = max(int(n), 0)
        return views[: max(len(views) - n, 0)]

    def rest(self, n: int = 1) -> list[Any]:
        return self.views()[max(int(n), 0) :]

    def without(self, *values: Any) -> list[Any]:
        return [view for view in self.views() if not any(view is v or view == v for v in values)]

    def is_empty(self) -> bool:
        return not self.views()


__all__ = ["SequenceOps"]
