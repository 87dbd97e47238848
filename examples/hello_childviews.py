import logging

from childviews import ChildViewContainer, Model, View


class TodoView(View):
    def render(self, prefix: str) -> str:
        title = self.model.attributes["title"] if self.model is not None else "?"
        line = f"{prefix} {title}"
        print(line)
        return line


def _parse(raw: object) -> TodoView | None:
    # Accept plain titles or ready-made views.
    if isinstance(raw, TodoView):
        return raw
    if isinstance(raw, str) and raw.strip():
        return TodoView(model=Model({"title": raw.strip()}), custom_index=raw.strip().lower())
    return None


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(name)s | %(message)s")

    children = ChildViewContainer(
        ["Buy milk", "", "Write docs"],
        {"parser": _parse, "initialize": lambda c, o: print(f"{c.length} views ready")},
    )

    children.call("render", "-")
    print(children.invoke("render", "*"))

    docs = children.find_by_custom("write docs")
    if docs is not None:
        children.remove(docs)
    print(f"after remove: {children.length} view(s), first={children.first().model.attributes['title']}")


if __name__ == "__main__":
    main()
