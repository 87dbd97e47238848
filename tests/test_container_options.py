from __future__ import annotations

import pytest

from childviews import ChildViewContainer, ContainerOptions, Model, View


def test_parser_converts_raw_input_into_views() -> None:
    models: dict[str, Model] = {}

    def parse(raw: dict[str, str]) -> View:
        model = models.setdefault(raw["model"], Model({"name": raw["model"]}))
        return View(model=model, custom_index=raw["slot"])

    views = ChildViewContainer(
        [{"model": "a", "slot": "left"}, {"model": "b", "slot": "right"}],
        ContainerOptions(parser=parse),
    )

    assert views.length == 2
    assert views.find_by_model(models["a"]) is views.find_by_custom("left")
    assert views.find_by_model(models["b"]) is views.find_by_custom("right")


def test_parser_rejections_are_skipped_without_aborting_seeding() -> None:
    def parse(raw: object) -> View | None:
        if raw == "skip":
            return None
        return View(custom_index=raw)

    views = ChildViewContainer(["one", "skip", "two"], {"parser": parse})

    assert views.length == 2
    assert views.find_by_custom("one") is not None
    assert views.find_by_custom("two") is not None


def test_initialize_runs_once_after_seeding() -> None:
    calls: list[tuple[int, ContainerOptions]] = []

    def init(container: ChildViewContainer, options: ContainerOptions) -> None:
        calls.append((container.length, options))

    options = ContainerOptions(initialize=init)
    views = ChildViewContainer([View(), View()], options)

    assert calls == [(2, options)]
    assert views.options is options


def test_initialize_runs_without_initial_views() -> None:
    seen: list[ChildViewContainer] = []
    views = ChildViewContainer(None, {"initialize": lambda c, o: seen.append(c)})

    assert seen == [views]
    assert views.length == 0


def test_custom_index_property_is_configurable() -> None:
    class Tab:
        def __init__(self, key: str) -> None:
            self.cid = f"tab-{key}"
            self.slug = key

    settings = Tab("settings")
    views = ChildViewContainer([settings], {"custom_index_property": "slug"})

    assert views.options.custom_index_property == "slug"
    assert views.find_by_custom("settings") is settings


def test_default_custom_index_property() -> None:
    assert ContainerOptions.from_any(None).custom_index_property == "custom_index"
    assert ContainerOptions.from_any({"custom_index_property": None}).custom_index_property == "custom_index"


def test_options_from_any_returns_instances_unchanged() -> None:
    options = ContainerOptions(custom_index_property="slot")
    assert ContainerOptions.from_any(options) is options


def test_options_reject_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unknown container options: parse"):
        ContainerOptions.from_any({"parse": lambda raw: raw})


def test_options_reject_non_callable_hooks() -> None:
    with pytest.raises(ValueError, match="parser must be callable"):
        ContainerOptions(parser="not callable")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="initialize must be callable"):
        ChildViewContainer(None, {"initialize": 42})


def test_options_reject_empty_custom_index_property() -> None:
    with pytest.raises(ValueError, match="custom_index_property cannot be empty"):
        ContainerOptions(custom_index_property="  ")


def test_options_reject_unsupported_types() -> None:
    with pytest.raises(ValueError, match="Container options must be"):
        ContainerOptions.from_any(["parser"])


def test_initialize_can_seed_the_container_it_receives() -> None:
    extra = View(custom_index="late")

    def init(container: ChildViewContainer, options: ContainerOptions) -> None:
        container.add(extra)

    views = ChildViewContainer([View()], {"initialize": init})

    assert views.length == 2
    assert views.find_by_custom("late") is extra
