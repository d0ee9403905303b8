from dataclasses import dataclass
from enum import Enum

from diffpack.core import MISSING, caching_canonicalizer, canonicalize, describe, tagged_union


@dataclass
class Point:
    x: int
    y: int


@tagged_union
class Figure:
    pass


@dataclass
class Circle(Figure):
    radius: float


@dataclass
class Rect(Figure):
    width: int
    height: int


@dataclass
class Dot(Figure):
    pass


class Color(Enum):
    RED = "red"


def test_equivalent_maps_canonicalize_identically() -> None:
    left = {"b": 2, "a": {"y": [1, 2], "x": None}}
    right = {"a": {"x": None, "y": [1, 2]}, "b": 2}

    assert canonicalize(left) == canonicalize(right)
    assert canonicalize(left) == "{'a': {'x': None, 'y': [1, 2]}, 'b': 2}"


def test_sets_render_in_sorted_order() -> None:
    assert canonicalize({3, 1, 2}) == "{1, 2, 3}"
    assert canonicalize(frozenset({"b", "a"})) == "frozenset({'a', 'b'})"
    assert canonicalize(set()) == "set()"


def test_list_order_is_significant() -> None:
    assert canonicalize([1, 2]) != canonicalize([2, 1])


def test_strings_and_numbers_stay_distinguishable() -> None:
    assert canonicalize("1") != canonicalize(1)
    assert canonicalize("1") == "'1'"


def test_records_render_with_type_and_field_names() -> None:
    assert canonicalize(Point(x=1, y=2)) == "Point(x=1, y=2)"
    assert canonicalize((1,)) == "(1,)"
    assert canonicalize((1, "a")) == "(1, 'a')"


def test_tagged_union_cases_render_with_base_name() -> None:
    assert canonicalize(Circle(radius=1.0)) == "Figure.Circle(1.0)"
    assert canonicalize(Rect(width=1, height=2)) == "Figure.Rect(width=1, height=2)"
    assert canonicalize(Dot()) == "Figure.Dot"
    assert canonicalize(Color.RED) == "Color.RED"


def test_objects_without_repr_render_stably() -> None:
    class Blank:
        pass

    assert canonicalize(Blank()) == canonicalize(Blank())
    assert canonicalize(Blank()) == "Blank()"


def test_reference_cycles_are_cut() -> None:
    looped: list = [1]
    looped.append(looped)

    assert canonicalize(looped) == "[1, <cycle list>]"


def test_describe_uses_plain_text_for_leaves() -> None:
    assert describe("abc") == "abc"
    assert describe(3) == "3"
    assert describe(None) == "None"
    assert describe(MISSING) == "<missing>"
    assert describe(Color.RED) == "Color.RED"


def test_describe_uses_canonical_rendering_for_composites() -> None:
    assert describe({"b", "a"}) == "{'a', 'b'}"
    assert describe([1, "x"]) == "[1, 'x']"
    assert describe(Dot()) == "Figure.Dot"
    assert describe([1], canonicalizer=lambda value: "custom") == "custom"


def test_deeply_nested_values_render_without_recursion() -> None:
    depth = 1500
    value: object = "leaf"
    for _ in range(depth):
        value = {"next": value}

    rendered = canonicalize(value)

    assert rendered == "{'next': " * depth + "'leaf'" + "}" * depth


def test_shared_children_render_identically_at_every_position() -> None:
    shared = [1, {"a": 2}]

    assert canonicalize([shared, shared]) == "[[1, {'a': 2}], [1, {'a': 2}]]"


def test_cycle_reached_twice_is_cut_each_time() -> None:
    looped: list = [1]
    looped.append(looped)

    assert canonicalize([looped, looped]) == "[[1, <cycle list>], [1, <cycle list>]]"


def test_caching_canonicalizer_renders_each_object_once() -> None:
    calls: list[object] = []

    def counting(value: object) -> str:
        calls.append(value)
        return canonicalize(value)

    render = caching_canonicalizer(counting)
    point = Point(1, 2)

    assert render(point) == render(point) == "Point(x=1, y=2)"
    assert calls == [point]


def test_default_caching_canonicalizer_matches_canonicalize() -> None:
    render = caching_canonicalizer(canonicalize)
    inner = {"b": [1, 2], "a": Circle(1.0)}
    outer = [inner, {3, 1}]

    assert render(inner) == canonicalize(inner)
    assert render(outer) == canonicalize(outer)
    assert render(outer) == "[{'a': Figure.Circle(1.0), 'b': [1, 2]}, {1, 3}]"
