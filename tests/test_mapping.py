import pytest

from modinha.errors import UndefinedMappingError
from modinha.mapping import MapRegistry, map_paths, select


def test_map_reshapes_foreign_data():
    payload = {"login": "ana", "avatar_url": "a.png", "meta": {"id": 7}}
    out = {}
    map_paths(payload, out, {"name": "login", "images.avatar": "avatar_url", "id": "meta.id"})
    assert out == {"name": "ana", "images": {"avatar": "a.png"}, "id": 7}


def test_unresolved_source_path_writes_none():
    out = {}
    map_paths({"a": {}}, out, {"x": "a.b.c", "y.z": "missing"})
    assert out == {"x": None, "y": {"z": None}}


def test_falsy_values_resolve():
    data = {"zero": 0, "no": False, "empty": "", "nested": {"n": 0}}
    out = {}
    select(data, out, ["zero", "no", "empty", "nested.n"])
    assert out == {"zero": 0, "no": False, "empty": "", "nested": {"n": 0}}


def test_falsy_intermediate_stops_traversal():
    out = {}
    map_paths({"a": 0, "s": ""}, out, {"x": "a.b", "y": "s.t"})
    assert out == {"x": None, "y": None}


def test_sequence_segments():
    out = {}
    map_paths({"items": [{"id": 1}, {"id": 2}]}, out, {"second": "items.1.id"})
    assert out == {"second": 2}


def test_select_round_trip():
    data = {"x": 1, "y": {"z": 2, "w": 3}, "other": 4}
    out = {}
    select(data, out, ["x", "y.z"])
    assert out == {"x": 1, "y": {"z": 2}}


def test_existing_target_containers_are_reused():
    inner = {"keep": 1}
    out = {"a": inner}
    map_paths({"v": 2}, out, {"a.b": "v"})
    assert out["a"] is inner
    assert inner == {"keep": 1, "b": 2}


def test_registry_resolves_names_and_literals():
    maps = MapRegistry({"github": {"name": "login"}})
    assert maps.resolve("github") == {"name": "login"}
    literal = {"name": "full_name"}
    assert maps.resolve(literal) is literal
    assert "github" in maps and len(maps) == 1
    assert maps["github"] == {"name": "login"}


def test_registry_unknown_name():
    with pytest.raises(UndefinedMappingError, match="twitter"):
        MapRegistry().resolve("twitter")


def test_registry_merged_leaves_original_untouched():
    base = MapRegistry({"a": {"x": "y"}})
    merged = base.merged({"b": {"p": "q"}, "a": {"x": "z"}})
    assert base.resolve("a") == {"x": "y"} and "b" not in base
    assert merged.resolve("a") == {"x": "z"} and merged.resolve("b") == {"p": "q"}
    assert sorted(merged) == ["a", "b"]


def test_registry_register_copies_mapping():
    mapping = {"x": "y"}
    maps = MapRegistry()
    maps.register("m", mapping)
    mapping["x"] = "changed"
    assert maps.resolve("m") == {"x": "y"}


def test_scalar_in_target_path_is_replaced():
    out = {}
    map_paths({"x": 5, "y": 2}, out, {"a": "x", "a.b": "y"})
    assert out == {"a": {"b": 2}}


def test_scalar_on_instance_path_is_replaced(User):
    user = User.initialize({"name": "ana"})
    map_paths({"v": 1}, user, {"name.first": "v"})
    assert user.name == {"first": 1}


def test_negative_or_padded_index_is_absent():
    out = {}
    map_paths({"items": [10, 20]}, out, {"last": "items.-1", "padded": "items. 1", "first": "items.0"})
    assert out == {"last": None, "padded": None, "first": 10}
