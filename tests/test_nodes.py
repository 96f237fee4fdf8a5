import pytest

from json_node_editor.kinds import value_type
from json_node_editor.nodes import NodeRow, build_node, build_rows, iter_node_paths, list_node_paths

DOCUMENT = {
    "customer": [
        {"name": "Ada", "orders": [1, 2]},
        "guest",
    ],
    "total": 3.5,
    "meta": {},
}


def test_value_type():
    assert value_type(None) == "null"
    assert value_type(True) == "boolean"
    assert value_type(1) == "number"
    assert value_type(1.5) == "number"
    assert value_type("s") == "string"
    assert value_type([]) == "array"
    assert value_type({}) == "object"
    with pytest.raises(TypeError):
        value_type(object())


def test_rows_for_object():
    assert build_rows({"a": 1, "b": [2]}) == [
        NodeRow(key="a", value=1, type="number"),
        NodeRow(key="b", value=[2], type="array"),
    ]


def test_rows_for_scalar_and_array():
    assert build_rows("x") == [NodeRow(key=None, value="x", type="string")]
    assert build_rows([1, 2]) == []


def test_row_type_is_checked():
    with pytest.raises(ValueError):
        NodeRow(key="a", value=1, type="integer")


def test_build_node():
    node = build_node(DOCUMENT, ["customer", 0])
    assert node.id == '$["customer"][0]'
    assert node.path == ("customer", 0)
    assert [row.key for row in node.rows] == ["name", "orders"]

    with pytest.raises(KeyError):
        build_node(DOCUMENT, ["missing"])


def test_node_paths():
    assert list(iter_node_paths(DOCUMENT)) == [
        (),
        ("customer", 0),
        ("customer", 0, "orders", 0),
        ("customer", 0, "orders", 1),
        ("customer", 1),
        ("meta",),
    ]
    assert list_node_paths({"a": [[1]]}) == ["$", '$["a"][0][0]']


def test_node_paths_for_scalar_and_array_roots():
    assert list(iter_node_paths(7)) == [()]
    assert list(iter_node_paths([])) == []
