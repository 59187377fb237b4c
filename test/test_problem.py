import pytest

from antfarm import AntFarm, MalformedEdge, build_adjacency


def test_adjacency_is_symmetric_and_keeps_insertion_order():
    adjacency = build_adjacency([("s", "b"), ("s", "a"), ("a", "e")])
    assert list(adjacency) == ["s", "b", "a", "e"]
    assert adjacency["s"] == ["b", "a"]
    assert adjacency["a"] == ["s", "e"]
    assert adjacency["e"] == ["a"]


def test_repeated_tunnel_is_recorded_once():
    adjacency = build_adjacency([("a", "b"), ("b", "a"), ("a", "b")])
    assert adjacency == {"a": ["b"], "b": ["a"]}


@pytest.mark.parametrize(
    "edge",
    [("A", "A"), ("A",), ("A", "B", "C"), ("", "B"), "AB"],
)
def test_malformed_edges_are_rejected(edge):
    with pytest.raises(MalformedEdge, match="invalid link between rooms"):
        build_adjacency([("x", "y"), edge])


def test_farm_rejects_degenerate_inputs():
    with pytest.raises(ValueError):
        AntFarm.from_edges(0, "s", "e", [("s", "e")])
    with pytest.raises(ValueError):
        AntFarm.from_edges(3, "s", "s", [("s", "e")])


def test_other_rooms_lists_linked_then_isolated_rooms():
    farm = AntFarm.from_edges(1, "s", "e", [("s", "b"), ("b", "e")], rooms=["s", "lonely", "b", "e"])
    assert farm.other_rooms() == ["b", "lonely"]
    assert farm.neighbors("b") == ["s", "e"]
    assert farm.neighbors("lonely") == []
