import pytest

from waypoint_path.errors import MalformedGraphError, UnresolvedNodeError
from waypoint_path.models import PathResult
from waypoint_path.service import find_shortest_path, shortest_distances


def test_breadth_first_keeps_first_settlement(detour_graph):
    result = find_shortest_path(detour_graph, "A", "D")
    assert result.distance == 11
    assert result.path == "A -> B -> D"
    assert result.nodes == ["A", "B", "D"]


def test_weighted_strategy_finds_cheaper_route(detour_graph):
    result = find_shortest_path(detour_graph, "A", "D", strategy="weighted")
    assert result.distance == 3
    assert result.path == "A -> C -> B -> D"


def test_uniform_graph(uniform_graph):
    result = find_shortest_path(uniform_graph, "A", "D")
    assert result.model_dump() == {"distance": 2, "path": "A -> B -> D"}


@pytest.mark.parametrize("label", ["A", "B", "C", "D"])
def test_same_start_and_end(uniform_graph, label):
    result = find_shortest_path(uniform_graph, label, label)
    assert result.distance == 0
    assert result.path == f"{label} -> {label}"
    assert result.reachable


def test_unreachable_sentinel(split_graph):
    result = find_shortest_path(split_graph, "A", "D")
    assert result.model_dump() == {"distance": -1, "path": ""}
    assert not result.reachable
    assert result == PathResult.unreachable()


def test_reverse_direction_unreachable(uniform_graph):
    assert find_shortest_path(uniform_graph, "D", "A").distance == -1


def test_zero_cost_route_is_not_unreachable():
    result = find_shortest_path({"A": {"B": 0}, "B": {}}, "A", "B")
    assert result.distance == 0
    assert result.path == "A -> B"


def test_repeated_calls_agree(detour_graph):
    first = find_shortest_path(detour_graph, "A", "D")
    second = find_shortest_path(detour_graph, "A", "D")
    assert first == second
    assert detour_graph == {"A": {"B": 10, "C": 1}, "B": {"D": 1}, "C": {"B": 1, "D": 10}}


def test_unknown_waypoint(uniform_graph):
    with pytest.raises(UnresolvedNodeError):
        find_shortest_path(uniform_graph, "A", "Z")
    with pytest.raises(UnresolvedNodeError):
        find_shortest_path(uniform_graph, "Z", "Z")


def test_malformed_graph():
    with pytest.raises(MalformedGraphError):
        find_shortest_path({"A": {"B": -4}, "B": {}}, "A", "B")


def test_unknown_strategy(uniform_graph):
    with pytest.raises(ValueError):
        find_shortest_path(uniform_graph, "A", "D", strategy="astar")


def test_custom_separator(uniform_graph):
    assert find_shortest_path(uniform_graph, "A", "D", separator=",").path == "A,B,D"


def test_shortest_distances(split_graph):
    rows = shortest_distances(split_graph, "A")
    assert [(row.label, row.distance, row.path) for row in rows] == [
        ("A", 0, "A"),
        ("B", 3, "A -> B"),
        ("C", None, ""),
        ("D", None, ""),
    ]


def test_shortest_distances_weighted(detour_graph):
    rows = {row.label: row for row in shortest_distances(detour_graph, "A", strategy="weighted")}
    assert rows["B"].distance == 2
    assert rows["D"].path == "A -> C -> B -> D"
