import pytest

from waypoint_path.loader import DEFAULT_GRAPH_FILE, _cached_graph


@pytest.fixture
def detour_graph():
    # cheapest A -> D route is A -> C -> B -> D, but B settles first via A -> B
    return {"A": {"B": 10, "C": 1}, "B": {"D": 1}, "C": {"B": 1, "D": 10}}


@pytest.fixture
def uniform_graph():
    return {"A": {"B": 1, "C": 5}, "B": {"C": 2, "D": 1}, "C": {"D": 1}, "D": {}}


@pytest.fixture
def split_graph():
    return {"A": {"B": 3}, "B": {"A": 3}, "C": {"D": 1}, "D": {}}


@pytest.fixture
def bundled_graph_file():
    return DEFAULT_GRAPH_FILE


@pytest.fixture(autouse=True)
def clear_graph_cache():
    _cached_graph.cache_clear()
    yield
    _cached_graph.cache_clear()
