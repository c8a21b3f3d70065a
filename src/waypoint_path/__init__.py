"""
Shortest paths between fixed waypoints of a small weighted graph.
"""
from .errors import MalformedGraphError, UnresolvedNodeError, WaypointError
from .models import PathResult
from .service import find_shortest_path, shortest_distances

__all__ = [
    "MalformedGraphError",
    "PathResult",
    "UnresolvedNodeError",
    "WaypointError",
    "find_shortest_path",
    "shortest_distances",
]
