"""
Conversion of an adjacency description into a dense weight matrix.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import numpy as np

from .errors import MalformedGraphError, UnresolvedNodeError

logger = logging.getLogger(__name__)

NO_EDGE = -1

Adjacency = Mapping[str, Mapping[str, int]]


class IndexMap:
    """
    Stable label <-> position table, built once per request from key order.
    """

    def __init__(self, labels: Iterable[str]) -> None:
        self._labels: List[str] = list(labels)
        self._positions: Dict[str, int] = {}
        for position, label in enumerate(self._labels):
            if label in self._positions:
                raise MalformedGraphError(f"Duplicate waypoint {label!r}")
            self._positions[label] = position

    @classmethod
    def from_graph(cls, graph: Adjacency) -> "IndexMap":
        """
        Top-level waypoints first, in key order, then waypoints that only
        appear as neighbours, in the order they are first referenced.
        """
        labels = list(graph.keys())
        seen = set(labels)
        for neighbours in graph.values():
            for label in neighbours:
                if label not in seen:
                    seen.add(label)
                    labels.append(label)
        return cls(labels)

    def index_of(self, label: str) -> int:
        try:
            return self._positions[label]
        except KeyError:
            raise UnresolvedNodeError(label) from None

    def label_of(self, index: int) -> str:
        if not 0 <= index < len(self._labels):
            raise UnresolvedNodeError(index, f"No waypoint at index {index}")
        return self._labels[index]

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._positions

    def __len__(self) -> int:
        return len(self._labels)


def _check_weight(source: str, target: str, weight: object) -> int:
    if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)):
        raise MalformedGraphError(f"Edge {source} -> {target} has non-integer weight {weight!r}")
    if weight < 0:
        raise MalformedGraphError(f"Edge {source} -> {target} has negative weight {weight}")
    if source == target:
        raise MalformedGraphError(f"Self-loop on waypoint {source!r}")
    return int(weight)


def build_matrix(
    graph: Adjacency, index_map: Optional[IndexMap] = None
) -> Tuple[np.ndarray, IndexMap]:
    """
    Build the (n, n) weight matrix for ``graph``.

    Cell (i, j) holds the weight of the edge i -> j, or ``NO_EDGE``. Weights
    must be non-negative integers and self-loops are rejected. When an
    ``index_map`` is passed it must cover every waypoint the graph mentions.
    """
    index_map = index_map or IndexMap.from_graph(graph)
    size = len(index_map)
    matrix = np.full((size, size), NO_EDGE, dtype=np.int64)
    for source, neighbours in graph.items():
        row = index_map.index_of(source)
        for target, weight in neighbours.items():
            matrix[row, index_map.index_of(target)] = _check_weight(source, target, weight)
    logger.debug("Built %dx%d weight matrix with %d edges", size, size, edge_count(matrix))
    return matrix, index_map


def edge_count(matrix: np.ndarray) -> int:
    return int(np.count_nonzero(matrix != NO_EDGE))
