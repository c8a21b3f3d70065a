"""
Single-source exploration over a weight matrix.

``traverse`` walks the matrix breadth first and settles every waypoint the
first time it is seen: its distance and route are never revisited, even when
a later frontier node offers a cheaper route. This is exact for uniform
weights only. ``traverse_weighted`` relaxes edges over a priority frontier
and gives true weighted shortest paths.
"""
from __future__ import annotations

import heapq
import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np

from .errors import UnresolvedNodeError
from .matrix import NO_EDGE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Traversal:
    source: int
    distances: List[Optional[int]]
    chains: List[List[int]]

    @property
    def reached(self) -> List[bool]:
        return [distance is not None for distance in self.distances]

    def is_reached(self, index: int) -> bool:
        return self.distances[index] is not None

    def distance_to(self, index: int) -> Optional[int]:
        return self.distances[index]


def _check_source(matrix: np.ndarray, source: int) -> int:
    size = matrix.shape[0]
    if not 0 <= source < size:
        raise UnresolvedNodeError(source, f"Source index {source} outside 0..{size - 1}")
    return size


def traverse(matrix: np.ndarray, source: int) -> Traversal:
    size = _check_source(matrix, source)
    visited = [False] * size
    visited[source] = True
    distances: List[Optional[int]] = [None] * size
    distances[source] = 0
    chains: List[List[int]] = [[] for _ in range(size)]

    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in range(size):
            weight = int(matrix[node, neighbour])
            if weight == NO_EDGE or visited[neighbour]:
                continue
            visited[neighbour] = True
            distances[neighbour] = distances[node] + weight
            chains[neighbour] = chains[node] + [neighbour]
            queue.append(neighbour)

    logger.debug("Breadth-first walk from %d reached %d of %d waypoints", source, sum(visited), size)
    return Traversal(source=source, distances=distances, chains=chains)


def traverse_weighted(matrix: np.ndarray, source: int) -> Traversal:
    size = _check_source(matrix, source)
    distances: List[Optional[int]] = [None] * size
    distances[source] = 0
    parents: List[Optional[int]] = [None] * size
    settled = [False] * size

    # (distance, index) keeps ties in column order
    frontier = [(0, source)]
    while frontier:
        distance, node = heapq.heappop(frontier)
        if settled[node]:
            continue
        settled[node] = True
        for neighbour in range(size):
            weight = int(matrix[node, neighbour])
            if weight == NO_EDGE or settled[neighbour]:
                continue
            candidate = distance + weight
            current = distances[neighbour]
            if current is None or candidate < current:
                distances[neighbour] = candidate
                parents[neighbour] = node
                heapq.heappush(frontier, (candidate, neighbour))

    chains: List[List[int]] = [[] for _ in range(size)]
    for index in range(size):
        if index == source or distances[index] is None:
            continue
        chain = []
        cursor: Optional[int] = index
        while cursor is not None and cursor != source:
            chain.append(cursor)
            cursor = parents[cursor]
        chains[index] = chain[::-1]

    logger.debug("Weighted walk from %d settled %d of %d waypoints", source, sum(settled), size)
    return Traversal(source=source, distances=distances, chains=chains)


STRATEGIES: Dict[str, Callable[[np.ndarray, int], Traversal]] = {
    "breadth_first": traverse,
    "weighted": traverse_weighted,
}


def get_strategy(name: str) -> Callable[[np.ndarray, int], Traversal]:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown strategy {name!r}; expected one of {sorted(STRATEGIES)}") from None
