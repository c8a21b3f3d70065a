"""
Shortest-path queries over a waypoint graph snapshot.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .config import settings
from .matrix import Adjacency, build_matrix
from .models import NodeDistance, PathResult
from .reconstruct import to_label_list, to_label_sequence
from .traversal import get_strategy

logger = logging.getLogger(__name__)


def find_shortest_path(
    graph: Adjacency,
    start: str,
    end: str,
    strategy: Optional[str] = None,
    separator: Optional[str] = None,
) -> PathResult:
    """
    Distance and route from ``start`` to ``end``.

    Unknown labels raise ``UnresolvedNodeError``. An unreachable ``end``
    yields ``PathResult(distance=-1, path="")``.
    """
    walk = get_strategy(strategy or settings.strategy)
    separator = separator if separator is not None else settings.separator
    matrix, index_map = build_matrix(graph)
    start_idx = index_map.index_of(start)
    end_idx = index_map.index_of(end)

    if start_idx == end_idx:
        return PathResult(distance=0, path=f"{start}{separator}{end}", nodes=[start, end])

    result = walk(matrix, start_idx)
    if not result.is_reached(end_idx):
        logger.info("No route from %s to %s", start, end)
        return PathResult.unreachable()

    nodes = to_label_list(index_map, result.chains, start_idx, end_idx)
    distance = result.distance_to(end_idx)
    logger.info("Route %s -> %s: distance %d via %s", start, end, distance, nodes)
    return PathResult(distance=distance, path=separator.join(nodes), nodes=nodes)


def shortest_distances(
    graph: Adjacency,
    start: str,
    strategy: Optional[str] = None,
    separator: Optional[str] = None,
) -> List[NodeDistance]:
    """
    Distance and route from ``start`` to every waypoint, in index order.
    """
    strategy = strategy or settings.strategy
    separator = separator if separator is not None else settings.separator
    matrix, index_map = build_matrix(graph)
    start_idx = index_map.index_of(start)
    result = get_strategy(strategy)(matrix, start_idx)

    rows: List[NodeDistance] = []
    for index, label in enumerate(index_map.labels):
        if index == start_idx:
            rows.append(NodeDistance(label=label, distance=0, path=label))
            continue
        path = to_label_sequence(index_map, result.chains, start_idx, index, separator)
        rows.append(NodeDistance(label=label, distance=result.distance_to(index), path=path))
    return rows
