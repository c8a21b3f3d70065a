"""
Turn index chains produced by a traversal into readable routes.
"""
from __future__ import annotations

from typing import List, Sequence

from .errors import UnresolvedNodeError
from .matrix import IndexMap

DEFAULT_SEPARATOR = " -> "


def anchor_chains(chains: Sequence[Sequence[int]], source: int) -> List[List[int]]:
    """
    Copy of ``chains`` where every non-empty chain starts at ``source``.
    """
    anchored: List[List[int]] = []
    for chain in chains:
        chain = list(chain)
        if chain and chain[0] != source:
            chain.insert(0, source)
        anchored.append(chain)
    return anchored


def to_label_list(
    index_map: IndexMap,
    chains: Sequence[Sequence[int]],
    source: int,
    target: int,
) -> List[str]:
    if not 0 <= target < len(chains):
        raise UnresolvedNodeError(target, f"No route chain for index {target}")
    chain = anchor_chains(chains, source)[target]
    return [index_map.label_of(index) for index in chain]


def to_label_sequence(
    index_map: IndexMap,
    chains: Sequence[Sequence[int]],
    source: int,
    target: int,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Route to ``target`` as ``"A -> B -> D"``, or ``""`` when there is none.
    """
    return separator.join(to_label_list(index_map, chains, source, target))
