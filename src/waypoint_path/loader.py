"""
Graph description source: JSON files and the bundled waypoint map.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import ValidationError

from .config import settings
from .errors import MalformedGraphError
from .models import GraphDescription

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_FILE = Path(__file__).parent / "data" / "waypoints.json"


def parse_graph(raw: object) -> Mapping[str, Mapping[str, int]]:
    """
    Validate a decoded adjacency description and freeze it.
    """
    try:
        graph = GraphDescription.model_validate(raw).root
    except ValidationError as exc:
        raise MalformedGraphError(f"Invalid graph description: {exc}") from exc
    return MappingProxyType(
        {label: MappingProxyType(dict(neighbours)) for label, neighbours in graph.items()}
    )


def load_graph(path: Path) -> Mapping[str, Mapping[str, int]]:
    if not path.exists():
        raise FileNotFoundError(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedGraphError(f"{path} is not valid JSON: {exc}") from exc
    graph = parse_graph(raw)
    logger.debug("Loaded %d waypoints from %s", len(graph), path)
    return graph


@lru_cache(maxsize=None)
def _cached_graph(path: Path) -> Mapping[str, Mapping[str, int]]:
    return load_graph(path)


def default_graph(path: Optional[Path] = None) -> Mapping[str, Mapping[str, int]]:
    """
    Graph named by ``path`` or ``settings.graph_path``, else the bundled map.
    """
    return _cached_graph(path or settings.graph_path or DEFAULT_GRAPH_FILE)
