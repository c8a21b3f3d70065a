"""
Data models for graph descriptions, path requests, and path results.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, RootModel, StrictInt

UNREACHABLE_DISTANCE = -1


class GraphDescription(RootModel[Dict[str, Dict[str, StrictInt]]]):
    """
    Adjacency description: waypoint -> {neighbour -> weight}. Key order is kept.
    """


class PathRequest(BaseModel):
    start: str = Field(..., description="Waypoint to start from")
    end: str = Field(..., description="Waypoint to reach")


class PathResult(BaseModel):
    distance: int
    path: str
    nodes: List[str] = Field(default_factory=list, exclude=True)

    @property
    def reachable(self) -> bool:
        return self.distance >= 0 and bool(self.path)

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls(distance=UNREACHABLE_DISTANCE, path="")


class NodeDistance(BaseModel):
    label: str
    distance: Optional[int] = None
    path: str = ""
