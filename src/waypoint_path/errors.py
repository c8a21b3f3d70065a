"""
Exceptions raised by the waypoint path core.
"""
from __future__ import annotations

from typing import Optional


class WaypointError(Exception):
    """Base class for all waypoint path failures."""


class UnresolvedNodeError(WaypointError, KeyError):
    """Raised when a label or index does not name a node of the graph."""

    def __init__(self, label: object, message: Optional[str] = None) -> None:
        self.label = label
        self.message = message or f"Unknown waypoint: {label!r}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class MalformedGraphError(WaypointError, ValueError):
    """Raised when a graph description cannot be turned into a weight matrix."""
