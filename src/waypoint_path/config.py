"""
Central configuration for the waypoint path service.
"""
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


class Settings(BaseModel):
    graph_path: Optional[Path] = Field(default_factory=lambda: _env_path("WAYPOINT_GRAPH_PATH"))
    points: List[str] = ["A", "B", "C", "D", "E", "F"]
    separator: str = " -> "
    # checked by traversal.get_strategy when a query runs
    strategy: str = Field(default_factory=lambda: os.getenv("WAYPOINT_STRATEGY", "breadth_first"))
    log_level: str = Field(default_factory=lambda: os.getenv("WAYPOINT_LOG_LEVEL", "INFO"))


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Attach a console handler to the package logger once.
    """
    logger = logging.getLogger("waypoint_path")
    logger.setLevel((level or settings.log_level).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
