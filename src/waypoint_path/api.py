"""
FastAPI service answering shortest-path queries between waypoints.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import configure_logging, settings
from .errors import UnresolvedNodeError
from .loader import default_graph
from .models import PathRequest, PathResult
from .service import find_shortest_path

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Waypoint Shortest Path", version="0.1.0")

INVALID_POINT = "Not a valid point"

DESCRIPTION = """Find the shortest path between two waypoints on the map.

POST a JSON body with a start and end value, both valid points on the map ({points}).
The response holds the total distance and the route as "A -> B -> D".
An unreachable destination is answered with distance -1 and an empty path."""


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    logger.warning("Rejected malformed request: %s", exc.errors())
    return JSONResponse(status_code=400, content={"detail": INVALID_POINT})


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/", response_class=PlainTextResponse)
def describe():
    return DESCRIPTION.format(points=", ".join(settings.points))


@app.post("/", response_model=PathResult)
def shortest_path(payload: PathRequest):
    if payload.start not in settings.points or payload.end not in settings.points:
        logger.warning("Rejected request %s -> %s", payload.start, payload.end)
        raise HTTPException(status_code=400, detail=INVALID_POINT)
    try:
        result = find_shortest_path(default_graph(), payload.start, payload.end)
    except UnresolvedNodeError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (ValueError, FileNotFoundError) as exc:
        logger.error("Cannot answer query: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    if result.distance >= 0:
        return result
    return JSONResponse(status_code=400, content=result.model_dump())
