"""HTTP endpoints for maze generation and search simulation."""

import logging
from typing import Any, Dict, List, Optional

from flask import Blueprint, current_app, jsonify, request

from ..app.services import MazeService, SimulationService
from ..domain.errors import ValidationError
from ..domain.types import Point

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__)


class RequestValidationError(ValidationError):
    """Request body failed field validation; details map field -> message."""

    def __init__(self, fields: Dict[str, str]):
        super().__init__("validation failed")
        self.fields = fields

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.fields}


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid coordinate or size
    return isinstance(value, int) and not isinstance(value, bool)


def _json_body() -> Dict[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise RequestValidationError({"body": "body must be a JSON object"})
    return body


def _require_int(body: Dict[str, Any], name: str, errors: Dict[str, str]) -> Optional[int]:
    value = body.get(name)
    if value is None:
        errors[name] = f"{name} is required"
    elif not _is_int(value):
        errors[name] = f"{name} must be an integer"
    else:
        return value
    return None


def _require_point(body: Dict[str, Any], name: str, errors: Dict[str, str]) -> Optional[Point]:
    value = body.get(name)
    if value is None:
        errors[name] = f"{name} is required"
        return None
    if not isinstance(value, dict) or not _is_int(value.get("x")) or not _is_int(value.get("y")):
        errors[name] = f"{name} must be an object with integer x and y"
        return None
    return Point.from_dict(value)


def _require_grid(body: Dict[str, Any], errors: Dict[str, str]) -> Optional[List[List[int]]]:
    value = body.get("grid")
    if value is None:
        errors["grid"] = "grid is required"
        return None
    if not isinstance(value, list) or not value:
        errors["grid"] = "grid must have at least 1 row"
        return None
    for row in value:
        if not isinstance(row, list) or not all(_is_int(cell) for cell in row):
            errors["grid"] = "grid must be a list of rows of integers"
            return None
    return value


@api.post("/maze/generate")
def generate_maze():
    """Handle POST /maze/generate."""
    body = _json_body()
    errors: Dict[str, str] = {}
    width = _require_int(body, "width", errors)
    height = _require_int(body, "height", errors)
    seed = body.get("seed")
    if seed is not None and not _is_int(seed):
        errors["seed"] = "seed must be an integer"
    if errors:
        logger.warning("maze generation request validation failed fields=%s", sorted(errors))
        raise RequestValidationError(errors)

    logger.info("maze generation request received width=%s height=%s", width, height)
    service: MazeService = current_app.extensions["pathfinder.maze_service"]
    result = service.generate_maze(width, height, seed)

    logger.info("maze generation response sent width=%s height=%s", result.width, result.height)
    return jsonify(result.to_dict())


@api.post("/simulate")
def simulate():
    """Handle POST /simulate."""
    body = _json_body()
    errors: Dict[str, str] = {}
    algorithm = body.get("algorithm")
    if not algorithm:
        errors["algorithm"] = "algorithm is required"
    elif not isinstance(algorithm, str):
        errors["algorithm"] = "algorithm must be a string"
    grid = _require_grid(body, errors)
    start = _require_point(body, "start", errors)
    goal = _require_point(body, "goal", errors)
    if errors:
        logger.warning("simulation request validation failed fields=%s", sorted(errors))
        raise RequestValidationError(errors)

    logger.info("simulation request received algorithm=%s grid_height=%s", algorithm, len(grid))
    service: SimulationService = current_app.extensions["pathfinder.simulation_service"]
    outcome = service.run_simulation(algorithm, grid, start, goal)

    result = outcome.result
    payload = {
        "found": result.found,
        "path": [p.to_dict() for p in result.path],
        "visitedOrder": [p.to_dict() for p in result.visited_order],
        "stats": {
            "expandedNodes": result.expanded_nodes,
            "pathLength": result.path_length,
            "elapsedMs": outcome.elapsed_ms,
        },
    }
    status = 200 if result.found else 422

    logger.info("simulation response sent algorithm=%s status=%s found=%s",
                algorithm, status, result.found)
    return jsonify(payload), status


@api.get("/healthz")
def health():
    """Respond with application status."""
    return jsonify({"status": "ok"})
