"""Flask application factory for the pathfinder HTTP service."""

import logging
import os
from typing import Optional

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS

from ..app.services import MazeService, SimulationService
from ..config import ServerConfig
from .errors import register_error_handlers
from .handlers import api

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    """
    Build the Flask app with API routes, error handlers and static files.

    Args:
        config: Server settings; read from the environment when None

    Returns:
        Configured Flask application
    """
    if config is None:
        config = ServerConfig.from_env()

    app = Flask(__name__, static_folder=None)
    app.config.from_mapping(config.to_flask())

    app.extensions["pathfinder.maze_service"] = MazeService(max_dimension=config.max_dimension)
    app.extensions["pathfinder.simulation_service"] = SimulationService(
        max_grid_cells=config.max_grid_cells
    )

    if config.dev:
        CORS(app, methods=["GET", "POST", "OPTIONS"], allow_headers=["Content-Type"])

    app.register_blueprint(api)
    register_error_handlers(app)
    _attach_frontend(app, config.static_dir)

    return app


def _attach_frontend(app: Flask, static_dir: Optional[str]) -> None:
    """Serve a built front end for every non-API path, if one is configured."""
    if static_dir and not os.path.isfile(os.path.join(static_dir, "index.html")):
        logger.warning("failed to load frontend static_dir=%s error=%r",
                       static_dir, "index.html not found")
        static_dir = None

    @app.get("/", defaults={"path": ""})
    @app.get("/<path:path>")
    def frontend(path: str):
        if not static_dir:
            return jsonify({"error": "not found"}), 404
        if path and os.path.isfile(os.path.join(static_dir, path)):
            return send_from_directory(static_dir, path)
        # Unknown paths fall back to index.html for client-side routing
        return send_from_directory(static_dir, "index.html")
