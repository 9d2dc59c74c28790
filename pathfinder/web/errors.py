"""Mapping of typed errors to JSON HTTP responses."""

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest, HTTPException

from ..domain.errors import ErrorCode, PathfinderError

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ErrorCode.VALIDATION: 400,
    ErrorCode.INVALID_DIMENSIONS: 400,
    ErrorCode.UNKNOWN_ALGORITHM: 400,
    ErrorCode.OUT_OF_BOUNDS: 400,
    ErrorCode.BLOCKED: 400,
    ErrorCode.CANCELLED: 400,
    ErrorCode.NOT_FOUND: 404,
}


def status_for(code: ErrorCode) -> int:
    """Get the HTTP status for an error code; unknown codes are server errors."""
    return STATUS_CODES.get(code, 500)


def register_error_handlers(app: Flask) -> None:
    """Attach JSON error handlers to the app."""

    @app.errorhandler(PathfinderError)
    def handle_pathfinder_error(e: PathfinderError):
        status = status_for(e.code)
        if status >= 500:
            logger.error("request failed error=%r", str(e))
            return jsonify(PathfinderError().to_dict()), status
        return jsonify(e.to_dict()), status

    @app.errorhandler(BadRequest)
    def handle_bad_request(e: BadRequest):
        return jsonify({"error": e.description or "bad request"}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        if e.code == 404:
            return jsonify({"error": "not found"}), 404
        return jsonify({"error": e.name.lower()}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error while serving request")
        return jsonify(PathfinderError().to_dict()), 500
