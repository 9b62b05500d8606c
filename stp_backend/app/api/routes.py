"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from stp_backend.config import Settings
from stp_backend.core.stp import project
from stp_backend.errors import InvalidInputError
from stp_backend.schemas.ping import PingResponse
from stp_backend.schemas.stp import StpRequest, build_response

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["STP_SETTINGS"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("Rejected STP payload", extra={"error_count": exc.error_count()})
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    """Engine-level rejections carry the offending scenario field."""
    logger.info("Rejected STP scenario", extra={"field": exc.field})
    return jsonify({"detail": exc.message, "field": exc.field}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", service=_settings().service_name)
    return jsonify(response.model_dump())


@api_bp.post("/calc/stp")
def stp() -> Any:
    """Year-by-year debt/equity projection for a systematic transfer plan."""
    settings = _settings()
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = StpRequest.model_validate(raw_payload)
    result = project(
        payload.to_scenario(settings.months_per_period),
        max_periods=settings.max_periods,
    )
    response = build_response(payload, result)
    return current_app.response_class(response.model_dump_json(), mimetype="application/json")
