import logging

from flask import jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger("noteful.error")


class ApiError(Exception):
    def __init__(self, message, status_code=400, code="bad_request", details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details or {}


class NotFound(ApiError):
    def __init__(self, details=None):
        super().__init__("Not Found", 404, "not_found", details)


class InvalidIdentifier(ApiError):
    def __init__(self, field="id", value=None):
        details = {field: value} if value is not None else None
        super().__init__(f"The `{field}` is not valid", 400, "invalid_id", details)


def _json_error(message, status, code, details=None):
    return jsonify({
        "message": message,
        "error": {"code": code, "details": details or {}},
    }), status


def first_message(messages):
    """Return the first human message of a marshmallow error tree.

    Field errors come in schema declaration order, so the first required
    field wins (``title`` before ``folderId``).
    """
    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        for value in messages.values():
            found = first_message(value)
            if found:
                return found
    if isinstance(messages, (list, tuple)):
        for value in messages:
            found = first_message(value)
            if found:
                return found
    return None


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        return _json_error(e.message, e.status_code, e.code, e.details)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        message = first_message(e.messages) or "Invalid request body."
        return _json_error(message, 400, "validation_error", e.messages)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        # 404 unknown route, 405, 413...
        return _json_error(e.description or "HTTP error", e.code or 500, "http_error")

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled_exception")
        return _json_error("Internal server error.", 500, "internal_error")
