# noteful/common/logging.py
import logging
import sys
import time
import uuid

from flask import g, request
from pythonjsonlogger import jsonlogger


def setup_json_logging(app):
    # INFO by default, DEBUG in dev, LOG_LEVEL wins when set
    level = app.config.get("LOG_LEVEL") or (logging.DEBUG if app.debug else logging.INFO)
    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={"levelname": "level", "asctime": "ts"},
    ))
    root.addHandler(handler)

    # werkzeug prints its own access line, ours is structured
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def current_request_id() -> str:
    return getattr(g, "request_id", "-")


def register_request_logging(app):
    access_log = logging.getLogger("noteful.request")

    @app.before_request
    def _assign_request_id_and_start_timer():
        g.request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
        g._start_time = time.perf_counter()

    @app.after_request
    def _log_request(resp):
        started = getattr(g, "_start_time", None)
        latency = int((time.perf_counter() - started) * 1000) if started else -1

        resp.headers.setdefault("X-Request-Id", current_request_id())

        access_log.info(
            "http_request",
            extra={
                "request_id": current_request_id(),
                "method": request.method,
                "path": request.path,
                "query": request.query_string.decode("utf-8", "replace") or None,
                "status": resp.status_code,
                "latency_ms": latency,
            },
        )
        return resp
