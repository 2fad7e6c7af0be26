import os

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_limiter import RateLimitExceeded

from .common.errors import register_error_handlers
from .common.logging import setup_json_logging, register_request_logging
from .config import DevConfig, ProdConfig, TestConfig
from .extensions import cors, limiter, mongo


def _csv(value, default_if_empty):
    """CSV string -> list; anything else is returned as is (or the default)."""
    if value is None:
        return default_if_empty
    if isinstance(value, str) and "," in value:
        items = [x.strip() for x in value.split(",") if x.strip()]
        return items if items else default_if_empty
    return value


def create_app(mongo_client=None):
    """Application factory.

    ``mongo_client`` replaces the pymongo client built from MONGODB_URI
    (tests pass an in-memory one).
    """
    # .env if present (dev)
    load_dotenv()

    app = Flask(__name__)

    env = os.getenv("APP_ENV") or os.getenv("FLASK_ENV", "development")
    if env in ("test", "testing"):
        app.config.from_object(TestConfig)
    elif env == "production":
        app.config.from_object(ProdConfig)
    else:
        app.config.from_object(DevConfig)
    app.json.sort_keys = app.config["JSON_SORT_KEYS"]

    setup_json_logging(app)
    register_request_logging(app)

    mongo.init_app(app, client=mongo_client)
    if app.config["MONGODB_ENSURE_INDEXES"]:
        mongo.ensure_indexes()

    cors.init_app(app, resources={
        r"/api/*": {
            "origins": _csv(app.config.get("CORS_ORIGINS", "*"), "*"),
            "allow_headers": _csv(app.config.get("CORS_ALLOW_HEADERS"), ["Content-Type"]),
            "expose_headers": _csv(app.config.get("CORS_EXPOSE_HEADERS"), ["Content-Type", "Location"]),
            "supports_credentials": False,
        }
    })

    # reads RATELIMIT_* from app.config
    limiter.init_app(app)

    register_error_handlers(app)

    @app.after_request
    def set_security_headers(resp):
        # JSON only, nothing to frame or script
        resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'; base-uri 'none'"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["Referrer-Policy"] = "no-referrer"

        if (env == "production" or app.config.get("ENFORCE_HTTPS")) and (
            request.is_secure or request.headers.get("X-Forwarded-Proto", "") == "https"
        ):
            resp.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return resp

    @app.errorhandler(RateLimitExceeded)
    def handle_rate_limit(e):
        return jsonify({"message": "Rate limit exceeded.", "error": {"code": "rate_limited", "details": {}}}), 429

    # --- Blueprints ---
    from .notes.routes import bp as notes_bp
    from .folders.routes import bp as folders_bp
    from .tags.routes import bp as tags_bp
    from .docs.routes import bp as docs_bp

    api_limit = app.config["RATELIMIT_API"]
    for bp, prefix in ((notes_bp, "/api/notes"), (folders_bp, "/api/folders"), (tags_bp, "/api/tags")):
        limiter.limit(api_limit)(bp)
        app.register_blueprint(bp, url_prefix=prefix)
    app.register_blueprint(docs_bp)

    from .seed.commands import register_commands
    register_commands(app)

    @app.get("/healthz")
    def healthz():
        db_status = "up"
        try:
            mongo.ping()
        except Exception:
            db_status = "down"
        return jsonify({"status": "ok", "env": env, "db": db_status})

    @app.get("/readyz")
    def readyz():
        status = {"db": "down", "redis": "n/a"}
        ok = True

        try:
            mongo.ping()
            status["db"] = "up"
        except Exception:
            ok = False

        # only when the rate limiter stores its counters in redis
        uri = app.config.get("RATELIMIT_STORAGE_URI", "memory://")
        if uri.startswith(("redis://", "rediss://")):
            try:
                import redis
                redis.from_url(uri).ping()
                status["redis"] = "up"
            except Exception:
                ok = False
                status["redis"] = "down"

        status["status"] = "ok" if ok else "error"
        return jsonify(status), (200 if ok else 503)

    return app
