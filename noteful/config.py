import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class BaseConfig:
    # --- Database
    MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DATABASE = os.getenv("MONGODB_DATABASE", "noteful")
    # server selection timeout, pymongo waits 30s by default
    MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))
    # text index on notes + unique names on folders/tags
    MONGODB_ENSURE_INDEXES = _flag("MONGODB_ENSURE_INDEXES", "true")

    # --- CORS (strings CSV -> split in create_app)
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    CORS_ALLOW_HEADERS = os.getenv("CORS_ALLOW_HEADERS", "Content-Type")
    CORS_EXPOSE_HEADERS = os.getenv("CORS_EXPOSE_HEADERS", "Content-Type,Location")

    # --- Rate limit
    # No global limit by default; /api blueprints get RATELIMIT_API
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", None)
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")  # prod: redis://redis:6379/0
    RATELIMIT_API = os.getenv("RATELIMIT_API", "60/minute")

    # --- HTTP
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", "1000000"))  # ~1 MB
    ENFORCE_HTTPS = _flag("ENFORCE_HTTPS", "false")
    JSON_SORT_KEYS = False

    LOG_LEVEL = (os.getenv("LOG_LEVEL") or "").upper() or None


class DevConfig(BaseConfig):
    DEBUG = True


class ProdConfig(BaseConfig):
    DEBUG = False


class TestConfig(BaseConfig):
    TESTING = True
    MONGODB_URI = os.getenv("TEST_MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DATABASE = os.getenv("TEST_MONGODB_DATABASE", "noteful-test")
    MONGODB_TIMEOUT_MS = 2000
    RATELIMIT_ENABLED = False
