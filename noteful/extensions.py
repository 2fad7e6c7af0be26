import logging

from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pymongo import ASCENDING, TEXT, MongoClient

logger = logging.getLogger(__name__)


class Mongo:
    """Process-wide MongoDB handle, bound to an app by ``init_app``.

    The client is created once and shared by every request; handlers only
    read ``mongo.db``.
    """

    def __init__(self):
        self.client = None
        self.db = None

    def init_app(self, app, client=None):
        if client is None:
            client = MongoClient(
                app.config["MONGODB_URI"],
                tz_aware=True,
                serverSelectionTimeoutMS=app.config["MONGODB_TIMEOUT_MS"],
            )
        self.client = client
        self.db = client[app.config["MONGODB_DATABASE"]]
        app.extensions["mongo"] = self

    def ping(self) -> bool:
        self.client.admin.command("ping")
        return True

    def ensure_indexes(self):
        self.db.notes.create_index(
            [("title", TEXT), ("content", TEXT)],
            name="notes_text",
            weights={"title": 10, "content": 1},
        )
        self.db.folders.create_index([("name", ASCENDING)], name="folders_name", unique=True)
        self.db.tags.create_index([("name", ASCENDING)], name="tags_name", unique=True)
        logger.info("indexes_ensured", extra={"database": self.db.name})

    def drop_database(self):
        self.client.drop_database(self.db.name)


mongo = Mongo()
cors = CORS()
limiter = Limiter(key_func=get_remote_address)
