import logging

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from noteful.common.errors import ApiError
from noteful.extensions import mongo

logger = logging.getLogger(__name__)


class Repository:
    """Thin data access over one MongoDB collection.

    Subclasses set ``collection_name`` (and ``entity`` for log lines).
    Methods take already-validated ``ObjectId`` values and plain dicts.
    """

    collection_name = None
    entity = None
    default_sort = [("_id", ASCENDING)]
    # message raised on a unique index violation
    duplicate_message = None

    @classmethod
    def collection(cls):
        return mongo.db[cls.collection_name]

    @classmethod
    def find_all(cls, query=None, projection=None, sort=None):
        cursor = cls.collection().find(query or {}, projection)
        return list(cursor.sort(sort or cls.default_sort))

    @classmethod
    def get(cls, oid):
        return cls.collection().find_one({"_id": oid})

    @classmethod
    def create(cls, doc: dict) -> dict:
        doc = dict(doc)
        try:
            result = cls.collection().insert_one(doc)
        except DuplicateKeyError:
            raise cls._duplicate()
        doc["_id"] = result.inserted_id
        logger.info(f"{cls.entity}_created", extra={"id": str(result.inserted_id)})
        return doc

    @classmethod
    def replace_fields(cls, oid, fields: dict):
        try:
            doc = cls.collection().find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise cls._duplicate()
        if doc is not None:
            logger.info(f"{cls.entity}_updated", extra={"id": str(oid)})
        return doc

    @classmethod
    def delete(cls, oid) -> bool:
        deleted = cls.collection().delete_one({"_id": oid}).deleted_count == 1
        if deleted:
            logger.info(f"{cls.entity}_deleted", extra={"id": str(oid)})
        return deleted

    @classmethod
    def _duplicate(cls):
        return ApiError(cls.duplicate_message, 400, "validation_error", {"name": "duplicate"})
