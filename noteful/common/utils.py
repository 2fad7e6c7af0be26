from bson import ObjectId
from bson.errors import InvalidId

from noteful.common.errors import InvalidIdentifier


def parse_object_id(value, field: str = "id") -> ObjectId:
    """24-hex string -> ObjectId, or InvalidIdentifier (400) before any query runs."""
    if not isinstance(value, str) or len(value) != 24:
        raise InvalidIdentifier(field, value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifier(field, value)


def optional_object_id(value, field: str):
    """Query-string variant: empty or missing means no filter."""
    if value is None or value == "":
        return None
    return parse_object_id(value, field)


def location_for(path: str, doc_id) -> str:
    return f"{path.rstrip('/')}/{doc_id}"
