from bson import ObjectId
from marshmallow import fields


class ObjectIdField(fields.Field):
    """24-hex string on the wire, ``bson.ObjectId`` in documents."""

    default_error_messages = {"invalid": "Not a valid id."}

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return str(value)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, ObjectId):
            return value
        if not isinstance(value, str) or len(value) != 24 or not ObjectId.is_valid(value):
            raise self.make_error("invalid")
        return ObjectId(value)
