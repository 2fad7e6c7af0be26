from marshmallow import EXCLUDE, Schema, fields, validate

from noteful.common.fields import ObjectIdField

MISSING_NAME = "Missing `name` in request body"


class TagIn(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(
        required=True,
        validate=validate.Length(min=1, error=MISSING_NAME),
        error_messages={"required": MISSING_NAME, "null": MISSING_NAME},
    )


class TagOut(Schema):
    id = ObjectIdField(attribute="_id", dump_only=True)
    name = fields.String(required=True)
