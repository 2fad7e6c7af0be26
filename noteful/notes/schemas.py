from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from noteful.common.fields import ObjectIdField

MISSING_TITLE = "Missing `title` in request body"


class NoteIn(Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.String(
        required=True,
        validate=validate.Length(min=1, error=MISSING_TITLE),
        error_messages={"required": MISSING_TITLE, "null": MISSING_TITLE},
    )
    content = fields.String(load_default="")
    folderId = ObjectIdField(
        allow_none=True,
        load_default=None,
        error_messages={"invalid": "The `folderId` is not valid"},
    )
    tags = fields.List(
        ObjectIdField(error_messages={"invalid": "The `tags` array contains an invalid `id`"}),
        load_default=list,
    )

    @pre_load
    def fill_blank_fields(self, data, **kwargs):
        # null content/tags and "" folderId mean "not set"
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("folderId") == "":
            data["folderId"] = None
        if "content" in data and data["content"] is None:
            data["content"] = ""
        if "tags" in data and data["tags"] is None:
            data["tags"] = []
        return data


class NoteOut(Schema):
    id = ObjectIdField(attribute="_id", dump_only=True)
    title = fields.String(required=True)
    content = fields.String()
    folderId = ObjectIdField(allow_none=True)
    tags = fields.List(ObjectIdField())
    created = fields.DateTime()
