# noteful/docs/spec.py
from apispec import APISpec
from apispec.ext.marshmallow import MarshmallowPlugin
from marshmallow import Schema, fields

from noteful.folders.schemas import FolderIn, FolderOut
from noteful.notes.schemas import NoteIn, NoteOut
from noteful.tags.schemas import TagIn, TagOut


class ErrorBody(Schema):
    message = fields.String()
    error = fields.Dict()


def _ref(name: str):
    return {"$ref": f"#/components/schemas/{name}"}


def _json(name: str, many=False):
    schema = {"type": "array", "items": _ref(name)} if many else _ref(name)
    return {"content": {"application/json": {"schema": schema}}}


def _error(description: str):
    return {"description": description, **_json("Error")}


_ID_PARAM = {
    "in": "path", "name": "id", "required": True,
    "schema": {"type": "string", "pattern": "^[0-9a-fA-F]{24}$"},
}


def _crud_paths(spec, base: str, label: str, in_name: str, out_name: str, list_params=()):
    spec.path(
        path=base,
        operations={
            "get": {
                "summary": f"List {label}s",
                "parameters": list(list_params),
                "responses": {"200": {"description": "OK", **_json(out_name, many=True)}},
            },
            "post": {
                "summary": f"Create {label}",
                "requestBody": {"required": True, **_json(in_name)},
                "responses": {
                    "201": {"description": "Created", **_json(out_name),
                            "headers": {"Location": {"schema": {"type": "string"}}}},
                    "400": _error("Validation error"),
                },
            },
        },
    )
    spec.path(
        path=f"{base}/{{id}}",
        operations={
            "get": {
                "summary": f"Get {label} by id",
                "parameters": [_ID_PARAM],
                "responses": {
                    "200": {"description": "OK", **_json(out_name)},
                    "400": _error("The `id` is not valid"),
                    "404": _error("Not found"),
                },
            },
            "put": {
                "summary": f"Replace {label}",
                "parameters": [_ID_PARAM],
                "requestBody": {"required": True, **_json(in_name)},
                "responses": {
                    "200": {"description": "OK", **_json(out_name)},
                    "400": _error("Validation error or invalid id"),
                    "404": _error("Not found"),
                },
            },
            "delete": {
                "summary": f"Delete {label}",
                "parameters": [_ID_PARAM],
                "responses": {
                    "204": {"description": "No content"},
                    "400": _error("The `id` is not valid"),
                    "404": _error("Not found"),
                },
            },
        },
    )


def build_spec():
    spec = APISpec(
        title="Noteful API",
        version="1.0.0",
        openapi_version="3.0.3",
        info={"description": "Notes, folders and tags over MongoDB"},
        plugins=[MarshmallowPlugin()],
    )

    spec.components.schema("NoteIn", schema=NoteIn)
    spec.components.schema("NoteOut", schema=NoteOut)
    spec.components.schema("FolderIn", schema=FolderIn)
    spec.components.schema("FolderOut", schema=FolderOut)
    spec.components.schema("TagIn", schema=TagIn)
    spec.components.schema("TagOut", schema=TagOut)
    spec.components.schema("Error", schema=ErrorBody)

    _crud_paths(spec, "/api/notes", "note", "NoteIn", "NoteOut", list_params=[
        {"in": "query", "name": "searchTerm", "schema": {"type": "string"},
         "description": "Full-text search over title and content, sorted by relevance"},
        {"in": "query", "name": "folderId", "schema": {"type": "string"}},
        {"in": "query", "name": "tagId", "schema": {"type": "string"}},
    ])
    _crud_paths(spec, "/api/folders", "folder", "FolderIn", "FolderOut")
    _crud_paths(spec, "/api/tags", "tag", "TagIn", "TagOut")

    return spec.to_dict()
