from flask import Blueprint, jsonify, request

from noteful.common.errors import NotFound
from noteful.common.utils import location_for, optional_object_id, parse_object_id
from noteful.notes.models import NoteRepository
from noteful.notes.schemas import NoteIn, NoteOut

bp = Blueprint("notes", __name__)

note_in = NoteIn()
note_out = NoteOut()
note_out_many = NoteOut(many=True)


@bp.get("")
def list_notes():
    folder_id = optional_object_id(request.args.get("folderId"), "folderId")
    tag_id = optional_object_id(request.args.get("tagId"), "tagId")
    notes = NoteRepository.list(request.args.get("searchTerm"), folder_id, tag_id)
    return jsonify(note_out_many.dump(notes)), 200


@bp.get("/<note_id>")
def get_note(note_id):
    note = NoteRepository.get(parse_object_id(note_id))
    if not note:
        raise NotFound()
    return jsonify(note_out.dump(note)), 200


@bp.post("")
def create_note():
    payload = request.get_json(silent=True) or {}
    data = note_in.load(payload)
    note = NoteRepository.create(data)
    resp = jsonify(note_out.dump(note))
    resp.headers["Location"] = location_for(request.path, note["_id"])
    return resp, 201


@bp.put("/<note_id>")
def update_note(note_id):
    payload = request.get_json(silent=True) or {}
    data = note_in.load(payload)
    note = NoteRepository.replace(parse_object_id(note_id), data)
    if not note:
        raise NotFound()
    return jsonify(note_out.dump(note)), 200


@bp.delete("/<note_id>")
def delete_note(note_id):
    if not NoteRepository.delete(parse_object_id(note_id)):
        raise NotFound()
    return ("", 204)
