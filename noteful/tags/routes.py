from flask import Blueprint, jsonify, request

from noteful.common.errors import NotFound
from noteful.common.utils import location_for, parse_object_id
from noteful.tags.models import TagRepository
from noteful.tags.schemas import TagIn, TagOut

bp = Blueprint("tags", __name__)

tag_in = TagIn()
tag_out = TagOut()
tag_out_many = TagOut(many=True)


@bp.get("")
def list_tags():
    return jsonify(tag_out_many.dump(TagRepository.find_all())), 200


@bp.get("/<tag_id>")
def get_tag(tag_id):
    tag = TagRepository.get(parse_object_id(tag_id))
    if not tag:
        raise NotFound()
    return jsonify(tag_out.dump(tag)), 200


@bp.post("")
def create_tag():
    payload = request.get_json(silent=True) or {}
    tag = TagRepository.create(tag_in.load(payload))
    resp = jsonify(tag_out.dump(tag))
    resp.headers["Location"] = location_for(request.path, tag["_id"])
    return resp, 201


@bp.put("/<tag_id>")
def update_tag(tag_id):
    payload = request.get_json(silent=True) or {}
    data = tag_in.load(payload)
    tag = TagRepository.rename(parse_object_id(tag_id), data["name"])
    if not tag:
        raise NotFound()
    return jsonify(tag_out.dump(tag)), 200


@bp.delete("/<tag_id>")
def delete_tag(tag_id):
    if not TagRepository.delete(parse_object_id(tag_id)):
        raise NotFound()
    return ("", 204)
