from flask import Blueprint, jsonify, request

from noteful.common.errors import NotFound
from noteful.common.utils import location_for, parse_object_id
from noteful.folders.models import FolderRepository
from noteful.folders.schemas import FolderIn, FolderOut

bp = Blueprint("folders", __name__)

folder_in = FolderIn()
folder_out = FolderOut()
folder_out_many = FolderOut(many=True)


@bp.get("")
def list_folders():
    return jsonify(folder_out_many.dump(FolderRepository.find_all())), 200


@bp.get("/<folder_id>")
def get_folder(folder_id):
    folder = FolderRepository.get(parse_object_id(folder_id))
    if not folder:
        raise NotFound()
    return jsonify(folder_out.dump(folder)), 200


@bp.post("")
def create_folder():
    payload = request.get_json(silent=True) or {}
    data = folder_in.load(payload)
    # duplicate name -> ApiError 400 from the repository
    folder = FolderRepository.create(data)
    resp = jsonify(folder_out.dump(folder))
    resp.headers["Location"] = location_for(request.path, folder["_id"])
    return resp, 201


@bp.put("/<folder_id>")
def update_folder(folder_id):
    payload = request.get_json(silent=True) or {}
    data = folder_in.load(payload)
    folder = FolderRepository.rename(parse_object_id(folder_id), data["name"])
    if not folder:
        raise NotFound()
    return jsonify(folder_out.dump(folder)), 200


@bp.delete("/<folder_id>")
def delete_folder(folder_id):
    if not FolderRepository.delete(parse_object_id(folder_id)):
        raise NotFound()
    return ("", 204)
