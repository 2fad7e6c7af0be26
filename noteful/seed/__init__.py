"""Seed data and maintenance commands (``flask seed-db`` and friends)."""
import json
from datetime import datetime
from importlib import resources

from bson import ObjectId


def _load(name: str) -> list:
    text = resources.files("noteful.seed").joinpath("data", f"{name}.json").read_text("utf-8")
    return json.loads(text)


def _oid(value):
    return ObjectId(value) if value else None


def seed_folders() -> list:
    return [{"_id": _oid(f["_id"]), "name": f["name"]} for f in _load("folders")]


def seed_tags() -> list:
    return [{"_id": _oid(t["_id"]), "name": t["name"]} for t in _load("tags")]


def seed_notes() -> list:
    return [
        {
            "_id": _oid(n["_id"]),
            "title": n["title"],
            "content": n.get("content", ""),
            "folderId": _oid(n.get("folderId")),
            "tags": [ObjectId(t) for t in n.get("tags", [])],
            "created": datetime.fromisoformat(n["created"]),
        }
        for n in _load("notes")
    ]


def insert_seed(db) -> dict:
    """Insert every seed collection, return inserted counts per collection."""
    counts = {}
    for name, docs in (("folders", seed_folders()), ("tags", seed_tags()), ("notes", seed_notes())):
        counts[name] = len(db[name].insert_many(docs).inserted_ids)
    return counts
