from datetime import datetime, timezone
from typing import NamedTuple, Optional

from pymongo import ASCENDING

from noteful.common.repository import Repository

TEXT_SCORE = {"$meta": "textScore"}


def _now_ms() -> datetime:
    # BSON dates keep milliseconds only
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class NoteQuery(NamedTuple):
    filter: dict
    projection: Optional[dict]
    sort: list


def build_note_query(search_term=None, folder_id=None, tag_id=None) -> NoteQuery:
    """Filter/projection/sort for a note listing.

    With a search term: ``$text`` match, relevance score projected and used
    as the (descending) sort. Without: every note, oldest first.
    """
    query = {}
    projection = None
    sort = [("created", ASCENDING)]

    term = (search_term or "").strip()
    if term:
        query["$text"] = {"$search": term}
        projection = {"score": TEXT_SCORE}
        sort = [("score", TEXT_SCORE)]

    if folder_id is not None:
        query["folderId"] = folder_id
    if tag_id is not None:
        query["tags"] = tag_id

    return NoteQuery(query, projection, sort)


class NoteRepository(Repository):
    collection_name = "notes"
    entity = "note"
    default_sort = [("created", ASCENDING)]

    @classmethod
    def list(cls, search_term=None, folder_id=None, tag_id=None):
        q = build_note_query(search_term, folder_id, tag_id)
        return cls.find_all(q.filter, q.projection, q.sort)

    @classmethod
    def create(cls, data: dict) -> dict:
        doc = {
            "title": data["title"],
            "content": data.get("content", ""),
            "folderId": data.get("folderId"),
            "tags": data.get("tags", []),
            "created": _now_ms(),
        }
        return super().create(doc)

    @classmethod
    def replace(cls, oid, data: dict):
        # PUT replaces every mutable field; omitted ones go back to defaults
        return cls.replace_fields(oid, {
            "title": data["title"],
            "content": data.get("content", ""),
            "folderId": data.get("folderId"),
            "tags": data.get("tags", []),
        })
