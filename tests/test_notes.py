# tests/test_notes.py
from bson import ObjectId

from noteful.notes.models import NoteRepository

NOTE_KEYS = {"id", "title", "content", "folderId", "tags", "created"}
MISSING_ID = "AAAAAAAAAAAAAAAAAAAAAAAA"


def test_list_returns_every_note_with_full_fields(client, db):
    r = client.get("/api/notes")
    assert r.status_code == 200
    body = r.get_json()
    assert isinstance(body, list)
    assert len(body) == db.notes.count_documents({})
    for item in body:
        assert set(item) == NOTE_KEYS


def test_list_is_sorted_by_creation(client):
    body = client.get("/api/notes").get_json()
    created = [n["created"] for n in body]
    assert created == sorted(created)
    assert body[0]["title"] == "5 life lessons learned from cats"


def test_list_filters_by_folder_and_tag(client, db):
    folder_id = "111111111111111111111102"
    r = client.get(f"/api/notes?folderId={folder_id}")
    assert r.status_code == 200
    expected = db.notes.count_documents({"folderId": ObjectId(folder_id)})
    assert len(r.get_json()) == expected > 0
    assert all(n["folderId"] == folder_id for n in r.get_json())

    tag_id = "222222222222222222222200"
    r = client.get(f"/api/notes?tagId={tag_id}")
    assert r.status_code == 200
    assert len(r.get_json()) == 2
    assert all(tag_id in n["tags"] for n in r.get_json())


def test_list_rejects_malformed_filter_id(client):
    r = client.get("/api/notes?folderId=nope")
    assert r.status_code == 400
    assert r.get_json()["message"] == "The `folderId` is not valid"


def test_search_term_is_forwarded_to_text_query(client, monkeypatch):
    seen = {}

    def fake_find_all(query=None, projection=None, sort=None):
        seen.update(query=query, projection=projection, sort=sort)
        return []

    monkeypatch.setattr(NoteRepository, "find_all", fake_find_all)
    r = client.get("/api/notes?searchTerm=gaga")
    assert r.status_code == 200
    assert r.get_json() == []
    assert seen["query"] == {"$text": {"$search": "gaga"}}
    assert seen["projection"] == {"score": {"$meta": "textScore"}}
    assert seen["sort"] == [("score", {"$meta": "textScore"})]


def test_get_note_by_id(client, db):
    doc = db.notes.find_one({"title": "7 things Lady Gaga has in common with cats"})
    r = client.get(f"/api/notes/{doc['_id']}")
    assert r.status_code == 200
    body = r.get_json()
    assert set(body) == NOTE_KEYS
    assert body["id"] == str(doc["_id"])
    assert body["title"] == doc["title"]
    assert body["content"] == doc["content"]
    assert body["folderId"] == str(doc["folderId"])
    assert body["tags"] == [str(t) for t in doc["tags"]]


def test_get_invalid_id_is_400(client):
    r = client.get("/api/notes/99-99-99")
    assert r.status_code == 400
    assert r.get_json()["message"] == "The `id` is not valid"
    assert r.get_json()["error"]["code"] == "invalid_id"


def test_get_missing_id_is_404(client):
    r = client.get(f"/api/notes/{MISSING_ID}")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "not_found"


def test_create_then_get(client):
    new_item = {
        "title": "The best article about cats ever!",
        "content": "Lorem ipsum dolor sit amet, sed do eiusmod tempor...",
        "folderId": "111111111111111111111100",
        "tags": ["222222222222222222222299"],
    }
    r = client.post("/api/notes", json=new_item)
    assert r.status_code == 201
    created = r.get_json()
    assert set(created) == NOTE_KEYS
    assert created["title"] == new_item["title"]
    assert created["content"] == new_item["content"]
    assert created["folderId"] == new_item["folderId"]
    assert created["tags"] == new_item["tags"]
    assert ObjectId.is_valid(created["id"])
    assert r.headers["Location"].endswith(f"/api/notes/{created['id']}")

    r = client.get(f"/api/notes/{created['id']}")
    assert r.status_code == 200
    fetched = r.get_json()
    for key in ("id", "title", "content", "folderId", "tags"):
        assert fetched[key] == created[key]


def test_create_defaults_optional_fields(client):
    r = client.post("/api/notes", json={"title": "bare", "folderId": ""})
    assert r.status_code == 201
    body = r.get_json()
    assert body["content"] == ""
    assert body["folderId"] is None
    assert body["tags"] == []


def test_create_missing_title_creates_nothing(client, db):
    before = db.notes.count_documents({})
    for payload in ({"content": "no title"}, {"title": "", "content": "empty"}):
        r = client.post("/api/notes", json=payload)
        assert r.status_code == 400
        assert r.get_json()["message"] == "Missing `title` in request body"
    assert db.notes.count_documents({}) == before


def test_create_rejects_bad_references(client):
    r = client.post("/api/notes", json={"title": "x", "folderId": "not-an-id"})
    assert r.status_code == 400
    assert r.get_json()["message"] == "The `folderId` is not valid"

    r = client.post("/api/notes", json={"title": "x", "tags": ["222222222222222222222200", "bad"]})
    assert r.status_code == 400
    assert r.get_json()["message"] == "The `tags` array contains an invalid `id`"


def test_update_replaces_fields(client, db):
    doc = db.notes.find_one()
    payload = {"title": "Updated", "content": "New content"}
    r = client.put(f"/api/notes/{doc['_id']}", json=payload)
    assert r.status_code == 200
    body = r.get_json()
    assert body["id"] == str(doc["_id"])
    assert body["title"] == "Updated"
    assert body["content"] == "New content"
    # full replace: omitted references are cleared
    assert body["folderId"] is None
    assert body["tags"] == []

    stored = db.notes.find_one({"_id": doc["_id"]})
    assert stored["title"] == "Updated"
    assert stored["created"] is not None


def test_update_errors(client, db):
    doc = db.notes.find_one()

    r = client.put(f"/api/notes/{doc['_id']}", json={"content": "no title"})
    assert r.status_code == 400
    assert r.get_json()["message"] == "Missing `title` in request body"
    assert db.notes.find_one({"_id": doc["_id"]})["title"] == doc["title"]

    r = client.put("/api/notes/99-99-99", json={"title": "x"})
    assert r.status_code == 400
    assert r.get_json()["message"] == "The `id` is not valid"

    r = client.put(f"/api/notes/{MISSING_ID}", json={"title": "x"})
    assert r.status_code == 404


def test_delete(client, db):
    doc = db.notes.find_one()
    r = client.delete(f"/api/notes/{doc['_id']}")
    assert r.status_code == 204
    assert r.data == b""
    assert db.notes.find_one({"_id": doc["_id"]}) is None

    # second delete -> nothing removed
    r = client.delete(f"/api/notes/{doc['_id']}")
    assert r.status_code == 404

    r = client.delete("/api/notes/99-99-99")
    assert r.status_code == 400


def test_null_content_and_tags_fall_back_to_defaults(client, db):
    r = client.post("/api/notes", json={"title": "t", "content": None, "tags": None})
    assert r.status_code == 201
    body = r.get_json()
    assert body["content"] == ""
    assert body["tags"] == []

    doc = db.notes.find_one()
    r = client.put(f"/api/notes/{doc['_id']}", json={"title": "u", "content": None, "tags": None})
    assert r.status_code == 200
    body = r.get_json()
    assert body["content"] == ""
    assert body["tags"] == []
    assert db.notes.find_one({"_id": doc["_id"]})["content"] == ""


def test_search_matching_one_note_returns_single_item(client, db, monkeypatch):
    hit = db.notes.find_one({"title": "7 things Lady Gaga has in common with cats"})

    def fake_find_all(query=None, projection=None, sort=None):
        assert query == {"$text": {"$search": "gaga"}}
        return [dict(hit, score=1.1)]

    monkeypatch.setattr(NoteRepository, "find_all", fake_find_all)
    r = client.get("/api/notes?searchTerm=gaga")
    assert r.status_code == 200
    body = r.get_json()
    assert len(body) == 1
    assert body[0]["id"] == str(hit["_id"])
    assert set(body[0]) == NOTE_KEYS
