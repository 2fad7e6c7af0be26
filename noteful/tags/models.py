from pymongo import ASCENDING

from noteful.common.repository import Repository


class TagRepository(Repository):
    collection_name = "tags"
    entity = "tag"
    default_sort = [("name", ASCENDING)]
    duplicate_message = "The tag name already exists"

    @classmethod
    def create(cls, data: dict) -> dict:
        return super().create({"name": data["name"]})

    @classmethod
    def rename(cls, oid, name: str):
        return cls.replace_fields(oid, {"name": name})
