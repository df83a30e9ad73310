"""
User Repository Module

Read-only access to user records. Accounts are created by the authentication
service; this service only looks users up to populate responses.

Dependencies:
- pymongo: For collection access.

"""
from typing import Any, Dict, Iterable, Optional
from pymongo.database import Database
from auriter.database import USERS
from auriter.repositories.documents import serialize_document, to_object_id

PUBLIC_FIELDS = {"name": 1, "email": 1, "company": 1}


class UserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS]

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        return serialize_document(self.collection.find_one({"_id": object_id}, PUBLIC_FIELDS))

    def get_many(self, user_ids: Iterable[str]) -> Dict[str, Dict[str, Any]]:
        object_ids = list({oid for oid in (to_object_id(user_id) for user_id in user_ids) if oid is not None})
        if not object_ids:
            return {}
        users = (serialize_document(document) for document in self.collection.find({"_id": {"$in": object_ids}}, PUBLIC_FIELDS))
        return {user["id"]: user for user in users}
