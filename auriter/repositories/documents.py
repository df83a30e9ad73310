"""
Helpers for moving between MongoDB documents and API-facing dicts.

Repositories hand out plain dicts with string ids so that routes and services
never see bson types.
"""
from typing import Any, Dict, Iterable, Optional
from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse an id, returning None for anything that is not a valid ObjectId."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def serialize_document(document: Optional[Dict[str, Any]], reference_fields: Iterable[str] = ()) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    data = dict(document)
    if "_id" in data:
        data["id"] = str(data.pop("_id"))
    for field in reference_fields:
        if isinstance(data.get(field), ObjectId):
            data[field] = str(data[field])
    return data
