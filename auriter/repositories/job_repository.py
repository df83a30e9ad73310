"""
Job Repository Module

MongoDB access for job postings, including the query builder behind the
public job listing filters.

Dependencies:
- pymongo: For collection access.
- auriter.schemas.jobs: For the search filter model.

"""
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from auriter.database import JOBS
from auriter.repositories.documents import serialize_document, to_object_id
from auriter.schemas.jobs import JobSearchFilters, JobStatus

REFERENCES = ("recruiter",)


def _contains(text: str) -> Dict[str, str]:
    return {"$regex": re.escape(text), "$options": "i"}


def build_job_query(filters: JobSearchFilters) -> Dict[str, Any]:
    """
    Translate listing filters into a MongoDB query.

    Only active jobs are listed unless a status is given explicitly. Free-text
    search matches title, company or description case-insensitively; skills
    must all be present.

    Args:
        filters (JobSearchFilters): Parsed query-string filters.

    Returns:
        Dict[str, Any]: MongoDB filter document.

    Example:
        >>> build_job_query(JobSearchFilters(type="full-time"))
        {'status': 'active', 'type': 'full-time'}
    """
    query: Dict[str, Any] = {"status": filters.status or JobStatus.ACTIVE.value}

    if filters.search:
        query["$or"] = [
            {"title": _contains(filters.search)},
            {"company": _contains(filters.search)},
            {"description": _contains(filters.search)},
        ]
    if filters.location:
        query["location"] = _contains(filters.location)
    if filters.type:
        query["type"] = filters.type
    if filters.experienceMin is not None:
        query["experience.min"] = {"$gte": filters.experienceMin}
    if filters.experienceMax is not None:
        query["experience.max"] = {"$lte": filters.experienceMax}
    if filters.salaryMin is not None:
        query["salary.min"] = {"$gte": filters.salaryMin}
    if filters.salaryMax is not None:
        query["salary.max"] = {"$lte": filters.salaryMax}
    if filters.skills:
        skills = [skill.strip() for skill in filters.skills.split(",") if skill.strip()]
        if skills:
            query["skills"] = {"$all": skills}
    return query


class JobRepository:
    def __init__(self, db: Database):
        self.collection = db[JOBS]

    def create(self, data: Dict[str, Any], recruiter_id: str) -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        document = {**data, "recruiter": to_object_id(recruiter_id), "createdAt": now, "updatedAt": now}
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return serialize_document(document, REFERENCES)

    def get_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(job_id)
        if object_id is None:
            return None
        return serialize_document(self.collection.find_one({"_id": object_id}), REFERENCES)

    def search(self, filters: JobSearchFilters) -> List[Dict[str, Any]]:
        cursor = self.collection.find(build_job_query(filters)).sort("createdAt", DESCENDING)
        return [serialize_document(document, REFERENCES) for document in cursor]

    def list_by_recruiter(self, recruiter_id: str) -> List[Dict[str, Any]]:
        object_id = to_object_id(recruiter_id)
        if object_id is None:
            return []
        cursor = self.collection.find({"recruiter": object_id}).sort("createdAt", DESCENDING)
        return [serialize_document(document, REFERENCES) for document in cursor]

    def update_owned(self, job_id: str, recruiter_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(job_id)
        owner_id = to_object_id(recruiter_id)
        if object_id is None or owner_id is None:
            return None
        document = self.collection.find_one_and_update(
            {"_id": object_id, "recruiter": owner_id},
            {"$set": {**changes, "updatedAt": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER,
        )
        return serialize_document(document, REFERENCES)

    def delete_owned(self, job_id: str, recruiter_id: str) -> bool:
        object_id = to_object_id(job_id)
        owner_id = to_object_id(recruiter_id)
        if object_id is None or owner_id is None:
            return False
        result = self.collection.delete_one({"_id": object_id, "recruiter": owner_id})
        return result.deleted_count == 1
