"""
Application Repository Module

MongoDB access for job applications.

Dependencies:
- pymongo: For collection access.

"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from auriter.database import APPLICATIONS
from auriter.repositories.documents import serialize_document, to_object_id

REFERENCES = ("job", "applicant")


class ApplicationRepository:
    def __init__(self, db: Database):
        self.collection = db[APPLICATIONS]

    def _serialize_all(self, cursor) -> List[Dict[str, Any]]:
        return [serialize_document(document, REFERENCES) for document in cursor]

    def create(self, job_id: str, applicant_id: str, resume: str,
               cover_letter: Optional[str] = None, additional_notes: Optional[str] = None) -> Dict[str, Any]:
        document = {
            "job": to_object_id(job_id),
            "applicant": to_object_id(applicant_id),
            "resume": resume,
            "coverLetter": cover_letter,
            "additionalNotes": additional_notes,
            "status": "pending",
            "createdAt": datetime.now(timezone.utc),
        }
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return serialize_document(document, REFERENCES)

    def get_by_id(self, application_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(application_id)
        if object_id is None:
            return None
        return serialize_document(self.collection.find_one({"_id": object_id}), REFERENCES)

    def find_by_job_and_applicant(self, job_id: str, applicant_id: str) -> Optional[Dict[str, Any]]:
        job, applicant = to_object_id(job_id), to_object_id(applicant_id)
        if job is None or applicant is None:
            return None
        return serialize_document(self.collection.find_one({"job": job, "applicant": applicant}), REFERENCES)

    def list_by_jobs(self, job_ids: Iterable[str]) -> List[Dict[str, Any]]:
        object_ids = [oid for oid in (to_object_id(job_id) for job_id in job_ids) if oid is not None]
        if not object_ids:
            return []
        return self._serialize_all(self.collection.find({"job": {"$in": object_ids}}).sort("createdAt", DESCENDING))

    def list_by_applicant(self, applicant_id: str) -> List[Dict[str, Any]]:
        object_id = to_object_id(applicant_id)
        if object_id is None:
            return []
        return self._serialize_all(self.collection.find({"applicant": object_id}).sort("createdAt", DESCENDING))

    def update_status(self, application_id: str, status: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(application_id)
        if object_id is None:
            return None
        document = self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": {"status": status}},
            return_document=ReturnDocument.AFTER,
        )
        return serialize_document(document, REFERENCES)
