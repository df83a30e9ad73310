"""
Resume Analysis Repository Module

Read access to resume analyses. Analyses are written by the resume analysis
service; this service only serves them back to applicants and recruiters.

Dependencies:
- pymongo: For collection access.

"""
from typing import Any, Dict, Optional
from pymongo.database import Database
from auriter.database import RESUME_ANALYSES
from auriter.repositories.documents import serialize_document, to_object_id

REFERENCES = ("application",)


class ResumeAnalysisRepository:
    def __init__(self, db: Database):
        self.collection = db[RESUME_ANALYSES]

    def get_by_application(self, application_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(application_id)
        if object_id is None:
            return None
        return serialize_document(self.collection.find_one({"application": object_id}), REFERENCES)
