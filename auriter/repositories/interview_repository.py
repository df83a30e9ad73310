"""
Interview Repository Module

MongoDB access for interviews and the answers submitted during them.

Dependencies:
- pymongo: For collection access.
- loguru: For logging operations.
- auriter.schemas.interview: For Interview and InterviewResponse models.

"""
from typing import List, Optional
from pymongo import ReturnDocument
from pymongo.database import Database
from loguru import logger
from auriter.database import INTERVIEWS, INTERVIEW_RESPONSES
from auriter.schemas.interview import Interview, InterviewResponse


class InterviewRepository:
    def __init__(self, db: Database):
        self.collection = db[INTERVIEWS]

    def create(self, interview: Interview) -> Interview:
        self.collection.insert_one(interview.model_dump())
        logger.info(f"Stored interview {interview.roomId}")
        return interview

    def get_by_room_id(self, room_id: str) -> Optional[Interview]:
        document = self.collection.find_one({"roomId": room_id}, {"_id": 0})
        return Interview(**document) if document else None

    def set_questions_if_empty(self, room_id: str, questions: List[str]) -> List[str]:
        """
        Store generated questions unless another request already did.

        The update only matches while the interview has no questions, so the
        first writer wins. A losing writer gets back the stored list.

        Args:
            room_id (str): Room token of the interview.
            questions (List[str]): Questions to store.

        Returns:
            List[str]: The questions now stored on the interview.
        """
        updated = self.collection.find_one_and_update(
            {
                "roomId": room_id,
                "$or": [{"questions": {"$exists": False}}, {"questions": {"$size": 0}}],
            },
            {"$set": {"questions": questions}},
            projection={"_id": 0, "questions": 1},
            return_document=ReturnDocument.AFTER,
        )
        if updated is not None:
            return updated["questions"]

        logger.info(f"Questions for interview {room_id} were already stored, keeping existing list")
        existing = self.collection.find_one({"roomId": room_id}, {"_id": 0, "questions": 1})
        return (existing or {}).get("questions") or questions


class InterviewResponseRepository:
    def __init__(self, db: Database):
        self.collection = db[INTERVIEW_RESPONSES]

    def create(self, response: InterviewResponse) -> str:
        result = self.collection.insert_one(response.model_dump())
        return str(result.inserted_id)
