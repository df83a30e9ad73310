"""
Video room identifiers.

The conferencing provider is configured on the frontend; this service only
mints the room token that ties an interview's schedule, questions, answers and
live session together, and builds the shareable link for it.
"""
import os
import uuid


def create_room_id() -> str:
    return str(uuid.uuid4())


def build_interview_link(room_id: str) -> str:
    frontend_url = os.getenv("FRONTEND_URL", "http://localhost:3000").rstrip("/")
    return f"{frontend_url}/interview/{room_id}"
