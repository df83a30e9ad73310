"""Database Configuration and Connection Management Module

This module handles MongoDB connectivity and index management for the
Auriter service. The client is created lazily on first use so that importing
the application never opens a connection.

Dependencies:
- pymongo: For the MongoDB client and index definitions.
- dotenv: For environment variable loading.
- loguru: For logging operations.

"""

from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.database import Database
from dotenv import load_dotenv
from typing import Optional
import os
import threading
from loguru import logger
load_dotenv()

INTERVIEWS = "interviews"
INTERVIEW_RESPONSES = "interview_responses"
JOBS = "jobs"
APPLICATIONS = "applications"
USERS = "users"
RESUME_ANALYSES = "resumeanalyses"

_client: Optional[MongoClient] = None
_client_lock = threading.Lock()


def get_client() -> MongoClient:
    """Return the process-wide MongoClient, creating it on first call.

    Raises:
        ValueError: If MONGODB_URI is not configured
    """
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                uri = os.getenv("MONGODB_URI")
                if not uri:
                    raise ValueError("Missing required environment variables: MONGODB_URI")
                _client = MongoClient(uri, tz_aware=True)
                logger.info("MongoDB client created")
    return _client


def get_database() -> Database:
    return get_client()[os.getenv("MONGODB_DB_NAME", "auriter")]


def create_indexes():
    """Create the indexes the repositories rely on.

    Room tokens are unique per interview and an applicant can apply to a job
    only once. This operation is idempotent.

    Raises:
        Exception: If index creation fails
    """
    try:
        db = get_database()
        db[INTERVIEWS].create_index([("roomId", ASCENDING)], unique=True)
        db[INTERVIEW_RESPONSES].create_index([("roomId", ASCENDING)])
        db[JOBS].create_index([("recruiter", ASCENDING), ("createdAt", DESCENDING)])
        db[APPLICATIONS].create_index([("job", ASCENDING), ("applicant", ASCENDING)], unique=True)
        db[RESUME_ANALYSES].create_index([("application", ASCENDING)])
        logger.info("Database indexes created successfully")
    except Exception as e:
        logger.error(f"Error creating database indexes: {e}")
        raise


def close_client():
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None
            logger.info("MongoDB client closed")
