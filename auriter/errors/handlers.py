from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.status import HTTP_409_CONFLICT, HTTP_500_INTERNAL_SERVER_ERROR
from pymongo.errors import DuplicateKeyError
from loguru import logger

def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )

def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred."},
    )

def duplicate_key_handler(request: Request, exc: DuplicateKeyError):
    """
    Handle MongoDB unique index violations.

    Converts duplicate key errors into a 409 response naming the collection
    when it can be read from the driver error.

    Args:
        request: FastAPI request instance
        exc: DuplicateKeyError from pymongo

    Returns:
        JSONResponse with 409 status and user-friendly error message
    """
    error_msg = str(exc).lower()

    if "interviews" in error_msg or "roomid" in error_msg:
        detail = "Interview already exists."
    elif "applications" in error_msg:
        detail = "You have already applied for this job"
    else:
        detail = "Data constraint violation"

    return JSONResponse(
        status_code=HTTP_409_CONFLICT,
        content={"detail": detail},
    )
