from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN, HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

class BadRequest(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail)

class NotFound(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class Unauthorized(HTTPException):
    def __init__(self, detail: str = "Unauthorized access"):
        super().__init__(status_code=HTTP_401_UNAUTHORIZED, detail=detail)

class Forbidden(HTTPException):
    def __init__(self, detail: str = "Not authorized to access this resource"):
        super().__init__(status_code=HTTP_403_FORBIDDEN, detail=detail)

class InterviewNotFound(NotFound):
    def __init__(self, identifier: str = None):
        self.identifier = identifier
        super().__init__(detail="Interview not found")

class JobNotFound(NotFound):
    def __init__(self, identifier: str = None):
        self.identifier = identifier
        super().__init__(detail="Job not found")

class ApplicationNotFound(NotFound):
    def __init__(self, identifier: str = None):
        self.identifier = identifier
        super().__init__(detail="Application not found")

class AnalysisNotFound(NotFound):
    def __init__(self, identifier: str = None):
        self.identifier = identifier
        super().__init__(detail="Analysis not found")

class EmailDeliveryError(Exception):
    """Raised by email senders when a message could not be handed to the mail server."""
