"""
Health check endpoint for the application.

Returns:
- A JSON response with the status of the application, typically {"status": "ok"}.

Dependencies:
- fastapi: For defining routes.
- auriter.core.route_limiters: For rate limiting functionality.
- auriter.schemas.health_response: For defining the response model.
- loguru: For logging information about the health check endpoint.

"""
from fastapi import APIRouter, Request
from auriter.core.route_limiters import limiter
from auriter.schemas.health_response import HealthResponse
from loguru import logger

router = APIRouter(
    prefix="/api",
    tags=["health"],
    responses={404: {"description": "Not found"}}
)

@router.get("/health", response_model=HealthResponse)
@limiter.limit("10/minute")
async def health(request: Request):
    """
    Request parameter is required for rate limiting.
    """
    logger.info("Health check endpoint called")
    return {"status": "ok"}
