from dotenv import load_dotenv
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from contextlib import asynccontextmanager
from slowapi import _rate_limit_exceeded_handler
# Rate Limiter
from auriter.core.route_limiters import limiter
# Routers
from auriter.routes.health import router as health_router
from auriter.routes.interviews import router as interviews_router
from auriter.routes.jobs import router as jobs_router
from auriter.routes.job_applications import router as job_applications_router
from auriter.routes.transcription_ws import router as transcription_ws_router
# CORS Middleware
from auriter.core.cors_middleware import add_cors_middleware
# Logger
from loguru import logger
# Database
from auriter.database import create_indexes, close_client
# Error Handling
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError

from auriter.errors.handlers import http_exception_handler, generic_exception_handler, duplicate_key_handler

# Load environment variables
load_dotenv()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup
    try:
        create_indexes()
        logger.info("Application startup completed successfully")
    except Exception as e:
        logger.error(f"Error during application startup: {e}")
        raise

    yield

    # Shutdown
    close_client()
    logger.info("Application shutdown")

# Initialize FastAPI app
app = FastAPI(
    title="Auriter Interview Service",
    description="Jobs, applications and AI mock interviews for the Auriter platform",
    version="0.1.0",
    lifespan=lifespan
)
# Add CORS middleware
add_cors_middleware(app)

# Centralized error handlers
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
app.add_exception_handler(DuplicateKeyError, duplicate_key_handler)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors()},
    )

# Add rate limiter to the app
try:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
except Exception as e:
    logger.error(f"Error adding rate limiter: {e}")

# Include routers
app.include_router(health_router)
app.include_router(interviews_router)
app.include_router(jobs_router)
app.include_router(job_applications_router)
app.include_router(transcription_ws_router)
