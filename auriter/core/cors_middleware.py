"""
Description:
Module for adding CORS middleware to the FastAPI application.

Origins come from CORS_ORIGINS (comma separated), falling back to FRONTEND_URL.

Dependencies:
- fastapi.middleware.cors: For CORS middleware functionality.
- loguru: For logging information about the middleware setup.
"""
import os
from typing import List
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger


def get_allowed_origins() -> List[str]:
    configured = os.getenv("CORS_ORIGINS", "")
    origins = [origin.strip() for origin in configured.split(",") if origin.strip()]
    if not origins:
        origins = [os.getenv("FRONTEND_URL", "http://localhost:3000")]
    return origins


def add_cors_middleware(app: FastAPI):
    origins = get_allowed_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS middleware added for {origins}")
