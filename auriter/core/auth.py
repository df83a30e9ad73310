"""Authentication dependency.

Verifies the bearer JWT issued by the platform's auth service and exposes the
acting user's id to route handlers. Tokens are never issued here.

Dependencies:
- PyJWT: For HS256 token verification.
- fastapi: For the Request object and dependency injection.
- auriter.errors.exceptions: For Unauthorized.
"""
import os
import jwt
from fastapi import Request
from loguru import logger
from auriter.errors.exceptions import Unauthorized

JWT_ALGORITHM = "HS256"


def decode_token(token: str) -> dict:
    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise RuntimeError(
            "JWT_SECRET environment variable is not set. "
            "Please set it in your .env file or environment variables."
        )
    return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])


def get_current_user_id(request: Request) -> str:
    """Extract and verify the bearer token from the Authorization header.

    Returns:
        str: The `id` claim of the token.

    Raises:
        Unauthorized: If the header is missing, the token is invalid or expired,
            or the token carries no user id.

    Example:
        Used as FastAPI dependency:
        @router.get("/my-jobs")
        async def my_jobs(user_id: str = Depends(get_current_user_id)):
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise Unauthorized("Not authorized, no token")

    token = auth_header.split(" ", 1)[1].strip()
    try:
        payload = decode_token(token)
    except jwt.ExpiredSignatureError as e:
        raise Unauthorized("Token has expired") from e
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise Unauthorized("Not authorized, token failed") from e

    user_id = payload.get("id")
    if not user_id:
        raise Unauthorized("Not authorized, token failed")
    return str(user_id)
