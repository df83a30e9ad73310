"""
Description:
Rate limiter shared by all routers, keyed by client IP address.

Dependencies:
- slowapi: For rate limiting functionality.
- loguru: For logging information about the rate limiter initialization.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from loguru import logger

limiter = Limiter(key_func=get_remote_address, default_limits=["60/minute"])
logger.info("Rate limiter initialized")
