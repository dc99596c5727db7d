"""Security utilities for validating the API key sent by the frontend."""

import logging
import secrets
from typing import Optional
from fastapi import Header, HTTPException, status
from .config import settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


def verify_api_key(api_key: Optional[str] = None) -> bool:
    """
    Verify the API key matches the configured one.

    Args:
        - api_key (Optional[str]): The API key sent by the client.

    Returns:
        - bool: Whether the API key is valid.
    """
    expected_key = settings.API_KEY
    if not api_key or not expected_key:
        return False
    return secrets.compare_digest(api_key.encode(), expected_key.encode())


async def require_api_key(x_api_key: Optional[str] = Header(None, alias=API_KEY_HEADER)) -> None:
    """
    FastAPI dependency guarding every non-public route.

    Raises 401 when the header is missing or wrong, and 500 when the server
    itself has no API_KEY configured.
    """
    if not x_api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key is missing"
        )

    if not settings.API_KEY:
        logger.error("API_KEY environment variable is not configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API_KEY environment variable is not configured. Please set API_KEY in your environment file."
        )

    if not verify_api_key(x_api_key):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key"
        )
