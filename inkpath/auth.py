"""API key authentication and session ownership checks."""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from .capture import DrawingSession
from .config import settings
from .services.registry import registry

# Security scheme for API key in header
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)

# User id reported when no keys are configured
DEV_USER = "dev_mode"


async def verify_api_key(api_key: str = Security(api_key_header)) -> str:
    """Verify that the provided API key is valid.

    Raises:
        HTTPException: 401 if key is missing or invalid
    """
    valid_keys = settings.get_valid_api_keys()

    if not valid_keys:
        # Development mode: no keys configured, allow all requests
        return DEV_USER

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Provide X-API-Key header.",
        )

    if api_key not in valid_keys:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )

    return api_key


def get_user_id_from_key(api_key: str) -> str:
    """Map an API key to the user id stamped on sessions.

    For MVP the key itself is the user id.
    """
    return api_key


async def get_owned_session(session_id: str, api_key: str = Depends(verify_api_key)) -> DrawingSession:
    """Resolve a session id for the authenticated user.

    Raises:
        HTTPException: 404 if the session does not exist, 403 if it belongs
            to another user
    """
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )

    if session.user_id != get_user_id_from_key(api_key):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied",
        )

    return session
