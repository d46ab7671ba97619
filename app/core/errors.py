"""
Helpers for the JSON error bodies returned by the API.

Every error response is {"error": "<message>"}; 500s may add a "details"
string when running with ENVIRONMENT=development.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from app.core.config import settings


def error_body(message: str, exc: Optional[BaseException] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": message}
    if exc is not None and settings.is_development:
        body["details"] = str(exc)
    return body


def server_error(message: str, exc: Optional[BaseException] = None) -> HTTPException:
    """500 with detail suppressed outside development mode"""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_body(message, exc),
    )
