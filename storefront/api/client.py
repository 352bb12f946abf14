"""
HTTP client configuration and utilities.
"""
from typing import Dict, Optional

import httpx

from storefront.config.settings import settings


def get_async_client(
    timeout: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Get configured async HTTP client for the auth backend.

    Args:
        timeout: Request timeout in seconds (defaults to AUTH_TIMEOUT)
        headers: Extra headers sent with every request
        transport: Optional transport override

    Returns:
        httpx.AsyncClient instance
    """
    return httpx.AsyncClient(
        base_url=settings.API_URL,
        headers=headers or {},
        timeout=httpx.Timeout(timeout or settings.AUTH_TIMEOUT),
        transport=transport,
    )


def extract_error_message(e: Exception, operation: str, logger) -> Optional[str]:
    """
    Turn an HTTP error into a user-facing message.

    Args:
        e: Exception that occurred
        operation: Description of the operation
        logger: Logger instance

    Returns:
        Error message string, or None when the error carries nothing worth showing
    """
    if isinstance(e, httpx.HTTPStatusError):
        try:
            error_detail = e.response.json().get('detail')
        except (ValueError, AttributeError):
            error_detail = e.response.text or None
        logger.error(f"{operation} failed: {error_detail}")
        # Normalize FastAPI/Pydantic validation errors into user-friendly text.
        if isinstance(error_detail, list):
            for item in error_detail:
                loc = item.get("loc", [])
                msg = item.get("msg", "")
                if "email" in loc:
                    return "Please enter a valid email address."
                if msg:
                    return msg
            return "Invalid input. Please check your form and try again."
        if isinstance(error_detail, str) and error_detail.strip():
            return error_detail
        return None
    elif isinstance(e, httpx.RequestError):
        logger.error(f"Network error during {operation}: {e}", exc_info=True)
        return f"Network error during {operation}: {e}"
    else:
        logger.error(f"Unexpected error during {operation}: {e}", exc_info=True)
        return None
