"""
Error types raised by the appsec client, and the mapping from a failed
HTTP response to a structured API error.
"""

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class AppsecError(Exception):
    """Base class for every error raised by the client"""


class ValidationError(AppsecError):
    """
    Request failed local validation; nothing was sent.

    Attributes:
        fields: Mapping of offending field name to violation message
        operation: Name of the operation that rejected the request
    """

    def __init__(self, fields: Dict[str, str], operation: str = ""):
        self.fields = dict(fields)
        self.operation = operation
        details = "; ".join(f"{name}: {message}" for name, message in sorted(self.fields.items()))
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}struct validation failed: {details}")


class TransportError(AppsecError):
    """The HTTP exchange itself failed (DNS, TLS, timeout, cancellation)"""

    def __init__(self, message: str, operation: str = ""):
        self.operation = operation
        super().__init__(message)


class CancelledError(TransportError):
    """The caller cancelled the operation"""


class APIError(AppsecError):
    """
    Server answered with a non-success status.

    Attributes:
        status_code: HTTP status of the response
        title: Problem title reported by the server
        detail: Problem detail, or the raw body when it is not JSON
        type: Problem type URI
        instance: Problem instance URI
        payload: Decoded JSON body, or the raw text
    """

    def __init__(self,
                 status_code: int,
                 title: str = "",
                 detail: str = "",
                 type: str = "",
                 instance: str = "",
                 payload: Any = None):
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type
        self.instance = instance
        self.payload = payload
        super().__init__(self._message())

    def _message(self) -> str:
        parts = [f"API error: HTTP {self.status_code}"]
        if self.title:
            parts.append(self.title)
        if self.detail:
            parts.append(self.detail)
        return " - ".join(parts)


def error_from_response(response: requests.Response) -> APIError:
    """
    Map a non-success response to an APIError.

    Problem-details bodies (type/title/detail/instance) are unpacked;
    anything else is kept as raw text in `detail`.

    Args:
        response: The failed HTTP response

    Returns:
        APIError carrying the status code and server payload
    """
    payload: Any
    try:
        payload = response.json()
    except ValueError:
        payload = response.text

    problem: Optional[Dict[str, Any]] = payload if isinstance(payload, dict) else None
    if problem is None:
        logger.debug(f"Non-JSON error body for HTTP {response.status_code}")
        return APIError(status_code=response.status_code, detail=str(payload or ""), payload=payload)

    return APIError(
        status_code=response.status_code,
        title=str(problem.get("title") or ""),
        detail=str(problem.get("detail") or ""),
        type=str(problem.get("type") or ""),
        instance=str(problem.get("instance") or ""),
        payload=problem,
    )
