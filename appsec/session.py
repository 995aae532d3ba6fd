"""
HTTP executor for the appsec API.

Wraps a requests.Session bound to one API base URL. Authentication is
whatever the session carries (for example an auth plugin set on
`session.auth`); the executor only builds and sends requests.
"""

import logging
import threading
from typing import Any, Dict, Optional

import requests
from urllib3 import disable_warnings
from urllib3.exceptions import InsecureRequestWarning

from .errors import CancelledError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class Executor:
    """
    Sends one HTTP request per call and returns the raw response.

    Responsibilities:
    - Join the configured base URL with an API path
    - Serialize request bodies as JSON
    - Apply timeout and TLS verification settings
    """

    def __init__(self,
                 base_url: str,
                 session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT,
                 verify_ssl: bool = True,
                 headers: Optional[Dict[str, str]] = None):
        """
        Initialize executor.

        Args:
            base_url: API base, e.g. https://akab-xxxx.luna.akamaiapis.net
            session: Pre-configured session; a new one is created if omitted
            timeout: Per-request timeout in seconds
            verify_ssl: Verify TLS certificates
            headers: Extra headers sent with every request
        """
        if not base_url:
            raise ValueError("base_url cannot be empty")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        # sent per request; a caller-owned session is never modified
        self.headers = {"Accept": "application/json"}
        if headers:
            self.headers.update(headers)

        if not verify_ssl:
            disable_warnings(InsecureRequestWarning)

    def url_for(self, path: str) -> str:
        """Absolute URL for an API path"""
        return f"{self.base_url}/{path.lstrip('/')}"

    def execute(self,
                method: str,
                path: str,
                body: Optional[Dict[str, Any]] = None,
                cancel_event: Optional[threading.Event] = None) -> requests.Response:
        """
        Send a request and return the response without checking its status.

        Args:
            method: HTTP method
            path: API path relative to the base URL
            body: JSON-serializable request body, or None for no body
            cancel_event: Set by the caller to abandon the call

        Returns:
            The HTTP response

        Raises:
            CancelledError: cancel_event was set before the request was sent
            requests.exceptions.RequestException: transport failure
        """
        if cancel_event is not None and cancel_event.is_set():
            raise CancelledError(f"{method} {path} cancelled before it was sent")

        url = self.url_for(path)
        logger.debug(f"{method} {url}")

        kwargs: Dict[str, Any] = {
            "headers": dict(self.headers),
            "timeout": self.timeout,
            "verify": self.verify_ssl,
        }
        if body is not None:
            kwargs["json"] = body

        response = self._session.request(method, url, **kwargs)
        logger.debug(f"{method} {url} -> HTTP {response.status_code}")
        return response

    def close(self) -> None:
        """Close the session if this executor created it"""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensure cleanup"""
        self.close()
