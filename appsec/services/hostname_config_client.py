"""
Hostname config client - Facade over the selected hostnames endpoint.

    GET /appsec/v1/configs/{configId}/versions/{version}/selected-hostnames
    PUT /appsec/v1/configs/{configId}/versions/{version}/selected-hostnames
"""

import logging
import threading
from typing import Optional, Tuple, Type, TypeVar

import requests

from .base_service import SelectedHostnameAPI
from ..errors import CancelledError, TransportError, ValidationError, error_from_response
from ..models import (
    SelectedHostnameRequest,
    SelectedHostnameResponse,
    GetSelectedHostnamesRequest,
    GetSelectedHostnamesResponse,
    GetSelectedHostnameRequest,
    GetSelectedHostnameResponse,
    UpdateSelectedHostnameRequest,
    UpdateSelectedHostnameResponse,
)
from ..session import Executor

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=SelectedHostnameResponse)

OK = (200,)
OK_OR_CREATED = (200, 201)


class HostnameConfigClient(SelectedHostnameAPI):
    """
    Selected hostnames client.

    Holds only the executor, so one instance can serve concurrent callers.
    """

    def __init__(self, executor: Executor):
        self._executor = executor

    def get_selected_hostnames(self,
                               params: GetSelectedHostnamesRequest,
                               cancel_event: Optional[threading.Event] = None) -> GetSelectedHostnamesResponse:
        return self._call("GetSelectedHostnames", "GET", params, GetSelectedHostnamesResponse,
                          OK, cancel_event=cancel_event)

    def get_selected_hostname(self,
                              params: GetSelectedHostnameRequest,
                              cancel_event: Optional[threading.Event] = None) -> GetSelectedHostnameResponse:
        return self._call("GetSelectedHostname", "GET", params, GetSelectedHostnameResponse,
                          OK, cancel_event=cancel_event)

    def update_selected_hostname(self,
                                 params: UpdateSelectedHostnameRequest,
                                 cancel_event: Optional[threading.Event] = None) -> UpdateSelectedHostnameResponse:
        return self._call("UpdateSelectedHostname", "PUT", params, UpdateSelectedHostnameResponse,
                          OK_OR_CREATED, send_body=True, cancel_event=cancel_event)

    def _call(self,
              operation: str,
              method: str,
              params: SelectedHostnameRequest,
              response_type: Type[ResponseT],
              success_codes: Tuple[int, ...],
              send_body: bool = False,
              cancel_event: Optional[threading.Event] = None) -> ResponseT:
        """Validate, send, check status and decode one exchange"""
        errors = params.validate()
        if errors:
            raise ValidationError(errors, operation=operation)

        logger.debug(operation)

        body = params.to_dict() if send_body else None
        try:
            response = self._executor.execute(method, params.path, body=body, cancel_event=cancel_event)
        except CancelledError as e:
            raise CancelledError(f"{operation} request failed: {e}", operation=operation) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"{operation} request failed: {e}", operation=operation) from e

        if cancel_event is not None and cancel_event.is_set():
            raise CancelledError(f"{operation} request failed: cancelled", operation=operation)

        if response.status_code not in success_codes:
            raise error_from_response(response)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"{operation} request failed: invalid response body: {e}",
                                 operation=operation) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TransportError(f"{operation} request failed: expected a JSON object, got {type(data).__name__}",
                                 operation=operation)

        try:
            return response_type.from_dict(data)
        except ValueError as e:
            raise TransportError(f"{operation} request failed: invalid response body: {e}",
                                 operation=operation) from e
