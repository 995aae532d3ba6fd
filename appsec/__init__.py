"""
Appsec Selected Hostnames Package

Typed client for the selected hostnames resource of the Application
Security configuration API: list, get and replace the hostnames a
configuration version protects.

Architecture:
- Facade Pattern for the API client
- Value Object Pattern for immutable request/response models
- Strategy Pattern for output formatters
"""

from .models import (
    Hostname,
    GetSelectedHostnamesRequest,
    GetSelectedHostnamesResponse,
    GetSelectedHostnameRequest,
    GetSelectedHostnameResponse,
    UpdateSelectedHostnameRequest,
    UpdateSelectedHostnameResponse,
)
from .errors import AppsecError, ValidationError, TransportError, CancelledError, APIError, error_from_response
from .session import Executor
from .services import SelectedHostnameAPI, HostnameConfigClient
from .parsers import HostnameParser
from .formatters import HostnameFormatter

__version__ = "1.0.0"

__all__ = [
    # Models
    "Hostname",
    "GetSelectedHostnamesRequest",
    "GetSelectedHostnamesResponse",
    "GetSelectedHostnameRequest",
    "GetSelectedHostnameResponse",
    "UpdateSelectedHostnameRequest",
    "UpdateSelectedHostnameResponse",
    # Errors
    "AppsecError",
    "ValidationError",
    "TransportError",
    "CancelledError",
    "APIError",
    "error_from_response",
    # Transport
    "Executor",
    # Services
    "SelectedHostnameAPI",
    "HostnameConfigClient",
    # Parsers / formatters
    "HostnameParser",
    "HostnameFormatter",
]
