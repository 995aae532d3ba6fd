"""
Data models and value objects.
Following Domain-Driven Design patterns for immutable data structures.
"""

from .hostname import Hostname
from .selected_hostname import (
    SelectedHostnameRequest,
    SelectedHostnameResponse,
    GetSelectedHostnamesRequest,
    GetSelectedHostnamesResponse,
    GetSelectedHostnameRequest,
    GetSelectedHostnameResponse,
    UpdateSelectedHostnameRequest,
    UpdateSelectedHostnameResponse,
)

__all__ = [
    'Hostname',
    'SelectedHostnameRequest',
    'SelectedHostnameResponse',
    'GetSelectedHostnamesRequest',
    'GetSelectedHostnamesResponse',
    'GetSelectedHostnameRequest',
    'GetSelectedHostnameResponse',
    'UpdateSelectedHostnameRequest',
    'UpdateSelectedHostnameResponse',
]
