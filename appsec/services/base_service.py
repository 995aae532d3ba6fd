"""
Selected hostname API - Abstract base class.
Defines the interface for retrieving and modifying the list of hostnames
protected under a security configuration version.
"""

import threading
from abc import ABC, abstractmethod
from typing import Optional

from ..models import (
    GetSelectedHostnamesRequest,
    GetSelectedHostnamesResponse,
    GetSelectedHostnameRequest,
    GetSelectedHostnameResponse,
    UpdateSelectedHostnameRequest,
    UpdateSelectedHostnameResponse,
)


class SelectedHostnameAPI(ABC):
    """
    Abstract interface for the selected hostnames resource.

    Every operation is one synchronous request/response exchange and
    raises an AppsecError subclass on failure.
    """

    @abstractmethod
    def get_selected_hostnames(self,
                               params: GetSelectedHostnamesRequest,
                               cancel_event: Optional[threading.Event] = None) -> GetSelectedHostnamesResponse:
        """
        List the selected hostnames of a configuration version.

        Args:
            params: Configuration ID and version
            cancel_event: Optional event the caller sets to cancel

        Returns:
            Current hostname list
        """
        pass

    @abstractmethod
    def get_selected_hostname(self,
                              params: GetSelectedHostnameRequest,
                              cancel_event: Optional[threading.Event] = None) -> GetSelectedHostnameResponse:
        """Same call as get_selected_hostnames, kept under its own name"""
        pass

    @abstractmethod
    def update_selected_hostname(self,
                                 params: UpdateSelectedHostnameRequest,
                                 cancel_event: Optional[threading.Event] = None) -> UpdateSelectedHostnameResponse:
        """
        Replace the selected hostnames of a configuration version.

        Args:
            params: Configuration ID, version and the desired hostname list
            cancel_event: Optional event the caller sets to cancel

        Returns:
            Hostname list as stored by the server
        """
        pass
