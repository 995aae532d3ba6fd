"""
Service layer - API facades over the executor.
"""

from .base_service import SelectedHostnameAPI
from .hostname_config_client import HostnameConfigClient

__all__ = ['SelectedHostnameAPI', 'HostnameConfigClient']
