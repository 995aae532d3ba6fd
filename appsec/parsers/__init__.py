"""
Parser utilities for extracting structured data from user input.
"""

from .hostname_parser import HostnameParser

__all__ = ['HostnameParser']
