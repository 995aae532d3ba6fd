"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .hostname_formatter import HostnameFormatter

__all__ = ['OutputFormatter', 'HostnameFormatter']
