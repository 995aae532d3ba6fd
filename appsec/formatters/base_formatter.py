"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from ..models import SelectedHostnameResponse


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different output styles (list, table, JSON).
    """

    @abstractmethod
    def format(self, response: SelectedHostnameResponse, config_id: int, version: int) -> str:
        """
        Format a hostname response for output.

        Args:
            response: Response to format
            config_id: Configuration the response belongs to
            version: Configuration version

        Returns:
            Formatted string for output
        """
        pass
