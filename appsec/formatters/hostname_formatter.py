"""
Hostname formatter - Displays the selected hostnames of a configuration version.

Output format:
Config 12345, version 7
============================================================
  - a.example.com
  - b.example.com
"""

import json
from .base_formatter import OutputFormatter
from ..models import SelectedHostnameResponse


class HostnameFormatter(OutputFormatter):
    """
    Formatter for hostname lists. Hostnames keep the order the server returned.

    Design Pattern: Strategy Pattern implementation
    """

    FORMATS = ("list", "table", "json")

    def __init__(self, output_format: str = "list"):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('list', 'table', 'json')
        """
        if output_format not in self.FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")
        self.output_format = output_format

    def format(self, response: SelectedHostnameResponse, config_id: int, version: int) -> str:
        if self.output_format == "json":
            return self._format_json(response, config_id, version)
        elif self.output_format == "table":
            return self._format_table(response, config_id, version)
        else:  # list (default)
            return self._format_list(response, config_id, version)

    def _format_list(self, response: SelectedHostnameResponse, config_id: int, version: int) -> str:
        """Format as simple list"""
        if not response.hostname_list:
            return f"No selected hostnames for config {config_id}, version {version}."

        lines = [f"Config {config_id}, version {version}", "=" * 60]
        for hostname in response.hostnames:
            lines.append(f"  - {hostname}")
        return "\n".join(lines)

    def _format_table(self, response: SelectedHostnameResponse, config_id: int, version: int) -> str:
        """Format as table with config/version columns"""
        lines = []
        lines.append("{:<12} {:<10} {:<50}".format("CONFIG", "VERSION", "HOSTNAME"))
        lines.append("=" * 74)

        for i, hostname in enumerate(response.hostnames):
            # Only show config/version on the first row
            config_display = str(config_id) if i == 0 else ""
            version_display = str(version) if i == 0 else ""
            lines.append("{:<12} {:<10} {:<50}".format(config_display, version_display, hostname))

        if not response.hostname_list:
            lines.append("No selected hostnames.")

        return "\n".join(lines)

    def _format_json(self, response: SelectedHostnameResponse, config_id: int, version: int) -> str:
        """Format as JSON, with the hostname list in wire form"""
        output = {
            "configId": config_id,
            "version": version,
            "total_hostnames": len(response.hostname_list),
        }
        output.update(response.to_dict())
        return json.dumps(output, indent=2)
