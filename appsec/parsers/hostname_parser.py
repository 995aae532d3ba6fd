"""
Hostname parser for turning command line and file input into Hostname lists.

Logic:
1. Split comma-separated values and read one hostname per line from files
2. Ignore blank lines and `#` comments
3. Drop duplicates, keeping the first occurrence
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..models import Hostname


class HostnameParser:
    """
    Parser for hostname lists supplied by users.

    Hostnames are only trimmed and deduplicated; their content is left to
    the server to judge.
    """

    COMMENT_PREFIX = "#"

    @classmethod
    def split(cls, value: Optional[str]) -> List[str]:
        """
        Split a comma-separated string.

        Args:
            value: e.g. "a.example.com, b.example.com"

        Returns:
            Non-empty trimmed items
        """
        if not value:
            return []
        return [item.strip() for item in value.split(",") if item.strip()]

    @classmethod
    def read_lines(cls, lines: Iterable[str]) -> List[str]:
        """Hostnames from lines of text, one per line (commas also accepted)"""
        names: List[str] = []
        for line in lines:
            line = line.strip()
            if not line or line.startswith(cls.COMMENT_PREFIX):
                continue
            names.extend(cls.split(line))
        return names

    @classmethod
    def read_file(cls, path: Union[str, Path]) -> List[str]:
        """Hostnames from a text file"""
        with open(path, "r", encoding="utf-8") as f:
            return cls.read_lines(f)

    @classmethod
    def parse(cls, names: Iterable[str]) -> List[Hostname]:
        """
        Build an ordered, duplicate-free Hostname list.

        Args:
            names: Raw hostname strings

        Returns:
            Hostname objects in first-seen order
        """
        seen = set()
        hostnames: List[Hostname] = []
        for name in names:
            name = name.strip()
            if not name or name in seen:
                continue
            seen.add(name)
            hostnames.append(Hostname(hostname=name))
        return hostnames
