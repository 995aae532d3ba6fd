"""
Hostname data model - Value Object pattern.
Immutable data structure representing a hostname protected by a configuration.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List


@dataclass(frozen=True)
class Hostname:
    """
    Immutable hostname value.

    Attributes:
        hostname: Hostname string exactly as the API reports it
    """
    hostname: str

    def to_dict(self) -> Dict[str, str]:
        """Wire representation"""
        return {"hostname": self.hostname}

    @classmethod
    def from_dict(cls, data: Any) -> 'Hostname':
        """
        Build from a wire object.

        A null entry or a missing/null `hostname` key decodes to an empty string.

        Raises:
            ValueError: data is not an object, or `hostname` is not a string
        """
        if data is None:
            return cls(hostname="")
        if not isinstance(data, dict):
            raise ValueError(f"hostname entry must be an object, got {type(data).__name__}")

        value = data.get("hostname")
        if value is None:
            return cls(hostname="")
        if not isinstance(value, str):
            raise ValueError(f"hostname must be a string, got {type(value).__name__}")
        return cls(hostname=value)


def hostnames_from_list(items: Any) -> List[Hostname]:
    """
    Decode a `hostnameList` array. None (omitted by the server) is an empty list.

    Raises:
        ValueError: items is not an array of hostname objects
    """
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValueError(f"hostnameList must be an array, got {type(items).__name__}")
    return [Hostname.from_dict(item) for item in items]


def hostnames_to_list(hostnames: Iterable[Hostname]) -> List[Dict[str, str]]:
    """Encode hostnames as a `hostnameList` array"""
    return [h.to_dict() for h in hostnames]
