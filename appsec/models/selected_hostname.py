"""
Request and response models for the selected hostnames resource.

The selected hostnames of a configuration version are the hostnames that
version is configured to protect.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from .hostname import Hostname, hostnames_from_list, hostnames_to_list


def _as_tuple(hostnames: Iterable[Hostname]) -> Tuple[Hostname, ...]:
    if hostnames is None:
        return ()
    return tuple(hostnames)


def _check_positive(value: Any) -> str:
    """Return a violation message for value, or an empty string when valid"""
    if value is None:
        return "cannot be blank"
    if isinstance(value, bool) or not isinstance(value, int):
        return "must be an integer"
    if value <= 0:
        return "must be a positive integer"
    return ""


@dataclass(frozen=True)
class SelectedHostnameRequest:
    """
    Identifies one configuration version.

    Attributes:
        config_id: Security configuration ID
        version: Configuration version number
        hostname_list: Desired hostnames (only sent by updates)
    """
    config_id: int
    version: int
    hostname_list: Tuple[Hostname, ...] = ()

    def __post_init__(self):
        """Store hostnames as a tuple so the value stays immutable"""
        object.__setattr__(self, "hostname_list", _as_tuple(self.hostname_list))

    def validate(self) -> Dict[str, str]:
        """
        Check the request before it is sent.

        Returns:
            Mapping of field name to violation message, empty when valid
        """
        errors = {}
        for name in ("config_id", "version"):
            message = _check_positive(getattr(self, name))
            if message:
                errors[name] = message
        return errors

    @property
    def path(self) -> str:
        return f"/appsec/v1/configs/{self.config_id}/versions/{self.version}/selected-hostnames"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "configId": self.config_id,
            "version": self.version,
            "hostnameList": hostnames_to_list(self.hostname_list),
        }


class GetSelectedHostnamesRequest(SelectedHostnameRequest):
    """Used to retrieve the selected hostnames for a configuration version"""


class GetSelectedHostnameRequest(SelectedHostnameRequest):
    """Used to retrieve the selected hostnames for a configuration version"""


class UpdateSelectedHostnameRequest(SelectedHostnameRequest):
    """Used to replace the selected hostnames for a configuration version"""


@dataclass(frozen=True)
class SelectedHostnameResponse:
    """Hostname list as reported by the server"""
    hostname_list: Tuple[Hostname, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "hostname_list", _as_tuple(self.hostname_list))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        return cls(hostname_list=hostnames_from_list(data.get("hostnameList")))

    def to_dict(self) -> Dict[str, Any]:
        return {"hostnameList": hostnames_to_list(self.hostname_list)}

    @property
    def hostnames(self) -> List[str]:
        return [h.hostname for h in self.hostname_list]


class GetSelectedHostnamesResponse(SelectedHostnameResponse):
    """Returned from a call to get_selected_hostnames"""


class GetSelectedHostnameResponse(SelectedHostnameResponse):
    """Returned from a call to get_selected_hostname"""


class UpdateSelectedHostnameResponse(SelectedHostnameResponse):
    """Returned from a call to update_selected_hostname"""
