"""Tests for hostname request/response models"""

import dataclasses

import pytest

from appsec.models import (
    Hostname,
    GetSelectedHostnamesRequest,
    GetSelectedHostnamesResponse,
    UpdateSelectedHostnameRequest,
    UpdateSelectedHostnameResponse,
)


def test_hostname_is_immutable():
    hostname = Hostname("example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        hostname.hostname = "other.com"


def test_hostname_wire_form():
    assert Hostname("example.com").to_dict() == {"hostname": "example.com"}
    assert Hostname.from_dict({"hostname": "example.com"}) == Hostname("example.com")
    assert Hostname.from_dict({}) == Hostname("")


def test_valid_request_has_no_errors():
    assert GetSelectedHostnamesRequest(config_id=12345, version=7).validate() == {}


@pytest.mark.parametrize("value, message", [
    (None, "cannot be blank"),
    (0, "must be a positive integer"),
    (-5, "must be a positive integer"),
    ("12", "must be an integer"),
    (True, "must be an integer"),
    (1.5, "must be an integer"),
])
def test_request_field_violations(value, message):
    errors = GetSelectedHostnamesRequest(config_id=value, version=value).validate()
    assert errors == {"config_id": message, "version": message}


def test_hostnames_are_not_validated_locally():
    request = UpdateSelectedHostnameRequest(config_id=1, version=1, hostname_list=[Hostname(""), Hostname("not a host")])
    assert request.validate() == {}


def test_request_path():
    assert GetSelectedHostnamesRequest(config_id=12345, version=7).path == \
        "/appsec/v1/configs/12345/versions/7/selected-hostnames"


def test_update_request_body():
    request = UpdateSelectedHostnameRequest(config_id=1, version=2, hostname_list=[Hostname("a.com")])
    assert request.to_dict() == {"configId": 1, "version": 2, "hostnameList": [{"hostname": "a.com"}]}


def test_request_defaults_to_empty_list():
    assert UpdateSelectedHostnameRequest(config_id=1, version=2).to_dict()["hostnameList"] == []


def test_response_decoding_keeps_order_and_type():
    response = UpdateSelectedHostnameResponse.from_dict(
        {"hostnameList": [{"hostname": "b.com"}, {"hostname": "a.com"}]})

    assert isinstance(response, UpdateSelectedHostnameResponse)
    assert response.hostnames == ["b.com", "a.com"]


def test_response_null_list():
    assert GetSelectedHostnamesResponse.from_dict({"hostnameList": None}).hostname_list == ()


def test_request_hostnames_are_immutable():
    names = [Hostname("a.com")]
    request = UpdateSelectedHostnameRequest(config_id=1, version=2, hostname_list=names)
    names.append(Hostname("b.com"))

    assert request.hostname_list == (Hostname("a.com"),)
    assert hash(request) == hash(UpdateSelectedHostnameRequest(config_id=1, version=2,
                                                               hostname_list=[Hostname("a.com")]))


def test_response_is_hashable():
    response = GetSelectedHostnamesResponse.from_dict({"hostnameList": [{"hostname": "a.com"}]})
    assert {response} == {GetSelectedHostnamesResponse(hostname_list=(Hostname("a.com"),))}


@pytest.mark.parametrize("items", [["a.com"], {"hostname": "a.com"}, [{"hostname": ["a.com"]}]])
def test_malformed_hostname_list_rejected(items):
    with pytest.raises(ValueError):
        GetSelectedHostnamesResponse.from_dict({"hostnameList": items})


def test_null_hostname_entries():
    response = GetSelectedHostnamesResponse.from_dict({"hostnameList": [None, {"hostname": None}]})
    assert response.hostnames == ["", ""]
