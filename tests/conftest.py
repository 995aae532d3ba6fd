"""Shared fixtures: a real requests.Session whose transport is a spy"""
import json
from unittest.mock import MagicMock

import pytest
import requests

from appsec.services import HostnameConfigClient
from appsec.session import Executor

BASE_URL = "https://akab-test.luna.akamaiapis.net"


def make_response(status_code, body=None, text=None):
    """Build a requests.Response carrying a JSON body (or raw text)"""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    return response


@pytest.fixture
def session():
    s = requests.Session()
    s.request = MagicMock(return_value=make_response(200, {"hostnameList": []}))
    return s


@pytest.fixture
def executor(session):
    return Executor(BASE_URL, session=session, timeout=10)


@pytest.fixture
def client(executor):
    return HostnameConfigClient(executor)
