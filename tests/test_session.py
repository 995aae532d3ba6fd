"""Tests for the HTTP executor"""

import threading
from unittest.mock import MagicMock, patch

import pytest
import requests

from appsec.errors import CancelledError
from appsec.session import Executor
from tests.conftest import BASE_URL


def test_empty_base_url_rejected():
    with pytest.raises(ValueError):
        Executor("")


def test_url_join_handles_slashes():
    executor = Executor(BASE_URL + "/", session=requests.Session())
    assert executor.url_for("/appsec/v1/x") == f"{BASE_URL}/appsec/v1/x"
    assert executor.url_for("appsec/v1/x") == f"{BASE_URL}/appsec/v1/x"


def test_execute_passes_settings(session):
    executor = Executor(BASE_URL, session=session, timeout=5, verify_ssl=False)

    executor.execute("PUT", "/p", body={"a": 1})

    session.request.assert_called_once_with(
        "PUT", f"{BASE_URL}/p",
        headers={"Accept": "application/json"}, timeout=5, verify=False, json={"a": 1})


def test_execute_without_body(executor, session):
    executor.execute("GET", "/p")

    _, kwargs = session.request.call_args
    assert "json" not in kwargs
    assert kwargs["verify"] is True


def test_headers_sent_per_request(session):
    before = dict(session.headers)
    executor = Executor(BASE_URL, session=session, headers={"X-Trace": "1"})

    assert dict(session.headers) == before

    executor.execute("GET", "/p")
    _, kwargs = session.request.call_args
    assert kwargs["headers"] == {"Accept": "application/json", "X-Trace": "1"}


def test_cancel_before_send(executor, session):
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(CancelledError):
        executor.execute("GET", "/p", cancel_event=cancel)

    session.request.assert_not_called()


def test_transport_errors_propagate(executor, session):
    session.request.side_effect = requests.exceptions.SSLError("bad cert")

    with pytest.raises(requests.exceptions.SSLError):
        executor.execute("GET", "/p")


def test_close_only_owned_session(session):
    session.close = MagicMock()
    with Executor(BASE_URL, session=session):
        pass
    session.close.assert_not_called()

    with patch("appsec.session.requests.Session") as session_cls:
        with Executor(BASE_URL):
            pass
        session_cls.return_value.close.assert_called_once()


def test_insecure_warnings_silenced_when_not_verifying():
    with patch("appsec.session.disable_warnings") as mock_disable:
        Executor(BASE_URL, session=requests.Session(), verify_ssl=False)
        mock_disable.assert_called_once()

    with patch("appsec.session.disable_warnings") as mock_disable:
        Executor(BASE_URL, session=requests.Session())
        mock_disable.assert_not_called()
