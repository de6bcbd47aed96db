"""
Pytest fixtures shared across nc-discover tests.
"""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import SecretStr

from nc_discover.constants import Namespaces, SrosCapabilities
from nc_discover.core.config import NetconfCredentials, reset_settings
from nc_discover.core.exceptions import NetconfConnectionError
from nc_discover.session.base import BaseSession, RawResponse


def make_reply(inner: str = "<system><name>r1</name></system>", with_state: bool = True) -> str:
    """Build a <get> rpc-reply, optionally carrying a <state> subtree."""
    state = f'<state xmlns="{Namespaces.SROS_STATE}">{inner}</state>' if with_state else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<rpc-reply xmlns="{Namespaces.NETCONF_BASE}" message-id="urn:uuid:1">'
        f"<data>{state}</data>"
        "</rpc-reply>"
    )


class FakeSession(BaseSession[NetconfCredentials]):
    """In-memory session replaying canned replies by call index."""

    def __init__(
        self,
        hostname: str,
        credentials: NetconfCredentials,
        device_params: dict[str, str] | None = None,
        debug: bool = False,
        capabilities: list[str] | None = None,
        replies: dict[int, RawResponse | Exception] | None = None,
        connect_error: Exception | None = None,
    ):
        super().__init__(hostname, credentials, debug)
        self.device_params = device_params
        self._capabilities = capabilities or []
        self.replies = replies or {}
        self.connect_error = connect_error
        self.queries: list[str] = []
        self.connect_calls = 0
        self.disconnect_calls = 0

    @property
    def capabilities(self) -> list[str]:
        return list(self._capabilities)

    def connect(self) -> None:
        self.connect_calls += 1
        if self.connect_error is not None:
            raise self.connect_error
        self._connected = True

    def disconnect(self) -> None:
        self.disconnect_calls += 1
        self._connected = False

    def query(self, filter_payload: str) -> RawResponse:
        index = len(self.queries)
        self.queries.append(filter_payload)
        reply = self.replies.get(index)
        if isinstance(reply, Exception):
            raise reply
        return reply or RawResponse(xml=make_reply())


class FakeSessionFactory:
    """Session factory recording every session it creates."""

    def __init__(self, **session_kwargs: Any):
        self.session_kwargs = session_kwargs
        self.sessions: list[FakeSession] = []

    def __call__(self, hostname: str, credentials: NetconfCredentials, **kwargs: Any) -> FakeSession:
        session = FakeSession(hostname, credentials, **kwargs, **self.session_kwargs)
        self.sessions.append(session)
        return session

    @property
    def session(self) -> FakeSession:
        return self.sessions[-1]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from NCD_/NETCONF_ environment and cached settings."""
    for var in ("NETCONF_USER", "NETCONF_PASS", "NCD_DEBUG", "NCD_PORT", "NCD_DEFAULT_FAMILY"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def credentials() -> NetconfCredentials:
    """Sample NETCONF credentials."""
    return NetconfCredentials(username="admin", password=SecretStr("admin"))


@pytest.fixture
def supported_capabilities() -> list[str]:
    """Capabilities of an SR OS 21 device with the expected schema revisions."""
    return [
        "urn:ietf:params:netconf:base:1.0",
        "urn:ietf:params:netconf:base:1.1",
        SrosCapabilities.OS_VERSION_21,
        SrosCapabilities.CONF_2019_12_03,
        SrosCapabilities.STATE_2019_12_03,
    ]


@pytest.fixture
def reply_factory():
    """Return the make_reply helper."""
    return make_reply


@pytest.fixture
def session_factory(supported_capabilities: list[str]) -> FakeSessionFactory:
    """Factory for sessions to a supported device where every query succeeds."""
    return FakeSessionFactory(capabilities=supported_capabilities)


@pytest.fixture
def make_session_factory(supported_capabilities: list[str]):
    """Build a FakeSessionFactory with custom replies, capabilities or connect error."""

    def _make(**kwargs: Any) -> FakeSessionFactory:
        kwargs.setdefault("capabilities", supported_capabilities)
        return FakeSessionFactory(**kwargs)

    return _make


@pytest.fixture
def connect_failure() -> NetconfConnectionError:
    """Connection error raised by an unreachable device."""
    return NetconfConnectionError("router1", 830, "SSH error: Connection refused")
