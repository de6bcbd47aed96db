"""
Abstract base class for management sessions.

Provides the interface the discovery orchestrator drives: connect,
read capabilities, issue subtree queries, disconnect.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from nc_discover.models.discovery import RpcErrorDetail

# Type variable for credential types
CredentialT = TypeVar("CredentialT")


class RawResponse(BaseModel):
    """
    Reply to a subtree query.

    Attributes:
        xml: Complete <rpc-reply> document
        errors: rpc-errors carried by the reply, warnings included
    """

    model_config = ConfigDict(frozen=True)

    xml: str = ""
    errors: tuple[RpcErrorDetail, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True if the reply carries no error-severity rpc-error."""
        return not any(e.is_error for e in self.errors)


class BaseSession(ABC, Generic[CredentialT]):
    """
    Abstract base class for management sessions.

    Implements the context manager protocol for automatic
    connection management. A session is a single ordered
    request/response channel: one query in flight at a time.

    Type Parameters:
        CredentialT: The credential type used by this session

    Attributes:
        hostname: Target device hostname or IP address
        credentials: Protocol-specific credentials
        debug: Enable debug output
    """

    def __init__(
        self,
        hostname: str,
        credentials: CredentialT,
        debug: bool = False,
    ):
        self.hostname = hostname
        self.credentials = credentials
        self.debug = debug
        self._connected: bool = False

    @property
    def connected(self) -> bool:
        """Return True if currently connected to the device."""
        return self._connected

    @property
    @abstractmethod
    def capabilities(self) -> list[str]:
        """Return capabilities advertised by the device, in hello order."""

    @abstractmethod
    def connect(self) -> None:
        """
        Establish the session.

        Raises:
            NetconfConnectionError: If connection fails
            NetconfAuthenticationError: If authentication fails
        """

    @abstractmethod
    def disconnect(self) -> None:
        """Close the session. Safe to call when not connected."""

    @abstractmethod
    def query(self, filter_payload: str) -> RawResponse:
        """
        Issue a <get> with the given subtree filter.

        Args:
            filter_payload: Complete <filter> element as a string

        Returns:
            Reply document and any rpc-errors it carried

        Raises:
            RetrievalError: If the RPC could not be completed
        """

    def __enter__(self) -> BaseSession[CredentialT]:
        """Enter context manager - connect to device."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> bool:
        """Exit context manager - disconnect from device."""
        self.disconnect()
        return False
