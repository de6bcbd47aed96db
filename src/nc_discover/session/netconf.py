"""
NETCONF session backed by ncclient.

Wraps an ncclient Manager behind the BaseSession interface, turning
<rpc-error> replies into data and transport failures into
nc-discover exceptions.
"""

from __future__ import annotations

import logging
import socket
import time
from typing import Any

from nc_discover.core.config import NetconfCredentials
from nc_discover.core.exceptions import (
    NetconfAuthenticationError,
    NetconfConnectionError,
    NetconfTimeoutError,
    RetrievalError,
    SessionStateError,
)
from nc_discover.models.discovery import RpcErrorDetail
from nc_discover.session.base import BaseSession, RawResponse

logger = logging.getLogger(__name__)


def rpc_error_detail(error: Any) -> RpcErrorDetail:
    """
    Convert an ncclient RPCError into an RpcErrorDetail.

    Args:
        error: ncclient.operations.rpc.RPCError (or anything shaped like it)

    Returns:
        RpcErrorDetail with message, error-tag, error-info/path and severity
    """
    message = getattr(error, "message", None) or str(error)
    kind = getattr(error, "tag", None) or getattr(error, "type", None) or ""
    value = getattr(error, "info", None) or getattr(error, "path", None) or ""
    severity = getattr(error, "severity", None) or "error"
    return RpcErrorDetail(
        message=str(message).strip(),
        error_kind=str(kind).strip(),
        error_value=str(value).strip(),
        severity=str(severity).strip().lower(),
    )


class NetconfSession(BaseSession[NetconfCredentials]):
    """
    NETCONF session for operational state retrieval.

    Usage:
        with NetconfSession(hostname, credentials) as session:
            reply = session.query(filter_payload)

    Attributes:
        hostname: Device hostname or IP
        credentials: NETCONF credentials and timeouts
        device_params: ncclient device handler parameters
    """

    def __init__(
        self,
        hostname: str,
        credentials: NetconfCredentials,
        device_params: dict[str, str] | None = None,
        debug: bool = False,
    ):
        super().__init__(hostname, credentials, debug)
        self.device_params = device_params or {"name": "default"}
        self._manager: Any = None  # ncclient Manager
        self._capabilities: list[str] = []
        self._opened_at: float | None = None

        if debug:
            logging.getLogger("ncclient").setLevel(logging.DEBUG)

    @property
    def capabilities(self) -> list[str]:
        """Return server NETCONF capabilities in hello order."""
        return self._capabilities.copy()

    @property
    def session_id(self) -> str | None:
        """Return the NETCONF session id, if connected."""
        if self._manager is None:
            return None
        return str(getattr(self._manager, "session_id", None))

    def connect(self) -> None:
        """
        Establish NETCONF connection to the device.

        Raises:
            NetconfConnectionError: If connection fails
            NetconfAuthenticationError: If authentication fails
        """
        if self._connected:
            return

        from ncclient import manager
        from ncclient.operations import RaiseMode
        from ncclient.transport.errors import AuthenticationError, SSHError

        port = self.credentials.port
        logger.info(f"Connecting to {self.hostname}:{port}")

        try:
            self._manager = manager.connect(
                host=self.hostname,
                port=port,
                username=self.credentials.username,
                password=self.credentials.password.get_secret_value(),
                hostkey_verify=self.credentials.hostkey_verify,
                timeout=self.credentials.command_timeout,
                device_params=self.device_params,
                allow_agent=False,
                look_for_keys=False,
            )
        except AuthenticationError as e:
            raise NetconfAuthenticationError(self.hostname, port, self.credentials.username) from e
        except SSHError as e:
            raise NetconfConnectionError(self.hostname, port, f"SSH error: {e}") from e
        except socket.gaierror as e:
            raise NetconfConnectionError(self.hostname, port, f"DNS resolution failed: {e}") from e
        except TimeoutError as e:
            raise NetconfConnectionError(self.hostname, port, "Connection timed out") from e
        except Exception as e:
            raise NetconfConnectionError(self.hostname, port, str(e)) from e

        # rpc-errors are reported per query rather than raised
        self._manager.raise_mode = RaiseMode.NONE
        self._manager.timeout = self.credentials.command_timeout

        self._connected = True
        self._opened_at = time.monotonic()
        self._capabilities = list(self._manager.server_capabilities)
        logger.info(f"Connected to {self.hostname} - {len(self._capabilities)} capabilities")

    def disconnect(self) -> None:
        """Close NETCONF session."""
        if self._manager:
            try:
                self._manager.close_session()
                logger.info(f"Terminated connection to {self.hostname}")
            except Exception as e:
                logger.warning(f"Error closing session to {self.hostname}: {e}")
            finally:
                self._manager = None
                self._connected = False
                self._capabilities = []
                self._opened_at = None

    def query(self, filter_payload: str) -> RawResponse:
        """
        Execute NETCONF <get> with a subtree filter.

        Args:
            filter_payload: <filter type="subtree"> element as a string

        Returns:
            RawResponse with the reply XML and its rpc-errors

        Raises:
            SessionStateError: If the session is not connected
            NetconfTimeoutError: If the RPC or the session lifetime timed out
            RetrievalError: If the RPC failed at the transport level
        """
        if not self._connected:
            raise SessionStateError(self.hostname, "query")

        self._check_session_lifetime()

        from ncclient.operations.errors import TimeoutExpiredError

        logger.debug(f"Executing get RPC on {self.hostname} ({len(filter_payload)} byte filter)")

        try:
            reply = self._manager.get(filter=filter_payload)
        except TimeoutExpiredError as e:
            raise NetconfTimeoutError(
                f"get timed out after {self.credentials.command_timeout}s: {e}"
            ) from e
        except Exception as e:
            raise RetrievalError(f"get failed: {e}") from e

        errors = tuple(rpc_error_detail(err) for err in (getattr(reply, "errors", None) or []))
        if not errors and not getattr(reply, "ok", True):
            errors = (RpcErrorDetail(message="rpc-reply reported failure", severity="error"),)

        return RawResponse(xml=str(reply.xml), errors=errors)

    def _check_session_lifetime(self) -> None:
        """Raise NetconfTimeoutError once the session outlived session_timeout."""
        if self._opened_at is None:
            return
        elapsed = time.monotonic() - self._opened_at
        if elapsed > self.credentials.session_timeout:
            raise NetconfTimeoutError(
                f"Session to {self.hostname} exceeded {self.credentials.session_timeout}s "
                f"lifetime ({elapsed:.0f}s elapsed)"
            )
