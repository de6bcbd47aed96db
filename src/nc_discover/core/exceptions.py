"""
Exception hierarchy for nc-discover.

All exceptions inherit from NcDiscoverError for unified error handling.
Specific exceptions provide detailed context for debugging.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from nc_discover.models.discovery import RpcErrorDetail


class NcDiscoverError(Exception):
    """
    Base exception for all nc-discover errors.

    All custom exceptions inherit from this class, allowing callers
    to catch all nc-discover errors with a single except clause.

    Attributes:
        message: Human-readable error description
        context: Optional dictionary with additional error context
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(NcDiscoverError):
    """
    Error in configuration parsing or validation.

    Raised when:
    - YAML config file is malformed
    - Field values fail validation
    - An unknown device family or catalog is requested
    """

    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Configuration file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Configuration file not found: {path}", context={"path": path})


# =============================================================================
# NETCONF Errors
# =============================================================================


class NetconfError(NcDiscoverError):
    """Base class for NETCONF-related errors."""

    pass


class NetconfConnectionError(NetconfError):
    """Failed to establish NETCONF connection. Fatal for a discovery run."""

    def __init__(self, hostname: str, port: int, reason: str):
        super().__init__(
            f"Failed to connect to {hostname}:{port}: {reason}",
            context={"hostname": hostname, "port": port},
        )
        self.hostname = hostname
        self.port = port
        self.reason = reason


class NetconfAuthenticationError(NetconfConnectionError):
    """NETCONF authentication failed."""

    def __init__(self, hostname: str, port: int, username: str):
        super().__init__(hostname, port, f"authentication failed for {username}")
        self.username = username


class SessionStateError(NetconfError):
    """Operation attempted on a session that is not open."""

    def __init__(self, hostname: str, operation: str):
        super().__init__(
            f"Cannot {operation}: not connected to {hostname}",
            context={"hostname": hostname, "operation": operation},
        )
        self.hostname = hostname
        self.operation = operation


class RetrievalError(NetconfError):
    """
    A subtree query failed at the protocol level.

    Attributes:
        element: Catalog element being retrieved, when known
        details: rpc-error triples reported by the device
    """

    def __init__(
        self,
        message: str,
        element: str | None = None,
        details: tuple[RpcErrorDetail, ...] = (),
    ):
        super().__init__(message, context={"element": element} if element else None)
        self.element = element
        self.details = details


class NetconfTimeoutError(RetrievalError):
    """NETCONF operation or session lifetime timed out."""

    pass


# =============================================================================
# Data Parsing Errors
# =============================================================================


class ParsingError(NcDiscoverError):
    """Base class for data parsing errors."""

    pass


class ExtractionError(ParsingError):
    """Reply document could not be parsed or queried."""

    def __init__(self, message: str, xpath: str | None = None):
        super().__init__(message, context={"xpath": xpath} if xpath else None)
        self.xpath = xpath
