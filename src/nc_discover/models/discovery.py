"""
Discovery models for NETCONF state retrieval.

These models represent the results of one discovery run: the
retrieved documents, negotiation outcome, and every counted error.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Category of an error counted during a discovery run."""

    CONNECTION = "connection"
    SCHEMA_VERSION_MISMATCH = "schema-version-mismatch"
    RETRIEVAL = "retrieval"
    EXTRACTION = "extraction"


class MismatchKind(str, Enum):
    """Capability check that a device failed during negotiation."""

    CONFIG_SCHEMA_REVISION = "config-schema-revision"
    STATE_SCHEMA_REVISION = "state-schema-revision"


class RpcErrorDetail(BaseModel):
    """
    One <rpc-error> reported by the device.

    Attributes:
        message: error-message text
        error_kind: error-tag (e.g. 'operation-failed')
        error_value: error-info or error-path content
        severity: error-severity, 'error' or 'warning'
    """

    model_config = ConfigDict(frozen=True)

    message: str = ""
    error_kind: str = ""
    error_value: str = ""
    severity: str = "error"

    @property
    def is_error(self) -> bool:
        """Return True unless the device flagged this as a warning."""
        return self.severity != "warning"

    def __str__(self) -> str:
        return f'"{self.message}", {self.error_kind} = "{self.error_value}"'


class CompatibilityResult(BaseModel):
    """
    Outcome of checking a device's capabilities.

    Attributes:
        version: Version capability selected from the hello, if any
        major: Major release parsed from the version
        supported: True if the major release is in the allow-list
        mismatches: Required schema revisions missing from the capabilities
    """

    model_config = ConfigDict(frozen=True)

    version: str | None = None
    major: int | None = None
    supported: bool = False
    mismatches: tuple[MismatchKind, ...] = ()


class ResultDocument(BaseModel):
    """
    One retrieved state subtree.

    Attributes:
        element: Element template of the descriptor that was queried
        namespace: Namespace identifier of the descriptor
        content: Serialized <state> subtree, None if the reply carried none
    """

    model_config = ConfigDict(frozen=True)

    element: str
    namespace: str
    content: str | None = None

    @property
    def name(self) -> str:
        """Return the last segment of the namespace."""
        return self.namespace.rsplit(":", 1)[-1]

    @property
    def empty(self) -> bool:
        """Return True if the device returned no state for this subtree."""
        return self.content is None


class DiscoveryError(BaseModel):
    """
    One counted error of a discovery run.

    Attributes:
        kind: Error category
        message: Human-readable description
        element: Name of the catalog element involved, if any
        details: rpc-error triples reported by the device
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    element: str | None = None
    details: tuple[RpcErrorDetail, ...] = ()


class DiscoveryReport(BaseModel):
    """
    Aggregate result of one discovery run.

    Attributes:
        hostname: Device that was discovered
        family: Device family tag used for the run
        version: Version capability selected during negotiation
        catalog: Name of the catalog that was walked
        documents: Retrieved documents in catalog order
        errors: Every error counted during the run
    """

    model_config = ConfigDict(frozen=True)

    hostname: str
    family: str
    version: str | None = None
    catalog: str | None = None
    documents: tuple[ResultDocument, ...] = ()
    errors: tuple[DiscoveryError, ...] = Field(default=())

    @property
    def error_count(self) -> int:
        """Return the number of errors counted during the run."""
        return len(self.errors)

    @property
    def connected(self) -> bool:
        """Return False if the run aborted while connecting."""
        return not any(e.kind is ErrorKind.CONNECTION for e in self.errors)

    def errors_of(self, kind: ErrorKind) -> list[DiscoveryError]:
        """Return errors of the given kind, in the order they occurred."""
        return [e for e in self.errors if e.kind is kind]
