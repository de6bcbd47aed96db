"""
Discovery orchestration.

Drives one discovery run against one device:

    connect -> negotiate -> retrieve each catalog subtree -> disconnect

A failed subtree query is counted and logged, then the run moves on to
the next subtree. Only a failure to connect ends a run early.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from nc_discover.core.config import NetconfCredentials
from nc_discover.core.exceptions import (
    ExtractionError,
    NetconfConnectionError,
    RetrievalError,
    SessionStateError,
)
from nc_discover.discovery.extractor import extract
from nc_discover.discovery.families import DeviceFamily, FamilyProfile, get_family
from nc_discover.discovery.filters import build_filter
from nc_discover.discovery.negotiator import negotiate
from nc_discover.models.discovery import (
    CompatibilityResult,
    DiscoveryError,
    DiscoveryReport,
    ErrorKind,
    ResultDocument,
    RpcErrorDetail,
)
from nc_discover.models.schema import Catalog, SchemaDescriptor
from nc_discover.session.base import BaseSession
from nc_discover.session.netconf import NetconfSession

logger = logging.getLogger(__name__)

# (hostname, credentials, device_params=..., debug=...) -> unconnected session
SessionFactory = Callable[..., BaseSession[Any]]


class Discoverer:
    """
    Runs catalog-driven state discovery for one device family.

    The instance holds configuration only; every run keeps its own
    documents and errors and returns them in its report, so one
    Discoverer can be reused for any number of devices.

    Attributes:
        profile: Family profile supplying negotiation rules and catalogs
        session_factory: Callable creating an unconnected session
        debug: Enable transport debug logging
    """

    def __init__(
        self,
        family: DeviceFamily | str = DeviceFamily.NOKIA,
        session_factory: SessionFactory | None = None,
        debug: bool = False,
    ):
        """
        Initialize the discoverer.

        Args:
            family: Device family tag
            session_factory: Session constructor (default: NetconfSession)
            debug: Enable transport debug logging

        Raises:
            ConfigurationError: If the family is unknown
        """
        self.profile: FamilyProfile = get_family(family)
        self.session_factory: SessionFactory = session_factory or NetconfSession
        self.debug = debug

    def run(self, hostname: str, credentials: NetconfCredentials) -> DiscoveryReport:
        """
        Discover the operational state of a device.

        Args:
            hostname: Device hostname or IP address
            credentials: NETCONF credentials and timeouts

        Returns:
            DiscoveryReport with documents in catalog order and every
            counted error
        """
        errors: list[DiscoveryError] = []

        session = self.session_factory(
            hostname,
            credentials,
            device_params=self.profile.device_params,
            debug=self.debug,
        )

        try:
            session.connect()
        except NetconfConnectionError as e:
            logger.error(f"{hostname} failed to connect: {e}")
            errors.append(DiscoveryError(kind=ErrorKind.CONNECTION, message=str(e)))
            return self._report(hostname, errors=errors)

        logger.info(f"Connected to {hostname}")
        try:
            compatibility = self.negotiate(hostname, session.capabilities, errors)
            catalog = self.profile.catalog_for(
                compatibility.major if compatibility.supported else None
            )
            documents = self.retrieve(hostname, session, catalog, errors)
        finally:
            session.disconnect()

        logger.info(f"{hostname} discovery complete, errorCount = {len(errors)}")
        return self._report(
            hostname,
            version=compatibility.version,
            catalog=catalog.name,
            documents=documents,
            errors=errors,
        )

    def negotiate(
        self,
        hostname: str,
        capabilities: list[str],
        errors: list[DiscoveryError],
    ) -> CompatibilityResult:
        """
        Check device capabilities, recording each mismatch in errors.

        An unsupported or unknown version is recorded but does not stop
        discovery; the default catalog is used as a best effort.
        """
        logger.debug(f"{hostname} advertised {len(capabilities)} capabilities")
        result = negotiate(capabilities, self.profile)
        expected = ", ".join(str(m) for m in self.profile.supported_majors)

        if result.version is None:
            message = f"{hostname} unknown OS version, expected major release {expected}"
            logger.error(message)
            errors.append(DiscoveryError(kind=ErrorKind.SCHEMA_VERSION_MISMATCH, message=message))
        elif not result.supported:
            message = (
                f"{hostname} is running incompatible OS version {result.version}, "
                f"expected major release {expected}"
            )
            logger.error(message)
            errors.append(DiscoveryError(kind=ErrorKind.SCHEMA_VERSION_MISMATCH, message=message))
        else:
            logger.info(f"{hostname} OS version {result.version}")

        required = dict(self.profile.required_capabilities)
        for mismatch in result.mismatches:
            message = (
                f"{hostname} is running incompatible {mismatch.value}, "
                f"expected {required[mismatch]}"
            )
            logger.error(message)
            errors.append(DiscoveryError(kind=ErrorKind.SCHEMA_VERSION_MISMATCH, message=message))

        return result

    def retrieve(
        self,
        hostname: str,
        session: BaseSession[Any],
        catalog: Catalog,
        errors: list[DiscoveryError],
    ) -> list[ResultDocument]:
        """
        Retrieve every catalog subtree, one <get> at a time.

        Failures are appended to errors and never stop the loop.

        Returns:
            Documents for the subtrees that were retrieved, in catalog order
        """
        documents: list[ResultDocument] = []
        total = len(catalog)
        logger.info(f"Retrieving {total} subtrees from {hostname} using catalog {catalog.name}")

        for index, descriptor in enumerate(catalog, start=1):
            logger.debug(f"[{index}/{total}] retrieving {descriptor.name} from {hostname}")
            document = self._retrieve_one(hostname, session, descriptor, errors)
            if document is not None:
                documents.append(document)

        return documents

    def _retrieve_one(
        self,
        hostname: str,
        session: BaseSession[Any],
        descriptor: SchemaDescriptor,
        errors: list[DiscoveryError],
    ) -> ResultDocument | None:
        payload = build_filter(descriptor, self.profile.state_namespace)

        try:
            response = session.query(payload)
        except (RetrievalError, SessionStateError) as e:
            details = e.details if isinstance(e, RetrievalError) else ()
            self._record_retrieval_error(hostname, descriptor, str(e), details, errors)
            return None

        if not response.ok:
            self._record_retrieval_error(
                hostname,
                descriptor,
                f"Failed to retrieve state for {descriptor.name} from {hostname}",
                response.errors,
                errors,
            )
            return None

        for detail in response.errors:
            logger.warning(f"{hostname} {descriptor.name}: device warning {detail}")

        try:
            content = extract(response.xml)
        except ExtractionError as e:
            logger.error(f"{hostname} could not parse {descriptor.name} state: {e}")
            errors.append(
                DiscoveryError(
                    kind=ErrorKind.EXTRACTION,
                    message=str(e),
                    element=descriptor.name,
                )
            )
            return None

        if content is None:
            logger.info(f"{hostname} returned empty state for {descriptor.name}")

        return ResultDocument(
            element=descriptor.element,
            namespace=descriptor.namespace,
            content=content,
        )

    @staticmethod
    def _record_retrieval_error(
        hostname: str,
        descriptor: SchemaDescriptor,
        message: str,
        details: tuple[RpcErrorDetail, ...],
        errors: list[DiscoveryError],
    ) -> None:
        for detail in details:
            logger.error(f"{hostname} {descriptor.name}: encountered error {detail}")
        logger.error(f"{hostname} failed to retrieve state schema for {descriptor.name}: {message}")
        errors.append(
            DiscoveryError(
                kind=ErrorKind.RETRIEVAL,
                message=message,
                element=descriptor.name,
                details=details,
            )
        )

    def _report(
        self,
        hostname: str,
        version: str | None = None,
        catalog: str | None = None,
        documents: list[ResultDocument] | None = None,
        errors: list[DiscoveryError] | None = None,
    ) -> DiscoveryReport:
        return DiscoveryReport(
            hostname=hostname,
            family=self.profile.family.value,
            version=version,
            catalog=catalog,
            documents=tuple(documents or ()),
            errors=tuple(errors or ()),
        )


def discover(
    hostname: str,
    credentials: NetconfCredentials,
    family: DeviceFamily | str = DeviceFamily.NOKIA,
    session_factory: SessionFactory | None = None,
    debug: bool = False,
) -> DiscoveryReport:
    """
    Run a single discovery against a device.

    Shortcut for Discoverer(family, session_factory, debug).run(hostname, credentials).
    """
    return Discoverer(family, session_factory, debug).run(hostname, credentials)
