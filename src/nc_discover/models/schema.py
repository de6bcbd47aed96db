"""
Schema catalog models.

A catalog is the ordered list of state subtrees queried, one <get>
per descriptor, to rebuild a device's operational state tree.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field


class SchemaDescriptor(BaseModel):
    """
    One subtree query in a catalog.

    Attributes:
        element: XML fragment placed inside the <state> wrapper of the filter
        namespace: Identifier of the subtree, reported with its document
    """

    model_config = ConfigDict(frozen=True)

    element: str = Field(min_length=1, description="Subtree filter element template")
    namespace: str = Field(min_length=1, description="Namespace identifier of the subtree")

    @property
    def name(self) -> str:
        """Return the last segment of the namespace (e.g. 'router')."""
        return self.namespace.rsplit(":", 1)[-1]


class Catalog(BaseModel):
    """
    Named, ordered collection of schema descriptors.

    Attributes:
        name: Catalog name (e.g. 'sros-2x')
        description: What the catalog covers
        descriptors: Descriptors in retrieval order
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    descriptors: tuple[SchemaDescriptor, ...] = ()

    def __iter__(self) -> Iterator[SchemaDescriptor]:  # type: ignore[override]
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    @property
    def names(self) -> list[str]:
        """Return descriptor names in catalog order."""
        return [d.name for d in self.descriptors]
