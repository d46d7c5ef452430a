"""
Entity reference model.

Points at a single entity (optionally a single version of it) inside one of
the reference collections, e.g. the schema a dataset is built on or a
mapping table used by a conformance rule.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from refcollection.enums import CollectionKind
from refcollection.resolver import InvalidCollectionKind, resolve


class EntityReference(BaseModel):
    """
    Reference to a named entity in a reference collection.

    The collection accepts a CollectionKind or any string naming one,
    ignoring case.

    Attributes:
        collection: Kind of collection the entity lives in
        name: Entity name
        version: Entity version (optional, latest when omitted)
    """

    model_config = ConfigDict(
        # Strip whitespace around names
        str_strip_whitespace=True,
        frozen=True,
    )

    collection: CollectionKind = Field(
        ...,
        description="Kind of reference collection",
    )

    name: str = Field(
        ...,
        description="Entity name",
        min_length=1,
    )

    version: Optional[int] = Field(
        default=None,
        description="Entity version, latest when omitted",
        ge=1,
    )

    @field_validator("collection", mode="before")
    @classmethod
    def resolve_collection(cls, v: Any) -> Any:
        """Resolve collection names case-insensitively."""
        if isinstance(v, CollectionKind) or not isinstance(v, str):
            return v
        result = resolve(v)
        if isinstance(result, InvalidCollectionKind):
            raise ValueError(result.message)
        return result

    @classmethod
    def from_path(cls, path: str) -> "EntityReference":
        """
        Parse a reference from "<collection>/<name>[/<version>]".

        Args:
            path: Reference path, e.g. "dataset/Customers/3"

        Returns:
            EntityReference for the path

        Raises:
            ValueError: If the path does not have two or three segments
            pydantic.ValidationError: If a segment is invalid
        """
        parts = path.split("/")
        if len(parts) not in (2, 3):
            raise ValueError(
                f"Invalid reference path '{path}': expected <collection>/<name>[/<version>]"
            )

        data: dict[str, Any] = {"collection": parts[0], "name": parts[1]}
        if len(parts) == 3:
            data["version"] = parts[2]
        return cls(**data)

    @property
    def path(self) -> str:
        """Reference path, the inverse of from_path."""
        path = f"{self.collection.value}/{self.name}"
        if self.version is not None:
            path += f"/{self.version}"
        return path

    @property
    def route(self) -> str:
        """UI route name of the referenced collection."""
        return self.collection.route

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(mode="json", exclude_none=True)
