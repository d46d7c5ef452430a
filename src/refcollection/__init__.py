"""
refcollection - Reference collection kinds for the data-curation platform.

This package resolves user-supplied names into one of the three kinds of
reference collection (schema, mapping table, dataset) and models references
to entities stored in them.
"""

__version__ = "0.1.0"

from refcollection.enums import CollectionKind
from refcollection.errors import InvalidCollectionKindError
from refcollection.models import EntityReference
from refcollection.resolver import (
    InvalidCollectionKind,
    ResolveResult,
    is_collection_kind,
    resolve,
    resolve_or_raise,
)

__all__ = [
    # Kinds
    "CollectionKind",
    # Resolution
    "resolve",
    "resolve_or_raise",
    "is_collection_kind",
    "ResolveResult",
    "InvalidCollectionKind",
    "InvalidCollectionKindError",
    # Models
    "EntityReference",
]
