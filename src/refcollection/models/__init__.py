"""
Pydantic models built on the reference collection kinds.
"""

from refcollection.enums import CollectionKind
from refcollection.models.reference import EntityReference

__all__ = [
    "CollectionKind",
    "EntityReference",
]
