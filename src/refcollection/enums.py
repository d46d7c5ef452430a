"""
Enums for reference collections.

A reference collection is one of the three kinds of curated entity the
platform stores: schemas, mapping tables and datasets.
"""

from enum import Enum
from typing import Any, Callable, Optional

from refcollection.errors import InvalidCollectionKindError


class CollectionKind(str, Enum):
    """
    Kinds of reference collection.

    The value of each member is the base name of its storage collection.

    Attributes:
        SCHEMA: Schemas describing the structure of a dataset
        MAPPING_TABLE: Mapping tables used by conformance rules
        DATASET: Datasets registered for standardization and conformance
    """

    SCHEMA = "schema"
    MAPPING_TABLE = "mapping_table"
    DATASET = "dataset"

    @property
    def route(self) -> str:
        """UI route name of the listing view for this kind."""
        return _ROUTES[self]

    @property
    def label(self) -> str:
        """Human-readable name."""
        return _LABELS[self]

    @classmethod
    def names(cls) -> list[str]:
        """Canonical member names in declaration order."""
        return [member.name for member in cls]

    @classmethod
    def lookup(cls, value: Any) -> Optional["CollectionKind"]:
        """
        Find the kind whose member name equals value, ignoring case.

        Args:
            value: Candidate name (e.g. "schema", "Mapping_Table")

        Returns:
            The matching CollectionKind, or None for no match or a non-str value
        """
        if not isinstance(value, str):
            return None
        for member in cls:
            if equals_ignore_case(member.name, value):
                return member
        return None

    @classmethod
    def by_value_ignore_case(cls, value: str) -> "CollectionKind":
        """
        Look up a kind by member name, ignoring case.

        Args:
            value: Name of the kind (e.g. "schema", "Mapping_Table")

        Returns:
            The matching CollectionKind

        Raises:
            InvalidCollectionKindError: If no member name matches
        """
        kind = cls.lookup(value)
        if kind is None:
            raise InvalidCollectionKindError(value)
        return kind


# Single-character mappings for letters whose full mapping is longer
_SIMPLE_CASE = {
    "İ": "i",  # LATIN CAPITAL LETTER I WITH DOT ABOVE
}


def _fold_char(char: str, fold: Callable[[str], str]) -> str:
    # Keep characters whose case mapping is not a single character ("ß" -> "SS")
    folded = fold(char)
    if len(folded) == 1:
        return folded
    if fold is str.lower:
        return _SIMPLE_CASE.get(char, char)
    return char


def equals_ignore_case(left: str, right: str) -> bool:
    """
    Compare two strings ignoring case, one character at a time.

    Characters match when equal, equal once upper-cased, or equal once
    upper-cased and then lower-cased. No locale is applied, so letters such
    as "ſ" (long s) or "ı" (dotless i) match their ASCII counterparts.
    """
    if len(left) != len(right):
        return False
    for a, b in zip(left, right):
        if a == b:
            continue
        upper_a = _fold_char(a, str.upper)
        upper_b = _fold_char(b, str.upper)
        if upper_a == upper_b:
            continue
        if _fold_char(upper_a, str.lower) != _fold_char(upper_b, str.lower):
            return False
    return True


_ROUTES = {
    CollectionKind.SCHEMA: "schemas",
    CollectionKind.MAPPING_TABLE: "mappingTables",
    CollectionKind.DATASET: "datasets",
}

_LABELS = {
    CollectionKind.SCHEMA: "Schema",
    CollectionKind.MAPPING_TABLE: "Mapping Table",
    CollectionKind.DATASET: "Dataset",
}
