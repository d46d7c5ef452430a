"""
Resolution of free-form strings into collection kinds.

`resolve` returns either the matching CollectionKind or an
InvalidCollectionKind describing the rejected input, so callers have to
inspect the outcome. `resolve_or_raise` is the raising variant for callers
that prefer exceptions.

Matching compares the whole input against each member name, folding case
one character at a time without any locale. Surrounding whitespace is not
stripped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Union

from refcollection.enums import CollectionKind
from refcollection.errors import UNSUPPORTED_MESSAGE, InvalidCollectionKindError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvalidCollectionKind:
    """
    Outcome of resolving a value that names no collection kind.

    Attributes:
        value: The rejected input, verbatim
    """

    value: Any

    @property
    def message(self) -> str:
        """Diagnostic message naming the rejected input."""
        return UNSUPPORTED_MESSAGE.format(value=self.value)

    def to_error(self) -> InvalidCollectionKindError:
        """Build the exception equivalent of this outcome."""
        return InvalidCollectionKindError(self.value)


ResolveResult = Union[CollectionKind, InvalidCollectionKind]


def resolve(value: Any) -> ResolveResult:
    """
    Resolve a string to a collection kind, ignoring case.

    Args:
        value: Candidate kind name, e.g. "dataset" or "Mapping_Table".
            Values that are not str (such as None) never match.

    Returns:
        The matching CollectionKind, or InvalidCollectionKind carrying
        the input when nothing matches

    Example:
        >>> resolve("Mapping_Table")
        <CollectionKind.MAPPING_TABLE: 'mapping_table'>
        >>> resolve("schemaa")
        InvalidCollectionKind(value='schemaa')
    """
    kind = CollectionKind.lookup(value)
    if kind is not None:
        return kind

    logger.debug(f"Unsupported reference collection name: {value!r}")
    return InvalidCollectionKind(value)


def resolve_or_raise(value: Any) -> CollectionKind:
    """
    Resolve a string to a collection kind, raising on no match.

    Args:
        value: Candidate kind name

    Returns:
        The matching CollectionKind

    Raises:
        InvalidCollectionKindError: If the value names no collection kind
    """
    result = resolve(value)
    if isinstance(result, InvalidCollectionKind):
        raise result.to_error()
    return result


def is_collection_kind(value: Any) -> bool:
    """Check whether a value names a collection kind."""
    return isinstance(resolve(value), CollectionKind)
