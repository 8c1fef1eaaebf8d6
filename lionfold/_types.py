"""lionfold type definitions."""

from .protocols._concepts import (
    BinaryFunction,
    Collection,
    UnaryFunction,
    UnaryPredicate,
)
from .protocols.contracts import CollectionProto, Serializable

__all__ = (
    "BinaryFunction",
    "Collection",
    "CollectionProto",
    "Serializable",
    "UnaryFunction",
    "UnaryPredicate",
)
