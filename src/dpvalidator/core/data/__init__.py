"""Data model for the static properties attached to graph edges."""

from .values import (
    DataType,
    CategorySet,
)
from .properties import (
    AggregatorProperties,
    Nature,
    NatureCategorical,
    NatureContinuous,
    NodeProperties,
    Property,
    get_argument,
)

__all__ = [
    "DataType",
    "CategorySet",
    "AggregatorProperties",
    "Nature",
    "NatureCategorical",
    "NatureContinuous",
    "NodeProperties",
    "Property",
    "get_argument",
]
