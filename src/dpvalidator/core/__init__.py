"""Entry point for the core data model, privacy definition and utilities."""

from __future__ import annotations

from .errors import (
    AlreadyAggregatedError,
    CapabilityNotImplementedError,
    MissingArgumentError,
    PatchError,
    PropertyError,
    RegistryError,
    UnknownCategoriesError,
    UnsupportedNeighboringError,
    UnsupportedSensitivitySpaceError,
    UnsupportedShapeError,
    ValidatorError,
)
from .data import (
    AggregatorProperties,
    CategorySet,
    DataType,
    NatureCategorical,
    NatureContinuous,
    NodeProperties,
    Property,
    get_argument,
)
from .privacy import (
    Exponential,
    KNorm,
    Neighboring,
    PrivacyDefinition,
    SensitivitySpace,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__ = [
    "AlreadyAggregatedError",
    "CapabilityNotImplementedError",
    "MissingArgumentError",
    "PatchError",
    "PropertyError",
    "RegistryError",
    "UnknownCategoriesError",
    "UnsupportedNeighboringError",
    "UnsupportedSensitivitySpaceError",
    "UnsupportedShapeError",
    "ValidatorError",
    "AggregatorProperties",
    "CategorySet",
    "DataType",
    "NatureCategorical",
    "NatureContinuous",
    "NodeProperties",
    "Property",
    "get_argument",
    "Exponential",
    "KNorm",
    "Neighboring",
    "PrivacyDefinition",
    "SensitivitySpace",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
