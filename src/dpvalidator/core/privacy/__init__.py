"""Privacy definition and sensitivity spaces."""

from .privacy_definition import (
    Neighboring,
    PrivacyDefinition,
)
from .sensitivity_space import (
    Exponential,
    KNorm,
    SensitivitySpace,
)

__all__ = [
    "Neighboring",
    "PrivacyDefinition",
    "Exponential",
    "KNorm",
    "SensitivitySpace",
]
