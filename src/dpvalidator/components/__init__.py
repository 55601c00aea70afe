"""Per-node analysis capabilities, node kinds and capability dispatch."""

from .base import (
    Accuracy,
    AccuracyConvertible,
    Aggregator,
    Expandable,
    PrivacyUsage,
    Propagatable,
    ReleaseRecord,
    Reportable,
)
from .count import Count, count_sensitivity
from .literal import Literal, get_literal
from .registry import (
    COMPONENT_REGISTRY,
    ComponentKind,
    accuracy_to_privacy_usage,
    compute_sensitivity,
    ensure_registry_complete,
    expand_component,
    get_component_class,
    get_names,
    kind_of,
    normalize_kind,
    privacy_usage_to_accuracy,
    propagate_property,
    registered_components_snapshot,
    summarize,
    supports,
)

__all__ = [
    "Accuracy",
    "AccuracyConvertible",
    "Aggregator",
    "Expandable",
    "PrivacyUsage",
    "Propagatable",
    "ReleaseRecord",
    "Reportable",
    "Count",
    "count_sensitivity",
    "Literal",
    "get_literal",
    "COMPONENT_REGISTRY",
    "ComponentKind",
    "accuracy_to_privacy_usage",
    "compute_sensitivity",
    "ensure_registry_complete",
    "expand_component",
    "get_component_class",
    "get_names",
    "kind_of",
    "normalize_kind",
    "privacy_usage_to_accuracy",
    "propagate_property",
    "registered_components_snapshot",
    "summarize",
    "supports",
]
