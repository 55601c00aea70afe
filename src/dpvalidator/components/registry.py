"""
Registry mapping ComponentKind to node-kind implementations, plus dispatch.

Responsibilities
  - Provide a single source of truth for the node kinds of this build.
  - Check at import time that every declared kind is registered and
    implements property propagation.
  - Route each capability call to the node kind's implementation, failing
    with the kind and capability named when it is not implemented.

Usage Context
  - Called by the graph walker once per node and capability.

Limitations
  - Accuracy conversion and reporting are optional: unsupported kinds
    yield ``None`` instead of an error.
"""
# 说明：维护 ComponentKind 与节点类型实现类映射关系的注册表，并提供逐能力的分发函数。
# 职责：
# - 作为节点类型查找的单一事实来源，并在导入时进行完整性检查
# - 将属性传播 / 列名 / 图扩展 / 敏感度调用分发到具体节点类型，不支持时显式报错
# - 准确度换算与报告为可选能力，不支持时返回 None 而不中断整图分析

from __future__ import annotations

import enum
from typing import Any, Dict, List, Mapping, Optional, Type

import numpy as np

from dpvalidator.core.data.properties import NodeProperties, Property
from dpvalidator.core.errors import CapabilityNotImplementedError, RegistryError
from dpvalidator.core.privacy.privacy_definition import PrivacyDefinition
from dpvalidator.core.privacy.sensitivity_space import SensitivitySpace
from dpvalidator.core.utils.config import get_config
from dpvalidator.core.utils.logging import get_logger
from dpvalidator.core.utils.param_validation import ParamValidationError
from dpvalidator.graph.component import Component, ComputationGraphPatch, ReleaseNode

from .base import (
    Accuracy,
    AccuracyConvertible,
    Aggregator,
    Expandable,
    PrivacyUsage,
    Propagatable,
    Reportable,
)
from .count import Count
from .literal import Literal

logger = get_logger(__name__)


class ComponentKind(enum.Enum):
    """Node kinds known to this build."""

    COUNT = "count"
    LITERAL = "literal"

    @classmethod
    def from_str(cls, name: str) -> "ComponentKind":
        try:
            return cls(name.lower().replace(" ", "_"))
        except ValueError as exc:
            raise ParamValidationError(f"unknown component kind '{name}'") from exc


# 集中维护 ComponentKind 到具体节点类型实现类的映射表
COMPONENT_REGISTRY: Dict[ComponentKind, Type] = {
    ComponentKind.COUNT: Count,
    ComponentKind.LITERAL: Literal,
}

CAPABILITIES: Dict[str, Type] = {
    "propagate_property": Propagatable,
    "expand_component": Expandable,
    "compute_sensitivity": Aggregator,
    "accuracy": AccuracyConvertible,
    "summarize": Reportable,
}


def ensure_registry_complete(registry: Optional[Mapping[ComponentKind, Type]] = None) -> None:
    """Raise RegistryError unless every kind is registered and can propagate properties."""
    registry = COMPONENT_REGISTRY if registry is None else registry
    missing = [kind.value for kind in ComponentKind if kind not in registry]
    if missing:
        raise RegistryError(f"component kinds without implementation: {', '.join(missing)}")
    for kind, cls in registry.items():
        if not issubclass(cls, Propagatable):
            raise RegistryError(f"component '{kind.value}' does not implement propagate_property")


def normalize_kind(kind: "str | ComponentKind") -> ComponentKind:
    if isinstance(kind, ComponentKind):
        return kind
    return ComponentKind.from_str(str(kind))


def get_component_class(kind: "str | ComponentKind") -> Type:
    component_kind = normalize_kind(kind)
    if component_kind not in COMPONENT_REGISTRY:
        raise RegistryError(f"component '{component_kind.value}' not registered")
    return COMPONENT_REGISTRY[component_kind]


def kind_of(variant: Any) -> str:
    """Registry identifier of a node-kind instance, or its class name when unregistered."""
    for kind, cls in COMPONENT_REGISTRY.items():
        if type(variant) is cls:
            return kind.value
    return type(variant).__name__


def supports(variant: Any, capability: str) -> bool:
    try:
        interface = CAPABILITIES[capability]
    except KeyError as exc:
        raise ParamValidationError(f"unknown capability '{capability}'") from exc
    return isinstance(variant, interface)


def _require(variant: Any, capability: str) -> None:
    if not supports(variant, capability):
        raise CapabilityNotImplementedError(kind_of(variant), capability)


def propagate_property(
    variant: Any,
    privacy_definition: PrivacyDefinition,
    public_arguments: Mapping[str, Any],
    properties: NodeProperties,
) -> Property:
    _require(variant, "propagate_property")
    logger.debug("propagate_property: %s", kind_of(variant))
    return variant.propagate_property(privacy_definition, public_arguments, properties)


def get_names(variant: Any, properties: NodeProperties) -> List[str]:
    if not supports(variant, "propagate_property"):
        raise CapabilityNotImplementedError(kind_of(variant), "get_names")
    return variant.get_names(properties)


def expand_component(
    privacy_definition: PrivacyDefinition,
    component: Component,
    properties: NodeProperties,
    component_id: int,
    maximum_id: int,
) -> ComputationGraphPatch:
    variant = component.variant
    _require(variant, "expand_component")
    logger.debug("expand_component: %s at id %s (maximum id %s)", kind_of(variant), component_id, maximum_id)
    return variant.expand_component(privacy_definition, component, properties, component_id, maximum_id)


def compute_sensitivity(
    variant: Any,
    privacy_definition: PrivacyDefinition,
    properties: NodeProperties,
    sensitivity_space: SensitivitySpace,
) -> np.ndarray:
    _require(variant, "compute_sensitivity")
    logger.debug("compute_sensitivity: %s in %s", kind_of(variant), type(sensitivity_space).__name__)
    return variant.compute_sensitivity(privacy_definition, properties, sensitivity_space)


def accuracy_to_privacy_usage(
    variant: Any,
    privacy_definition: PrivacyDefinition,
    properties: NodeProperties,
    accuracy: Accuracy,
) -> Optional[PrivacyUsage]:
    if not supports(variant, "accuracy"):
        return None
    return variant.accuracy_to_privacy_usage(privacy_definition, properties, accuracy)


def privacy_usage_to_accuracy(
    variant: Any,
    privacy_definition: PrivacyDefinition,
    properties: NodeProperties,
    alpha: float,
) -> Optional[float]:
    if not supports(variant, "accuracy"):
        return None
    return variant.privacy_usage_to_accuracy(privacy_definition, properties, alpha)


def summarize(
    node_id: int,
    component: Component,
    properties: NodeProperties,
    release: ReleaseNode,
) -> Optional[List[Dict[str, Any]]]:
    variant = component.variant
    if not supports(variant, "summarize"):
        return None
    return variant.summarize(node_id, component, properties, release)


def registered_components_snapshot() -> Dict[str, Dict[str, bool]]:
    """Capabilities implemented by each registered kind, for tooling or docs."""
    return {
        kind.value: {name: issubclass(cls, interface) for name, interface in CAPABILITIES.items()}
        for kind, cls in COMPONENT_REGISTRY.items()
    }


if get_config().strict_validation:
    ensure_registry_complete()
