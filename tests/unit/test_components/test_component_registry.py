"""
Unit tests for the component registry and capability dispatch.
"""
# 说明：节点类型注册表与逐能力分发函数的单元测试。
# 覆盖：
# - 注册表完整性检查：缺少实现或未实现属性传播时抛出 RegistryError
# - 名称归一化与类查找
# - 未实现的能力在分发时抛出同时携带类型名与能力名的 CapabilityNotImplementedError
# - 准确度换算与报告为可选能力，不支持时返回 None

import numpy as np
import pytest

from dpvalidator.components import (
    COMPONENT_REGISTRY,
    Accuracy,
    ComponentKind,
    Count,
    Literal,
    ReleaseRecord,
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
from dpvalidator.core.data import CategorySet, DataType, Property
from dpvalidator.core.errors import CapabilityNotImplementedError, RegistryError
from dpvalidator.core.privacy import KNorm, PrivacyDefinition
from dpvalidator.core.utils import ParamValidationError
from dpvalidator.graph import Component, ReleaseNode

DEFINITION = PrivacyDefinition()


class Unregistered:
    """Node kind that implements no capability."""


def test_registry_is_complete() -> None:
    ensure_registry_complete()
    assert COMPONENT_REGISTRY[ComponentKind.COUNT] is Count


def test_registry_missing_kind_is_reported() -> None:
    with pytest.raises(RegistryError, match="literal"):
        ensure_registry_complete({ComponentKind.COUNT: Count})


def test_registry_kind_without_propagation_is_reported() -> None:
    with pytest.raises(RegistryError, match="propagate_property"):
        ensure_registry_complete({ComponentKind.COUNT: Count, ComponentKind.LITERAL: Unregistered})


def test_normalize_and_lookup() -> None:
    assert normalize_kind("Count") is ComponentKind.COUNT
    assert get_component_class("literal") is Literal
    with pytest.raises(ParamValidationError):
        normalize_kind("histogram")


def test_supports_reflects_interfaces() -> None:
    assert supports(Count(), "compute_sensitivity")
    assert not supports(Literal(value=[1]), "expand_component")
    with pytest.raises(ParamValidationError):
        supports(Count(), "teleport")


def test_dispatch_routes_to_implementation() -> None:
    data = Property(data_type=DataType.STR, num_columns=1, categories=CategorySet.from_columns([["a", "b"]]))
    prop = propagate_property(Count(), DEFINITION, {}, {"data": data})
    assert prop.num_records == 2
    sensitivity = compute_sensitivity(Count(), DEFINITION, {"data": data}, KNorm(1))
    assert sensitivity.shape == (2, 1)
    patch = expand_component(DEFINITION, Component(variant=Count(), arguments={"data": 1}), {"data": data}, 2, 2)
    assert patch.new_ids(2) == [3]


def test_missing_capability_names_kind_and_capability() -> None:
    with pytest.raises(CapabilityNotImplementedError) as info:
        compute_sensitivity(Literal(value=[1]), DEFINITION, {}, KNorm(1))
    assert info.value.kind == "literal"
    assert info.value.capability == "compute_sensitivity"

    with pytest.raises(CapabilityNotImplementedError, match="expand_component"):
        expand_component(DEFINITION, Component(variant=Literal(value=[1])), {}, 1, 1)

    with pytest.raises(CapabilityNotImplementedError, match="Unregistered"):
        propagate_property(Unregistered(), DEFINITION, {}, {})

    with pytest.raises(CapabilityNotImplementedError, match="get_names"):
        get_names(Unregistered(), {})


def test_optional_capabilities_return_none() -> None:
    assert accuracy_to_privacy_usage(Count(), DEFINITION, {}, Accuracy(value=1.0, alpha=0.05)) is None
    assert privacy_usage_to_accuracy(Count(), DEFINITION, {}, 0.05) is None
    release = ReleaseNode(value=np.array([3]))
    assert summarize(1, Component(variant=Count()), {}, release) is None


def test_kind_of_and_snapshot() -> None:
    assert kind_of(Count()) == "count"
    assert kind_of(Unregistered()) == "Unregistered"
    snapshot = registered_components_snapshot()
    assert snapshot["count"]["expand_component"] is True
    assert snapshot["literal"]["compute_sensitivity"] is False
    assert snapshot["count"]["accuracy"] is False


def test_release_record_serialises_without_modification() -> None:
    data = Property(data_type=DataType.STR, num_columns=1)
    release = ReleaseNode(value=np.array([12]), public=False)
    record = ReleaseRecord(node_id=4, component=Component(variant=Count(), arguments={"data": 1}),
                           properties={"data": data}, release=release)
    assert record.release is release
    assert '"value": [12]' in record.to_json()
    assert '"release": "***"' in record.to_json(mask_release=True)
