"""
Unit tests for the privacy definition and sensitivity spaces.
"""
# 说明：PrivacyDefinition、Neighboring 与敏感度空间的单元测试。
# 覆盖：
# - 邻接关系从字符串构造（含别名）以及未知取值时的 UnsupportedNeighboringError
# - group_size 校验与 from_config() 默认值
# - KNorm 的 k 参数校验

import pytest

from dpvalidator.core.errors import UnsupportedNeighboringError
from dpvalidator.core.privacy import Exponential, KNorm, Neighboring, PrivacyDefinition
from dpvalidator.core.utils import ParamValidationError, configure, get_config


def test_neighboring_from_string_aliases() -> None:
    assert Neighboring.from_str("Substitute") is Neighboring.SUBSTITUTE
    assert Neighboring.from_str("AddRemove") is Neighboring.ADD_REMOVE
    assert Neighboring.from_str("add-remove") is Neighboring.ADD_REMOVE


def test_unknown_neighboring_is_rejected() -> None:
    with pytest.raises(UnsupportedNeighboringError):
        PrivacyDefinition(neighboring="swap")


def test_non_enum_neighboring_fails_on_access() -> None:
    definition = PrivacyDefinition(neighboring=Neighboring.SUBSTITUTE)
    object.__setattr__(definition, "neighboring", 3)
    with pytest.raises(UnsupportedNeighboringError):
        definition.get_neighboring()


def test_group_size_validation() -> None:
    with pytest.raises(ParamValidationError):
        PrivacyDefinition(group_size=0).validate()


def test_from_config_uses_default_neighboring() -> None:
    previous = get_config().default_neighboring
    try:
        configure(default_neighboring="substitute")
        definition = PrivacyDefinition.from_config(group_size=2)
        assert definition.neighboring is Neighboring.SUBSTITUTE
        assert definition.to_dict()["group_size"] == 2
    finally:
        configure(default_neighboring=previous)


def test_knorm_requires_positive_integer() -> None:
    assert KNorm(2).k == 2
    with pytest.raises(ParamValidationError):
        KNorm(0)
    with pytest.raises(ParamValidationError):
        KNorm(1.5)  # type: ignore[arg-type]
    assert Exponential() == Exponential()
