"""
Privacy definition consumed by sensitivity derivation.

The module centralises:
- The neighboring relations the validator can reason about.
- The privacy definition passed to every per-node analysis call, with
  validation and construction from the runtime configuration.
"""
# 说明：敏感度推导所使用的隐私定义（PrivacyDefinition）与邻接关系（Neighboring）。
# 职责：
# - Neighboring：SUBSTITUTE（替换一条记录）/ ADD_REMOVE（增删一条记录），支持字符串构造
# - PrivacyDefinition：携带邻接关系、群组大小以及若干严格检查开关的不可变配置体
# - from_config()：从全局 RuntimeConfig 的 default_neighboring 构造默认隐私定义

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Union

from dpvalidator.core.errors import UnsupportedNeighboringError
from dpvalidator.core.utils.config import get_config
from dpvalidator.core.utils.param_validation import ensure, ensure_type


class Neighboring(enum.Enum):
    """Neighboring relations between adjacent datasets."""

    SUBSTITUTE = "substitute"    # one record's value changes
    ADD_REMOVE = "add_remove"    # one record is added or removed

    @classmethod
    def from_str(cls, name: str) -> "Neighboring":
        normalized = name.lower().replace(" ", "_").replace("-", "_")
        if normalized in ("addremove", "add/remove"):
            normalized = "add_remove"
        try:
            return cls(normalized)
        except ValueError as exc:
            raise UnsupportedNeighboringError(
                'neighboring definition must be either "AddRemove" or "Substitute"'
            ) from exc


@dataclass(frozen=True)
class PrivacyDefinition:
    """
    Privacy definition shared by every analysis call of one graph.

    - Configuration
      - neighboring: Neighboring relation (or its string name).
      - group_size: Number of records a single individual may contribute.
      - strict_parameter_checks: Reject releases whose parameters exceed the budget.
      - protect_floating_point: Require floating-point safe mechanisms.
    """

    neighboring: Union[Neighboring, str] = Neighboring.ADD_REMOVE
    group_size: int = 1
    strict_parameter_checks: bool = False
    protect_floating_point: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.neighboring, str):
            object.__setattr__(self, "neighboring", Neighboring.from_str(self.neighboring))

    def validate(self) -> "PrivacyDefinition":
        ensure_type(self.group_size, int, label="group_size")
        ensure(self.group_size >= 1, "group_size must be >= 1")
        self.get_neighboring()
        return self

    def get_neighboring(self) -> Neighboring:
        # 邻接关系只能是两种已知取值之一，否则视为致命错误
        if not isinstance(self.neighboring, Neighboring):
            raise UnsupportedNeighboringError(
                'neighboring definition must be either "AddRemove" or "Substitute"'
            )
        return self.neighboring

    @classmethod
    def from_config(cls, **overrides: Any) -> "PrivacyDefinition":
        params: Dict[str, Any] = {"neighboring": get_config().default_neighboring}
        params.update(overrides)
        return cls(**params).validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "neighboring": self.get_neighboring().value,
            "group_size": self.group_size,
            "strict_parameter_checks": self.strict_parameter_checks,
            "protect_floating_point": self.protect_floating_point,
        }
