"""
Error hierarchy for the static analysis core.

Responsibilities
  - Define one exception type per failure kind of a per-node analysis call.
  - Carry the identifying context (argument name, node kind, capability)
    the graph walker needs to report the failing node.

Usage Context
  - Raised by property propagation, sensitivity derivation, expansion and
    the capability dispatcher.

Limitations
  - No exception is recovered inside the core; every error is surfaced to
    the caller.
"""
# 说明：分析核心的异常体系，统一属性传播、敏感度推导、图扩展与分发阶段的错误类型。
# 职责：
# - ValidatorError：核心统一基类异常
# - PropertyError / UnknownCategoriesError：属性字段未知或形状不合法
# - MissingArgumentError：缺少必需的输入参数（携带参数名）
# - AlreadyAggregatedError：在已聚合的属性上请求敏感度
# - CapabilityNotImplementedError：节点类型未实现被请求的能力（携带类型名与能力名）
# - 其它：不支持的敏感度空间 / 邻接关系、注册表不完整、扩展补丁违反图不变量

from __future__ import annotations

from typing import Optional


class ValidatorError(ValueError):
    """
    Base error type for analysis failures.

    - Behavior
      - Serves as the common ancestor for all core exceptions.

    - Usage Notes
      - Catch to abort a release without mixing with parameter errors.
    """


class PropertyError(ValidatorError):
    """Raised when a statically unknown property field is requested."""


class UnknownCategoriesError(PropertyError):
    """Raised when categories are requested from a non-categorical property."""


class UnsupportedShapeError(ValidatorError):
    """Raised when an input has a shape the node kind cannot analyse."""


class MissingArgumentError(ValidatorError):
    """
    Raised when a required argument is absent from the node properties.

    - Configuration
      - argument: Name of the missing argument (e.g. ``"data"``).
    """

    def __init__(self, argument: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{argument}: missing")
        self.argument = argument


class AlreadyAggregatedError(ValidatorError):
    """Raised when sensitivity is requested on an already aggregated property."""


class UnsupportedSensitivitySpaceError(ValidatorError):
    """Raised when a node kind does not implement the requested sensitivity space."""


class UnsupportedNeighboringError(ValidatorError):
    """Raised when the neighboring relation is neither substitute nor add/remove."""


class CapabilityNotImplementedError(ValidatorError, NotImplementedError):
    """
    Raised when a node kind does not implement a requested capability.

    - Configuration
      - kind: Identifier of the node kind.
      - capability: Name of the missing capability.
    """

    def __init__(self, kind: str, capability: str) -> None:
        super().__init__(f"component '{kind}' does not implement {capability}")
        self.kind = kind
        self.capability = capability


class RegistryError(ValidatorError):
    """Raised when the node-kind registry is incomplete or inconsistent."""


class PatchError(ValidatorError):
    """Raised when an expansion patch violates graph invariants."""
