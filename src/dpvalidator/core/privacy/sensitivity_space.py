"""
Sensitivity spaces a node kind may be asked to bound its output in.
"""
# 说明：敏感度空间的标签联合类型。
# 职责：
# - KNorm：L-k 范数空间，k 为正整数（k=1 对应 Laplace，k=2 对应 Gaussian）
# - Exponential：指数机制所使用的效用函数敏感度空间

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from dpvalidator.core.utils.param_validation import ensure, ensure_type


@dataclass(frozen=True)
class KNorm:
    """L-k norm space."""

    k: int = 1

    def __post_init__(self) -> None:
        ensure_type(self.k, int, label="k")
        ensure(self.k >= 1, "k must be a positive integer")


@dataclass(frozen=True)
class Exponential:
    """Utility-function space of the exponential mechanism."""


SensitivitySpace = Union[KNorm, Exponential]
