"""
Literal node kind: a public constant embedded in the graph.

Responsibilities
  - Hold a public value (scalar, vector or matrix) as an immutable node kind.
  - Infer the static property of that value.
  - Build literal nodes plus their releases for graph expansion.

Usage Context
  - Inserted by expansions that materialise statically known metadata
    (e.g. the categories of a count).

Limitations
  - Values with more than two dimensions are rejected.
"""
# 说明：字面量（Literal）节点类型，即嵌入图中的公开常量。
# 职责：
# - 以嵌套元组的不可变形式保存公开值，保证快照与结构化比较语义
# - propagate_property：根据值的形状与 dtype 推断行数、列数、数据类型、上下界或类别
# - get_literal(...)：为图扩展构造字面量节点及其公开发布值

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

import numpy as np

from dpvalidator.core.data.properties import (
    NatureCategorical,
    NatureContinuous,
    NodeProperties,
    Property,
)
from dpvalidator.core.data.values import CategorySet, DataType
from dpvalidator.core.errors import CapabilityNotImplementedError, UnsupportedShapeError
from dpvalidator.core.privacy.privacy_definition import PrivacyDefinition
from dpvalidator.graph.component import Component, ReleaseNode

from .base import Propagatable


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class Literal(Propagatable):
    """Public constant; ``value`` is stored as nested tuples with its data type."""

    value: Any
    data_type: Optional[DataType] = None

    def __post_init__(self) -> None:
        array = np.asarray(self.value)
        # 空值无法从元素推断类型，data_type 需在转为元组前确定
        if self.data_type is None:
            object.__setattr__(self, "data_type", DataType.from_dtype(array.dtype))
        object.__setattr__(self, "value", _freeze(array.tolist()))

    def as_array(self) -> np.ndarray:
        return np.asarray(self.value, dtype=self.data_type.numpy_dtype)

    def propagate_property(
        self,
        privacy_definition: PrivacyDefinition,
        public_arguments: Mapping[str, Any],
        properties: NodeProperties,
    ) -> Property:
        array = self.as_array()
        if array.ndim > 2:
            raise UnsupportedShapeError("literal values may have at most two dimensions")
        data_type = self.data_type

        # 统一视为 (行, 列) 的二维结构：标量为 1x1，向量为 n x 1
        matrix = array.reshape(1, 1) if array.ndim == 0 else array.reshape(-1, 1) if array.ndim == 1 else array
        num_records, num_columns = matrix.shape
        columns = [matrix[:, index] for index in range(num_columns)]

        prop = Property(
            data_type=data_type,
            num_records=int(num_records),
            num_columns=int(num_columns),
            is_public=True,
            nullity=False,
            dimensionality=int(array.ndim),
        )
        if data_type.is_numeric:
            return prop.evolve(nature=NatureContinuous(
                min=tuple(column.min().item() if column.size else None for column in columns),
                max=tuple(column.max().item() if column.size else None for column in columns),
            ))
        categories = CategorySet.from_columns(
            [list(dict.fromkeys(column.tolist())) for column in columns],
            data_type=data_type,
        )
        return prop.evolve(categories=categories, nature=NatureCategorical())

    def get_names(self, properties: NodeProperties) -> List[str]:
        raise CapabilityNotImplementedError("literal", "get_names")


def get_literal(
    value: Any,
    batch: int,
    data_type: Optional[DataType] = None,
) -> Tuple[Component, ReleaseNode]:
    """Return a literal node holding ``value`` and the public release for it."""
    variant = Literal(value=value, data_type=data_type)
    array = variant.as_array()
    component = Component(variant=variant, arguments={}, batch=batch)
    return component, ReleaseNode(value=array, privacy_usages=None, public=True)
