"""
Static properties attached to every edge of the computation graph.

Responsibilities:
    * describe what is known about a node's output without touching data
      (record/column counts, categories, bounds, data type, public-ness)
    * record aggregator provenance so sensitivity is derived against the
      pre-aggregation state
    * resolve named arguments out of a node's input properties
"""
# 说明：计算图每条边上的静态属性（Property）数据模型。
# 职责：
# - NatureContinuous / NatureCategorical：逐列数值上下界或“类别型”标记
# - AggregatorProperties：聚合时保存的节点类型快照与输入属性快照（溯源信息）
# - Property：不可变属性值；类别通过 get_categories() 访问，未知时显式抛错而非返回空
# - get_argument(...)：按参数名从 NodeProperties 中取出属性，缺失时抛出带参数名的错误
# 约定：
# - Property 创建后不可变，所有派生都通过 evolve(...) 生成新实例

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from dpvalidator.core.errors import (
    AlreadyAggregatedError,
    MissingArgumentError,
    PropertyError,
    UnknownCategoriesError,
)

from .values import CategorySet, DataType


@dataclass(frozen=True)
class NatureContinuous:
    """Per-column optional lower and upper bounds."""

    min: Tuple[Optional[Any], ...]
    max: Tuple[Optional[Any], ...]

    @classmethod
    def lower_bounded(cls, lower: Any, num_columns: int) -> "NatureContinuous":
        return cls(min=tuple(lower for _ in range(num_columns)), max=tuple(None for _ in range(num_columns)))


@dataclass(frozen=True)
class NatureCategorical:
    """Marker for outputs whose values are drawn from their categories."""


Nature = Union[NatureContinuous, NatureCategorical]


@dataclass(frozen=True)
class AggregatorProperties:
    """
    Snapshot taken when a node aggregates its input.

    - Configuration
      - component: Copy of the aggregating node kind.
      - properties: Read-only copy of the input NodeProperties at
        aggregation time.

    - Usage Notes
      - Compared structurally; never refers back into the mutable graph.
      - Hashed by component only, the snapshot mapping takes part in
        equality.
    """

    component: Any
    properties: Mapping[str, "Property"] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "component": type(self.component).__name__,
            "properties": {name: prop.to_dict() for name, prop in self.properties.items()},
        }


@dataclass(frozen=True)
class Property:
    """
    Statistical metadata known about a node's output.

    ``categories`` must be read through :meth:`get_categories`, which raises
    :class:`UnknownCategoriesError` when the domain is not known; an unknown
    domain is never the same thing as an empty one.
    """

    data_type: DataType
    num_records: Optional[int] = None
    num_columns: Optional[int] = None
    categories: Optional[CategorySet] = None
    nature: Optional[Nature] = None
    aggregator: Optional[AggregatorProperties] = None
    is_public: bool = False
    nullity: bool = True
    dimensionality: Optional[int] = None

    @property
    def categories_known(self) -> bool:
        return self.categories is not None

    @property
    def is_aggregated(self) -> bool:
        return self.aggregator is not None

    def get_categories(self) -> CategorySet:
        if self.categories is None:
            raise UnknownCategoriesError("categories must be known")
        return self.categories

    def get_num_columns(self) -> int:
        if self.num_columns is None:
            raise PropertyError("num_columns must be known")
        return self.num_columns

    def get_num_records(self) -> int:
        if self.num_records is None:
            raise PropertyError("num_records must be known")
        return self.num_records

    def assert_is_not_aggregated(self) -> None:
        # 敏感度只对逐记录（未聚合）的数据有意义
        if self.aggregator is not None:
            raise AlreadyAggregatedError(
                "sensitivity cannot be derived on an aggregated value; "
                "aggregate again only after a release"
            )

    def evolve(self, **changes: Any) -> "Property":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        nature: Optional[Dict[str, Any]] = None
        if isinstance(self.nature, NatureContinuous):
            nature = {"continuous": {"min": list(self.nature.min), "max": list(self.nature.max)}}
        elif isinstance(self.nature, NatureCategorical):
            nature = {"categorical": {}}
        return {
            "num_records": self.num_records,
            "num_columns": self.num_columns,
            "categories": self.categories.to_list() if self.categories is not None else None,
            "nature": nature,
            "data_type": self.data_type.value,
            "aggregator": self.aggregator.to_dict() if self.aggregator is not None else None,
            "is_public": self.is_public,
            "nullity": self.nullity,
            "dimensionality": self.dimensionality,
        }


NodeProperties = Mapping[str, Property]


def get_argument(properties: NodeProperties, name: str) -> Property:
    """Return the property wired to argument ``name`` or raise MissingArgumentError."""
    try:
        return properties[name]
    except KeyError:
        raise MissingArgumentError(name) from None
