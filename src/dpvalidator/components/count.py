"""
Count node kind.

Responsibilities
  - Propagate the property of a (group-by) count over its ``data`` input.
  - Derive the sensitivity of the count under the active neighboring
    relation.
  - Materialise statically known categories as an explicit literal
    ``categories`` argument.

Usage Context
  - Dispatched through the component registry by the graph walker.

Limitations
  - Sensitivity is only derived in L-k norm spaces.
  - Output column names are not derivable from the input.
"""
# 说明：计数（Count）节点类型，实现属性传播、敏感度推导与图扩展三种能力。
# 职责：
# - propagate_property：类别已知且为单列时按类别数确定行数，否则退化为标量计数；输出恒为非负整数
# - compute_sensitivity：依据邻接关系、类别数与总记录数是否已知查表得到敏感度
# - expand_component：类别已知时插入保存类别的字面量节点并把 categories 参数连到新 id
# 约定：
# - 聚合时保存自身与输入属性的快照，供后续敏感度推导使用聚合前的状态

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from dpvalidator.core.data.properties import (
    AggregatorProperties,
    NatureContinuous,
    NodeProperties,
    Property,
    get_argument,
)
from dpvalidator.core.data.values import DataType
from dpvalidator.core.errors import (
    CapabilityNotImplementedError,
    UnknownCategoriesError,
    UnsupportedSensitivitySpaceError,
    UnsupportedShapeError,
)
from dpvalidator.core.privacy.privacy_definition import Neighboring, PrivacyDefinition
from dpvalidator.core.privacy.sensitivity_space import KNorm, SensitivitySpace
from dpvalidator.core.utils.logging import get_logger
from dpvalidator.graph.component import Component, ComputationGraphPatch
from dpvalidator.graph.ids import IdAllocator

from .base import Aggregator, Expandable, Propagatable
from .literal import get_literal

logger = get_logger(__name__)

SUBSTITUTE = Neighboring.SUBSTITUTE
ADD_REMOVE = Neighboring.ADD_REMOVE

# (邻接关系, 类别数分桶, 总记录数 N 是否已知) -> 每个单元的敏感度
COUNT_SENSITIVITY: Dict[Tuple[Neighboring, str, bool], float] = {
    # no categories or one category, known N: every cell is determined by N
    (SUBSTITUTE, "none", True): 0.0,
    (ADD_REMOVE, "none", True): 0.0,
    (SUBSTITUTE, "one", True): 0.0,
    (ADD_REMOVE, "one", True): 0.0,
    # no categories or one category, unknown N: raised to 1
    (SUBSTITUTE, "none", False): 1.0,
    (SUBSTITUTE, "one", False): 1.0,
    (ADD_REMOVE, "none", False): 1.0,
    (ADD_REMOVE, "one", False): 1.0,
    # two categories, known N: knowing N determines the second category
    (SUBSTITUTE, "two", True): 1.0,
    (ADD_REMOVE, "two", True): 1.0,
    # two categories, unknown N: substitution preserves N, so N is derivable
    (SUBSTITUTE, "two", False): 1.0,
    # two categories, unknown N: only one bin may be edited
    (ADD_REMOVE, "two", False): 1.0,
    # over two categories: a record may switch from one bin to another
    (SUBSTITUTE, "many", True): 2.0,
    (SUBSTITUTE, "many", False): 2.0,
    # over two categories: only one bin may be edited
    (ADD_REMOVE, "many", True): 1.0,
    (ADD_REMOVE, "many", False): 1.0,
}


def _categories_bucket(categories_length: Optional[int]) -> str:
    if categories_length is None:
        return "none"
    if categories_length == 1:
        return "one"
    if categories_length == 2:
        return "two"
    return "many"


def count_sensitivity(
    neighboring: Neighboring,
    categories_length: Optional[int],
    num_records: Optional[int],
) -> float:
    """Per-cell sensitivity of a count, looked up in COUNT_SENSITIVITY."""
    key = (neighboring, _categories_bucket(categories_length), num_records is not None)
    return COUNT_SENSITIVITY[key]


@dataclass(frozen=True)
class Count(Propagatable, Expandable, Aggregator):
    """Number of records, or of records per category when categories are known."""

    def propagate_property(
        self,
        privacy_definition: PrivacyDefinition,
        public_arguments: Mapping[str, Any],
        properties: NodeProperties,
    ) -> Property:
        data_property = get_argument(properties, "data")

        try:
            categories = data_property.get_categories()
        except UnknownCategoriesError:
            # 类别未知：输出为单个标量计数
            num_records, num_columns = 1, 1
        else:
            if categories.num_columns != 1:
                raise UnsupportedShapeError("categories must contain only one column")
            # 类别已知：在已知取值域上做确定性的 group-by 计数
            num_records = categories.lengths()[0]
            num_columns = data_property.num_columns or categories.num_columns

        return data_property.evolve(
            num_records=num_records,
            num_columns=num_columns,
            # save a snapshot of the state when aggregating
            aggregator=AggregatorProperties(component=replace(self), properties=dict(properties)),
            nature=NatureContinuous.lower_bounded(0, num_columns),
            data_type=DataType.I64,
        )

    def get_names(self, properties: NodeProperties) -> List[str]:
        raise CapabilityNotImplementedError("count", "get_names")

    def expand_component(
        self,
        privacy_definition: PrivacyDefinition,
        component: Component,
        properties: NodeProperties,
        component_id: int,
        maximum_id: int,
    ) -> ComputationGraphPatch:
        """If categories are known statically but not wired, add them as a literal."""
        data_property = get_argument(properties, "data")
        unchanged = ComputationGraphPatch(computation_graph={component_id: component})

        if "categories" in component.arguments:
            return unchanged
        try:
            categories = data_property.get_categories()
        except UnknownCategoriesError:
            return unchanged

        ids = IdAllocator(maximum_id)
        id_categories = ids.next_id()
        literal, release = get_literal(
            categories.column(0), batch=component.batch, data_type=categories.data_type,
        )

        patch = ComputationGraphPatch()
        patch.computation_graph[id_categories] = literal
        patch.releases[id_categories] = release
        patch.computation_graph[component_id] = component.with_argument("categories", id_categories)
        patch.traversal.append(id_categories)
        logger.debug("count %s: categories materialised as literal %s", component_id, id_categories)
        return patch

    def compute_sensitivity(
        self,
        privacy_definition: PrivacyDefinition,
        properties: NodeProperties,
        sensitivity_space: SensitivitySpace,
    ) -> np.ndarray:
        data_property = get_argument(properties, "data")
        data_property.assert_is_not_aggregated()

        if not isinstance(sensitivity_space, KNorm):
            raise UnsupportedSensitivitySpaceError("Count sensitivity is only implemented for KNorm")
        # k has no effect on the sensitivity, and is ignored
        neighboring = privacy_definition.get_neighboring()

        # when categories are defined, a disjoint group by query is performed
        categories_length: Optional[int] = None
        num_columns = 1
        if data_property.categories_known:
            categories = data_property.get_categories()
            categories_length = categories.lengths()[0] if categories.num_columns else None
            num_columns = data_property.num_columns or categories.num_columns

        sensitivity = count_sensitivity(neighboring, categories_length, data_property.num_records)

        if categories_length is None:
            return np.array([sensitivity])
        return np.full((categories_length, num_columns), sensitivity)
