"""
Integration tests: analysing a count through the arena and the dispatcher.
"""
# 说明：通过节点仓库与能力分发对计数节点进行完整静态分析的集成测试。
# 覆盖：
# - 依赖顺序下的属性传播、图扩展、补丁应用与敏感度推导的端到端流程
# - 典型场景：两类别 / 三类别 / 类别未知且 N 已知 时的敏感度
# - 扩展后新增的字面量节点被写入仓库，并可像普通节点一样传播属性
# - 发布记录（ReleaseRecord）把节点 id、定义、输入属性与发布值原样交给报告方

import numpy as np
import pytest

from dpvalidator.components import (
    Count,
    ReleaseRecord,
    compute_sensitivity,
    expand_component,
    get_literal,
    propagate_property,
    supports,
)
from dpvalidator.core.data import CategorySet, DataType, Property
from dpvalidator.core.privacy import KNorm, Neighboring, PrivacyDefinition
from dpvalidator.graph import Component, ComputationGraph


def _build(categories=None, num_records=None):
    # data 节点的属性视为上游已计算完成（私有数据，非公开）
    graph = ComputationGraph()
    placeholder, release = get_literal([0], batch=0)
    data_id = graph.add_component(placeholder, release)
    graph.record_property(data_id, Property(
        data_type=DataType.STR,
        num_records=num_records,
        num_columns=1,
        categories=CategorySet.from_columns([categories]) if categories is not None else None,
    ))
    count_id = graph.add_component(Component(variant=Count(), arguments={"data": data_id}, batch=1))
    return graph, count_id


def _analyse(graph, count_id, definition):
    maximum_id = graph.maximum_id
    component = graph.components[count_id]
    properties = graph.node_properties(count_id)
    graph.record_property(count_id, propagate_property(component.variant, definition, {}, properties))

    if supports(component.variant, "expand_component"):
        patch = expand_component(definition, component, properties, count_id, maximum_id)
        graph.apply_patch(count_id, patch, maximum_id)
        for new_id in patch.traversal:
            literal = graph.components[new_id]
            graph.record_property(new_id, propagate_property(literal.variant, definition, {}, {}))

    return compute_sensitivity(Count(), definition, graph.node_properties(count_id), KNorm(1))


def test_two_categories_add_remove_unknown_n() -> None:
    graph, count_id = _build(["A", "B"])
    sensitivity = _analyse(graph, count_id, PrivacyDefinition(neighboring=Neighboring.ADD_REMOVE))
    np.testing.assert_array_equal(sensitivity, [[1.0], [1.0]])


def test_two_categories_substitute_unknown_n() -> None:
    graph, count_id = _build(["A", "B"])
    sensitivity = _analyse(graph, count_id, PrivacyDefinition(neighboring=Neighboring.SUBSTITUTE))
    np.testing.assert_array_equal(sensitivity, [[1.0], [1.0]])


@pytest.mark.parametrize("neighboring", list(Neighboring))
def test_unknown_categories_known_n(neighboring) -> None:
    graph, count_id = _build(num_records=500)
    sensitivity = _analyse(graph, count_id, PrivacyDefinition(neighboring=neighboring))
    np.testing.assert_array_equal(sensitivity, [0.0])
    assert graph.maximum_id == count_id


@pytest.mark.parametrize("num_records", [None, 500])
def test_three_categories_substitute(num_records) -> None:
    graph, count_id = _build(["A", "B", "C"], num_records=num_records)
    sensitivity = _analyse(graph, count_id, PrivacyDefinition(neighboring=Neighboring.SUBSTITUTE))
    np.testing.assert_array_equal(sensitivity, np.full((3, 1), 2.0))


def test_expansion_inserts_literal_after_maximum_id() -> None:
    definition = PrivacyDefinition()
    component = Component(variant=Count(), arguments={"data": 3})
    data = Property(data_type=DataType.STR, num_columns=1, categories=CategorySet.from_columns([["X", "Y", "Z"]]))
    patch = expand_component(definition, component, {"data": data}, 4, 10)

    assert patch.new_ids(4) == [11]
    assert list(patch.releases) == [11]
    np.testing.assert_array_equal(patch.releases[11].value, ["X", "Y", "Z"])
    assert patch.computation_graph[4].arguments["categories"] == 11


def test_expanded_graph_feeds_reporting() -> None:
    graph, count_id = _build(["A", "B", "C"])
    definition = PrivacyDefinition()
    _analyse(graph, count_id, definition)

    literal_id = graph.components[count_id].arguments["categories"]
    assert graph.properties[literal_id].is_public
    assert graph.properties[literal_id].get_categories().column(0) == ("A", "B", "C")

    record = ReleaseRecord.from_graph(graph, literal_id)
    assert record.release is graph.releases[literal_id]
    assert record.component is graph.components[literal_id]
    assert record.properties == {}

    # 再次扩展已连线 categories 的节点不会分配新 id
    maximum_id = graph.maximum_id
    again = expand_component(definition, graph.components[count_id], graph.node_properties(count_id),
                             count_id, maximum_id)
    graph.apply_patch(count_id, again, maximum_id)
    assert graph.maximum_id == maximum_id
