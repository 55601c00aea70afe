"""
Graph nodes, released values and expansion patches.

Responsibilities
  - Represent one node of the computation graph: its kind, the ids wired to
    its arguments, and the batch it belongs to.
  - Represent constant releases attached to node ids.
  - Represent the patch an expansion hands back to the graph walker.

Usage Context
  - Produced by the surrounding system (nodes) and by expansion (patches).

Limitations
  - Nodes are immutable; rewiring returns a new node.
"""
# 说明：计算图节点（Component）、发布值（ReleaseNode）与图扩展补丁（ComputationGraphPatch）的数据结构。
# 职责：
# - Component：节点类型实例 + 参数名到上游节点 id 的映射 + 批次 id
# - ReleaseNode：与节点 id 关联的常量/发布值
# - ComputationGraphPatch：扩展产生的新节点、预计算属性、发布值与遍历顺序
# 约定：
# - 补丁中的 id 只能是原节点 id 或严格大于扩展时的 maximum_id

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import numpy as np

from dpvalidator.core.data.properties import Property


@dataclass(frozen=True)
class Component:
    """
    One node of the computation graph.

    - Configuration
      - variant: Node-kind instance (e.g. ``Count()``).
      - arguments: Argument name to upstream node id.
      - batch: Grouping id shared by nodes created together.
      - omit: Whether the node's value is left out of the release.
    """

    variant: Any
    arguments: Mapping[str, int] = field(default_factory=dict)
    batch: int = 0
    omit: bool = False

    def with_argument(self, name: str, component_id: int) -> "Component":
        arguments = dict(self.arguments)
        arguments[name] = component_id
        return Component(variant=self.variant, arguments=arguments, batch=self.batch, omit=self.omit)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variant": type(self.variant).__name__,
            "arguments": dict(self.arguments),
            "batch": self.batch,
            "omit": self.omit,
        }


@dataclass
class ReleaseNode:
    """Value released for a node id."""

    value: np.ndarray
    privacy_usages: Optional[List[Any]] = None
    public: bool = False


@dataclass
class ComputationGraphPatch:
    """
    Insertions an expansion asks the graph walker to apply.

    - Configuration
      - computation_graph: New or rewired nodes keyed by id.
      - properties: Properties already known for new ids.
      - releases: Constant releases keyed by id.
      - traversal: Order in which new ids should be analysed.
    """

    computation_graph: Dict[int, Component] = field(default_factory=dict)
    properties: Dict[int, Property] = field(default_factory=dict)
    releases: Dict[int, ReleaseNode] = field(default_factory=dict)
    traversal: List[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.computation_graph or self.properties or self.releases or self.traversal)

    def new_ids(self, component_id: int) -> List[int]:
        # 除原节点 id 之外补丁中出现的全部 id（节点与发布值并集），升序返回
        ids = set(self.computation_graph) | set(self.releases)
        ids.discard(component_id)
        return sorted(ids)
