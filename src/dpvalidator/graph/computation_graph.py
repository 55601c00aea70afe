"""
Append-only arena of graph nodes addressed by integer id.

Responsibilities
  - Hold the nodes, constant releases and propagated properties of one
    graph-build session.
  - Apply expansion patches atomically after checking the graph invariants
    (id ranges, no collisions, argument wiring).
  - Resolve the NodeProperties of a node from the properties of its inputs.

Usage Context
  - Used by a graph walker between per-node analysis calls.

Limitations
  - Does not schedule or traverse the graph; ordering is the walker's job.
"""
# 说明：以整数 id 寻址的只追加节点仓库（arena），供图遍历器在逐节点分析之间使用。
# 职责：
# - 保存一次建图会话中的节点、常量发布值与已传播的属性
# - apply_patch(...)：校验扩展补丁的 id 范围、冲突与参数连线后原子性地写入
# - node_properties(...)：根据节点参数连线收集其输入属性（NodeProperties）
# 约定：
# - 除被扩展节点本身外，补丁只能插入新节点，不能修改已有节点

from __future__ import annotations

from typing import Dict, Optional

from dpvalidator.core.data.properties import NodeProperties, Property
from dpvalidator.core.errors import PatchError
from dpvalidator.core.utils.logging import get_logger

from .component import Component, ComputationGraphPatch, ReleaseNode
from .ids import IdAllocator

logger = get_logger(__name__)


class ComputationGraph:
    """
    Node arena for one analysis session.

    - Behavior
      - ``add_component`` allocates ids through a shared IdAllocator.
      - ``apply_patch`` validates before mutating anything, so a rejected
        patch leaves the arena unchanged.
    """

    def __init__(self) -> None:
        self.components: Dict[int, Component] = {}
        self.releases: Dict[int, ReleaseNode] = {}
        self.properties: Dict[int, Property] = {}
        self.allocator = IdAllocator()

    @property
    def maximum_id(self) -> int:
        return self.allocator.maximum_id

    def add_component(self, component: Component, release: Optional[ReleaseNode] = None) -> int:
        self._check_arguments(component, known_ids=set(self.components))
        component_id = self.allocator.next_id()
        self.components[component_id] = component
        if release is not None:
            self.releases[component_id] = release
        return component_id

    def record_property(self, component_id: int, prop: Property) -> None:
        if component_id not in self.components:
            raise PatchError(f"component {component_id} is not in the graph")
        self.properties[component_id] = prop

    def node_properties(self, component_id: int) -> NodeProperties:
        # 仅收集已传播属性的参数，缺失的参数交由节点类型自行报错
        component = self.components[component_id]
        return {
            name: self.properties[argument_id]
            for name, argument_id in component.arguments.items()
            if argument_id in self.properties
        }

    def apply_patch(self, component_id: int, patch: ComputationGraphPatch, maximum_id: int) -> None:
        """
        Insert the contents of an expansion patch.

        Args:
            component_id: Id of the node that was expanded.
            patch: Patch returned by the expansion.
            maximum_id: The ``maximum_id`` the expansion was called with.
        """
        if component_id not in self.components:
            raise PatchError(f"component {component_id} is not in the graph")

        new_ids = patch.new_ids(component_id)
        for new_id in new_ids:
            if new_id <= maximum_id:
                raise PatchError(f"patch id {new_id} must exceed maximum id {maximum_id}")
            if new_id in self.components or new_id in self.releases:
                raise PatchError(f"patch id {new_id} collides with an existing node")
        for property_id in patch.properties:
            if property_id != component_id and property_id not in new_ids:
                raise PatchError(f"patch property for id {property_id} has no matching node")
        for traversal_id in patch.traversal:
            if traversal_id != component_id and traversal_id not in new_ids:
                raise PatchError(f"patch traversal references unknown id {traversal_id}")

        known_ids = set(self.components) | set(patch.computation_graph)
        for patched in patch.computation_graph.values():
            self._check_arguments(patched, known_ids=known_ids)

        self.components.update(patch.computation_graph)
        self.releases.update(patch.releases)
        self.properties.update(patch.properties)
        if new_ids:
            self.allocator.advance(new_ids[-1])
        logger.debug(
            "applied expansion of component %s: %d new ids",
            component_id,
            len(new_ids),
        )

    @staticmethod
    def _check_arguments(component: Component, *, known_ids) -> None:
        for name, argument_id in component.arguments.items():
            if argument_id not in known_ids:
                raise PatchError(f"{name}: argument id {argument_id} is not in the graph")
