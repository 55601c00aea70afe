"""
Per-node analysis capabilities.

Responsibilities:
    * one narrow abstract interface per capability (property propagation,
      graph expansion, sensitivity derivation, accuracy conversion,
      reporting) so that a node kind's support is a fact of its class
    * small value types exchanged through those interfaces
"""
# 说明：逐节点分析能力的抽象接口定义，每种能力一个窄接口，节点类型按需继承。
# 职责：
# - Propagatable：属性传播与列名推导（所有节点类型必须实现）
# - Expandable：把静态已知的元数据物化为显式常量节点的图扩展
# - Aggregator：在给定隐私定义与敏感度空间下推导敏感度
# - AccuracyConvertible：准确度与隐私消耗之间的双向换算，不支持时返回 None
# - Reportable：为发布节点生成披露摘要，不支持时返回 None
# - ReleaseRecord：交给报告协作方的四元组（节点 id、节点定义、输入属性、发布值）

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import numpy as np

from dpvalidator.core.data.properties import NodeProperties, Property
from dpvalidator.core.privacy.privacy_definition import PrivacyDefinition
from dpvalidator.core.privacy.sensitivity_space import SensitivitySpace
from dpvalidator.core.utils.serialization import serialize_to_json
from dpvalidator.graph.component import Component, ComputationGraphPatch, ReleaseNode


@dataclass(frozen=True)
class Accuracy:
    """Half-width of a confidence interval at significance ``alpha``."""

    value: float
    alpha: float


@dataclass(frozen=True)
class PrivacyUsage:
    epsilon: float
    delta: float = 0.0


class Propagatable(ABC):
    """Node kinds that can derive their output property statically."""

    @abstractmethod
    def propagate_property(
        self,
        privacy_definition: PrivacyDefinition,
        public_arguments: Mapping[str, Any],
        properties: NodeProperties,
    ) -> Property:
        """Return the output property given the properties of the inputs."""

    @abstractmethod
    def get_names(self, properties: NodeProperties) -> List[str]:
        """Return the column names of the output."""


class Expandable(ABC):
    """Node kinds that may rewrite themselves into a subgraph."""

    @abstractmethod
    def expand_component(
        self,
        privacy_definition: PrivacyDefinition,
        component: Component,
        properties: NodeProperties,
        component_id: int,
        maximum_id: int,
    ) -> ComputationGraphPatch:
        """Return the patch; ids of new nodes start at ``maximum_id + 1``."""


class Aggregator(ABC):
    """Node kinds whose output sensitivity can be bounded."""

    @abstractmethod
    def compute_sensitivity(
        self,
        privacy_definition: PrivacyDefinition,
        properties: NodeProperties,
        sensitivity_space: SensitivitySpace,
    ) -> np.ndarray:
        """Return one sensitivity per output cell, or a single-element array."""


class AccuracyConvertible(ABC):
    """Node kinds that can convert between accuracy and privacy usage."""

    @abstractmethod
    def accuracy_to_privacy_usage(
        self,
        privacy_definition: PrivacyDefinition,
        properties: NodeProperties,
        accuracy: Accuracy,
    ) -> Optional[PrivacyUsage]:
        ...

    @abstractmethod
    def privacy_usage_to_accuracy(
        self,
        privacy_definition: PrivacyDefinition,
        properties: NodeProperties,
        alpha: float,
    ) -> Optional[float]:
        ...


class Reportable(ABC):
    """Node kinds that can summarise their release for disclosure."""

    @abstractmethod
    def summarize(
        self,
        node_id: int,
        component: Component,
        properties: NodeProperties,
        release: ReleaseNode,
    ) -> Optional[List[Dict[str, Any]]]:
        ...


@dataclass
class ReleaseRecord:
    """
    Items handed to the reporting collaborator for one released node.

    - Behavior
      - Carries the node id, node definition, input properties and released
        value exactly as the graph holds them.
    """

    node_id: int
    component: Component
    properties: Dict[str, Property]
    release: ReleaseNode

    @classmethod
    def from_graph(cls, graph: Any, node_id: int) -> "ReleaseRecord":
        # graph 为 ComputationGraph；发布值与属性按原样透传，不做复制或修改
        return cls(
            node_id=node_id,
            component=graph.components[node_id],
            properties=dict(graph.node_properties(node_id)),
            release=graph.releases[node_id],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node_id": self.node_id,
            "component": self.component.to_dict(),
            "properties": {name: prop.to_dict() for name, prop in self.properties.items()},
            "release": {
                "value": np.asarray(self.release.value).tolist(),
                "public": self.release.public,
            },
        }

    def to_json(self, *, mask_release: bool = False) -> str:
        return serialize_to_json(self, sensitive_fields=("release",) if mask_release else None)
