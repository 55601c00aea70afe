"""Computation graph nodes, expansion patches and the node arena."""

from .component import (
    Component,
    ComputationGraphPatch,
    ReleaseNode,
)
from .ids import IdAllocator
from .computation_graph import ComputationGraph

__all__ = [
    "Component",
    "ComputationGraphPatch",
    "ReleaseNode",
    "IdAllocator",
    "ComputationGraph",
]
