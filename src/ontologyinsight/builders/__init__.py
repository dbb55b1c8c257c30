# src/ontologyinsight/builders/__init__.py
"""
建構器套件，負責將本體紀錄轉換為森林與加權圖兩種資料結構。
"""

from .errors import AlreadyHasParentError, DuplicateIdError, SelfEdgeError, StructureError
from .forest_builder import CompiledForest, CycleDetected, ForestBuilder, TreeNode
from .weighted_graph import UNREACHABLE, DistanceMatrix, GraphNode, WeightedGraph

__all__ = [
    "UNREACHABLE",
    "AlreadyHasParentError",
    "CompiledForest",
    "CycleDetected",
    "DistanceMatrix",
    "DuplicateIdError",
    "ForestBuilder",
    "GraphNode",
    "SelfEdgeError",
    "StructureError",
    "TreeNode",
    "WeightedGraph",
]
