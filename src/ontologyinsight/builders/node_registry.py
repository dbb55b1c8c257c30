# src/ontologyinsight/builders/node_registry.py
"""
ForestBuilder 與 WeightedGraph 共用的節點註冊表。

註冊表以「識別函式」從原始紀錄中取得鍵值，節點本身則由子類別決定形狀。
"""

# 1. 標準庫導入
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from ontologyinsight.builders.errors import DuplicateIdError

NodeT = TypeVar("NodeT")
Identifier = Callable[[Any], Hashable]


def identity(record: Any) -> Hashable:
    """預設的識別函式：紀錄本身即為 ID。"""
    return record


class NodeRegistry(Generic[NodeT]):
    """
    以 ID 為鍵的節點註冊表。

    節點只能在首次被引用時建立，不支援單獨刪除，僅能以 clear() 整批清空。
    """

    def __init__(self, identifier: Identifier | None = None):
        self.identifier: Identifier = identifier or identity
        self._nodes: dict[Hashable, NodeT] = {}
        self._count = 0

    def resolve_id(self, record: Any) -> Hashable:
        """以識別函式計算紀錄的 ID。None 保留給「無父節點」，不能作為 ID。"""
        node_id = self.identifier(record)
        if node_id is None:
            raise ValueError(f"識別函式對紀錄 {record!r} 回傳了 None。")
        return node_id

    def _register(self, node_id: Hashable, node: NodeT) -> NodeT:
        if node_id in self._nodes:
            raise DuplicateIdError(node_id)
        self._nodes[node_id] = node
        self._count += 1
        return node

    def get_node(self, node_id: Hashable) -> NodeT | None:
        return self._nodes.get(node_id)

    def get_nodes_ids(self) -> list[Hashable]:
        """依註冊順序回傳所有節點 ID。"""
        return list(self._nodes)

    def size(self) -> int:
        return self._count

    def clear(self):
        """清空註冊表，僅用於兩次獨立執行之間的完整重置。"""
        self._nodes = {}
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes
