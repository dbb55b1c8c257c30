# src/ontologyinsight/builders/forest_builder.py
"""
提供由父子關係逐步建構森林 (forest) 的建構器。

每個節點一生最多只有一個父節點；compile() 會在輸出前以一次深度優先走訪驗證結構無環。
"""

# 1. 標準庫導入
import copy
import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from ontologyinsight.builders.errors import AlreadyHasParentError
from ontologyinsight.builders.node_registry import NodeRegistry

ROOT_DISPLAY_NAME = "root"


@dataclass(eq=False)
class TreeNode:
    """森林中的單一節點。payload 為呼叫者提供的原始紀錄，可由下游自由修改。"""

    id: Hashable
    display_name: str
    payload: Any = None
    children: list["TreeNode"] = field(default_factory=list)
    parent_id: Hashable | None = None

    @property
    def has_parent(self) -> bool:
        return self.parent_id is not None


@dataclass
class CompiledForest:
    """compile() 成功時的結果：合成根節點底下的完整子樹快照。"""

    children: list[dict[str, Any]]
    display_name: str = ROOT_DISPLAY_NAME

    def to_dict(self) -> dict[str, Any]:
        return {"displayName": self.display_name, "children": self.children}

    def iter_nodes(self):
        """以深度優先、前序的順序走訪所有節點字典。"""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node["children"]))


@dataclass(frozen=True)
class CycleDetected:
    """compile() 失敗時的結果：結構中存在環，不提供任何部分樹。"""

    node_id: Hashable | None
    unreachable: int = 0


def _derive_display_name(record: Any, node_id: Hashable) -> str:
    """依 name -> id 的順序取得顯示名稱，皆不存在時退回節點 ID。"""
    if isinstance(record, Mapping):
        name = record.get("name") or record.get("id")
    else:
        name = getattr(record, "name", None) or getattr(record, "id", None)
    return str(name) if name else str(node_id)


class ForestBuilder(NodeRegistry[TreeNode]):
    """
    以 ID 為鍵的樹節點註冊表，支援逐步加入父子關係並在編譯時偵測環。
    """

    def create_node(self, record: Any) -> TreeNode:
        """
        建立並註冊一個新節點。

        Raises:
            DuplicateIdError: 若該 ID 已經存在。
        """
        node_id = self.resolve_id(record)
        node = TreeNode(id=node_id, display_name=_derive_display_name(record, node_id), payload=record)
        return self._register(node_id, node)

    def _get_or_create(self, record: Any) -> TreeNode:
        node = self.get_node(self.resolve_id(record))
        return node if node is not None else self.create_node(record)

    def add_child(self, parent_record: Any, child_record: Any):
        """
        將 child 加入為 parent 的子節點，兩端若不存在會被自動建立。
        子節點的順序即為呼叫順序。

        Raises:
            AlreadyHasParentError: 若子節點已有父節點；此時不會修改任何狀態。
            ValueError: 若任一端的 ID 為 None；此時不會修改任何狀態。
        """
        child_id = self.resolve_id(child_record)
        self.resolve_id(parent_record)
        existing_child = self.get_node(child_id)
        if existing_child is not None and existing_child.has_parent:
            raise AlreadyHasParentError(existing_child.id, existing_child.parent_id)

        child = existing_child if existing_child is not None else self.create_node(child_record)
        parent = self._get_or_create(parent_record)
        child.parent_id = parent.id
        parent.children.append(child)

    def get_roots(self) -> list[TreeNode]:
        """回傳所有從未被加入為子節點的節點，順序與註冊順序一致。"""
        return [node for node in self._nodes.values() if not node.has_parent]

    def compile(self) -> CompiledForest | CycleDetected:
        """
        產生目前森林的快照。

        所有無父節點的節點會成為合成根節點 ("root") 的子節點，接著以單次深度優先走訪驗證：
        任何節點被重複拜訪，或有節點無法從任何根抵達 (只可能位於父節點環上)，都視為偵測到環。

        Returns:
            成功時回傳 CompiledForest；偵測到環時回傳 CycleDetected。
        """
        roots = self.get_roots()
        visited: set[Hashable] = set()
        stack = list(reversed(roots))
        while stack:
            node = stack.pop()
            if node.id in visited:
                logging.warning(f"編譯森林時在節點 '{node.id}' 偵測到環。")
                return CycleDetected(node_id=node.id)
            visited.add(node.id)
            stack.extend(reversed(node.children))

        unreachable = len(self._nodes) - len(visited)
        if unreachable:
            first_missing = next(node_id for node_id in self._nodes if node_id not in visited)
            logging.warning(f"編譯森林時有 {unreachable} 個節點無法從任何根抵達 (例如 '{first_missing}')，視為環。")
            return CycleDetected(node_id=first_missing, unreachable=unreachable)

        return CompiledForest(children=[self._snapshot(root) for root in roots])

    @staticmethod
    def _node_dict(node: TreeNode) -> dict[str, Any]:
        return {
            "id": node.id,
            "displayName": node.display_name,
            "parentId": node.parent_id,
            "payload": copy.deepcopy(node.payload),
            "children": [],
        }

    @classmethod
    def _snapshot(cls, node: TreeNode) -> dict[str, Any]:
        """將節點及其子樹複製為不與註冊表共用狀態的純字典。"""
        snapshot = cls._node_dict(node)
        stack = [(node, snapshot)]
        while stack:
            current, current_snapshot = stack.pop()
            for child in current.children:
                child_snapshot = cls._node_dict(child)
                current_snapshot["children"].append(child_snapshot)
                stack.append((child, child_snapshot))
        return snapshot
