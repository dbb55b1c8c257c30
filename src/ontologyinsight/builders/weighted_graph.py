# src/ontologyinsight/builders/weighted_graph.py
"""
提供無向加權圖的建構器，以及以 Floyd-Warshall 演算法編譯的全點對最短路徑距離矩陣。

邊的權重等於該節點對在來源資料中出現的次數，而非固定距離。
"""

# 1. 標準庫導入
import logging
import math
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from ontologyinsight.builders.errors import SelfEdgeError
from ontologyinsight.builders.node_registry import NodeRegistry

UNREACHABLE = -1
# 僅在計算過程中使用；float 的無限大與整數相加不會溢位。
_INFINITY = math.inf


@dataclass(eq=False)
class GraphNode:
    id: Hashable
    payload: Any = None
    neighbors: dict[Hashable, int] = field(default_factory=dict)


@dataclass
class DistanceMatrix:
    """
    compile() 的結果。ids 與 matrix 是成對的時間點快照：
    matrix[i][j] 為 ids[i] 與 ids[j] 之間的最短路徑權重，無法抵達時為 -1。
    """

    ids: list[Hashable]
    matrix: list[list[int]]

    def __post_init__(self):
        self._index = {node_id: i for i, node_id in enumerate(self.ids)}

    def index_of(self, node_id: Hashable) -> int:
        return self._index[node_id]

    def distance(self, first: Hashable, second: Hashable) -> int:
        return self.matrix[self._index[first]][self._index[second]]

    def to_dict(self) -> dict[str, Any]:
        return {"ids": list(self.ids), "matrix": [list(row) for row in self.matrix]}


class WeightedGraph(NodeRegistry[GraphNode]):
    """
    以 ID 為鍵的無向圖節點註冊表。鄰接關係永遠對稱：插入 (A, B) 會以相同的量更新 A->B 與 B->A。
    """

    def create_node(self, record: Any) -> GraphNode:
        """
        建立並註冊一個新節點。

        Raises:
            DuplicateIdError: 若該 ID 已經存在。
        """
        node_id = self.resolve_id(record)
        return self._register(node_id, GraphNode(id=node_id, payload=record))

    def _get_or_create(self, record: Any) -> GraphNode:
        node = self.get_node(self.resolve_id(record))
        return node if node is not None else self.create_node(record)

    def add_edge(self, first_record: Any, second_record: Any):
        """
        在兩個節點之間加入一條無向邊；重複插入同一對節點會使權重加 1。

        Raises:
            SelfEdgeError: 若兩端解析為同一個 ID。
        """
        first_id = self.resolve_id(first_record)
        second_id = self.resolve_id(second_record)
        if first_id == second_id:
            raise SelfEdgeError(first_id)

        first = self._get_or_create(first_record)
        second = self._get_or_create(second_record)
        first.neighbors[second.id] = first.neighbors.get(second.id, 0) + 1
        second.neighbors[first.id] = second.neighbors.get(first.id, 0) + 1

    def compile(self) -> DistanceMatrix:
        """
        計算全點對最短路徑。

        時間複雜度為 O(n^3)，是整個流程中最昂貴的步驟，每個資料集版本應只呼叫一次。
        """
        ids = self.get_nodes_ids()
        n = len(ids)
        index = {node_id: i for i, node_id in enumerate(ids)}

        dist: list[list[float]] = [[_INFINITY] * n for _ in range(n)]
        for i in range(n):
            dist[i][i] = 0

        for node_id in ids:
            row = dist[index[node_id]]
            for other_id, weight in self._nodes[node_id].neighbors.items():
                row[index[other_id]] = weight

        # k 必須是最外層迴圈
        for k in range(n):
            row_k = dist[k]
            for i in range(n):
                row_i = dist[i]
                d_ik = row_i[k]
                if d_ik == _INFINITY:
                    continue
                for j in range(n):
                    candidate = d_ik + row_k[j]
                    if candidate < row_i[j]:
                        row_i[j] = candidate

        matrix = [[UNREACHABLE if d == _INFINITY else int(d) for d in row] for row in dist]
        logging.info(f"距離矩陣計算完成，共 {n} 個節點。")
        return DistanceMatrix(ids=ids, matrix=matrix)
