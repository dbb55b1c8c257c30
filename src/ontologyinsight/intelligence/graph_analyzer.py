# src/ontologyinsight/intelligence/graph_analyzer.py
"""
詞彙關係圖的圖論分析器：連通分量、樞紐詞彙與不可達節點對統計。
"""

# 1. 標準庫導入
import logging
from collections.abc import Hashable
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
from ontologyinsight.builders.weighted_graph import UNREACHABLE


class GraphAnalyzer:
    """
    將加權邊列表轉換為 NetworkX 無向圖並計算摘要指標。
    """

    def __init__(self, node_ids: list[Hashable], edges: list[tuple[Hashable, Hashable, int]]):
        self.graph = self._build_graph(node_ids, edges)

    @staticmethod
    def _build_graph(node_ids: list[Hashable], edges: list[tuple[Hashable, Hashable, int]]) -> nx.Graph:
        """將節點與加權邊轉換為 NetworkX 無向圖。"""
        graph = nx.Graph()
        graph.add_nodes_from(node_ids)
        for u, v, weight in edges:
            graph.add_edge(u, v, weight=weight)
        return graph

    def connected_components(self) -> list[set[Hashable]]:
        """回傳所有連通分量，依尺寸由大到小排序。"""
        return sorted(nx.connected_components(self.graph), key=len, reverse=True)

    def top_hubs(self, limit: int = 10) -> list[tuple[Hashable, float]]:
        """依度數中心性回傳前 limit 個樞紐詞彙。"""
        if self.graph.number_of_nodes() == 0:
            logging.warning("無法計算度數中心性：圖為空。")
            return []
        centrality = nx.degree_centrality(self.graph)
        ranked = sorted(centrality.items(), key=lambda item: (-item[1], str(item[0])))
        return ranked[:limit]

    @staticmethod
    def count_unreachable_pairs(distance_matrix: dict[str, Any]) -> int:
        """計算距離矩陣中互不可達的無序節點對數量。"""
        matrix = distance_matrix.get("matrix", [])
        count = 0
        for i, row in enumerate(matrix):
            count += sum(1 for d in row[i + 1 :] if d == UNREACHABLE)
        return count

    def summarize(self, distance_matrix: dict[str, Any], top_hubs: int = 10) -> dict[str, Any]:
        """產生報告使用的摘要字典。"""
        components = self.connected_components()
        summary = {
            "nodes": self.graph.number_of_nodes(),
            "edges": self.graph.number_of_edges(),
            "components": len(components),
            "largest_component": len(components[0]) if components else 0,
            "unreachable_pairs": self.count_unreachable_pairs(distance_matrix),
            "top_hubs": self.top_hubs(top_hubs),
        }
        logging.info(
            f"圖論分析完成：{summary['nodes']} 個節點，{summary['components']} 個連通分量，"
            f"{summary['unreachable_pairs']} 組不可達的節點對。"
        )
        return summary
