# src/ontologyinsight/core/ontology_assembler.py
"""
將本體與定義表組裝為可交付的樹狀結構與距離矩陣。

同一份本體關係會同時餵給 ForestBuilder 與 WeightedGraph，兩者使用相同的節點 ID；
編譯後再與每個詞彙的定義資料合併。
"""

# 1. 標準庫導入
import logging
import operator
from dataclasses import dataclass, field
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from ontologyinsight.builders import CycleDetected, ForestBuilder, WeightedGraph
from ontologyinsight.parsers.definition_parser import parse_definition_row
from ontologyinsight.parsers.ontology_parser import iter_broader_relations


class OntologyCycleError(Exception):
    """本體的上位概念關係中存在環，無法產生樹狀結構。"""

    def __init__(self, result: CycleDetected):
        super().__init__(f"本體的上位概念關係中偵測到環 (節點: {result.node_id!r})。")
        self.result = result


@dataclass
class OntologyBundle:
    """
    組裝結果。tree 與 distance_matrix 為可直接序列化為 JSON 的純字典，
    edges 僅供分析與報告使用。
    """

    tree: dict[str, Any]
    distance_matrix: dict[str, Any]
    edges: list[tuple[str, str, int]] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)


def _display_term(name: str) -> str:
    return name.replace("-", " ")


class OntologyAssembler:
    """以單次循序掃描餵入資料，再一次性編譯兩種結構的協調器。"""

    def __init__(self, ontology_settings: dict[str, Any] | None = None, definition_settings: dict[str, Any] | None = None):
        self.ontology_settings = ontology_settings or {}
        self.definition_settings = definition_settings or {}
        self.forest = ForestBuilder(identifier=operator.itemgetter("id"))
        self.graph = WeightedGraph()
        self.stats: dict[str, int] = {}

    def add_ontology(self, data: dict[str, Any]) -> int:
        """將本體中所有合格的上位概念關係加入兩個建構器，回傳加入的關係數。"""
        relation_count = 0
        for relation in iter_broader_relations(data, self.ontology_settings):
            self.forest.add_child(
                {"id": relation.parent, "uri": relation.parent_uri},
                {"id": relation.child, "uri": relation.child_uri},
            )
            self.graph.add_edge(relation.parent, relation.child)
            relation_count += 1

        total = len(data.get(self.ontology_settings.get("descriptions_key", "Description"), []))
        logging.info(f"本體中有 {self.forest.size()} 個詞彙進入樹狀結構 (共 {total} 筆紀錄)。")
        self.stats["ontology_records"] = total
        self.stats["relations"] = relation_count
        return relation_count

    def attach_definitions(self, rows: list[dict[str, Any]]) -> int:
        """
        將定義表與本體詞彙配對，並將主題、同義詞與定義寫入節點 payload。
        同一個同義詞只會出現在第一個使用它的詞彙上。
        """
        limits = self.definition_settings.get("column_limits")
        used_synonyms: set[str] = set()
        matched = 0
        for row in rows:
            definition = parse_definition_row(row, limits)
            node = self.forest.get_node(definition.term)
            if node is None:
                continue

            alternative_names = []
            for synonym in definition.synonyms:
                if synonym == definition.term or synonym in used_synonyms:
                    continue
                used_synonyms.add(synonym)
                alternative_names.append(synonym)

            node.payload["topics"] = definition.topics
            node.payload["alternative_names"] = alternative_names
            node.payload["definitions"] = definition.definitions
            node.payload["Term"] = definition.term
            matched += 1

        logging.info(f"共 {len(used_synonyms)} 個不重複的同義詞。")
        logging.info(f"成功配對 {matched} 筆定義 (共 {len(rows)} 筆)，樹中共 {self.forest.size()} 個詞彙。")
        self.stats["definition_rows"] = len(rows)
        self.stats["matched_definitions"] = matched
        return matched

    def _term_metadata(self, term_id: str) -> dict[str, Any]:
        node = self.forest.get_node(term_id)
        payload = node.payload if node is not None else {}
        return {
            "uri": payload.get("uri"),
            "name": _display_term(term_id),
            "alternative_names": [_display_term(name) for name in payload.get("alternative_names", [])],
            "definitions": payload.get("definitions", []),
            "topics": payload.get("topics", []),
        }

    def _collect_edges(self) -> list[tuple[str, str, int]]:
        edges = []
        seen: set[frozenset] = set()
        for node_id in self.graph.get_nodes_ids():
            for other_id, weight in self.graph.get_node(node_id).neighbors.items():
                pair = frozenset((node_id, other_id))
                if pair in seen:
                    continue
                seen.add(pair)
                edges.append((node_id, other_id, weight))
        return edges

    def assemble(self) -> OntologyBundle:
        """
        編譯森林與距離矩陣並與定義資料合併。

        Raises:
            OntologyCycleError: 若森林編譯時偵測到環。
        """
        compiled = self.forest.compile()
        if isinstance(compiled, CycleDetected):
            raise OntologyCycleError(compiled)

        distances = self.graph.compile()
        distance_data = distances.to_dict()
        distance_data["nodes"] = [self._term_metadata(term_id) for term_id in distances.ids]

        self.stats["terms"] = self.forest.size()
        self.stats["roots"] = len(compiled.children)
        return OntologyBundle(
            tree={"ontologyTree": compiled.to_dict(), "ontologyList": self.forest.get_nodes_ids()},
            distance_matrix=distance_data,
            edges=self._collect_edges(),
            stats=dict(self.stats),
        )
