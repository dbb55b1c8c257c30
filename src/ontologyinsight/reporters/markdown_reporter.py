# src/ontologyinsight/reporters/markdown_reporter.py
"""
提供將資料集處理結果匯總為單一 Markdown 報告的功能。
"""

# 1. 標準庫導入
import datetime
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from ontologyinsight.utils.forest_text_utils import generate_tree_structure


def _format_ratio(part: int, whole: int) -> str:
    if not whole:
        return f"{part} / 0"
    return f"{part} / {whole} ({part / whole:.1%})"


def _generate_overview_table(stats: dict[str, Any], graph_summary: dict[str, Any]) -> list[str]:
    """生成資料集概況表格。"""
    rows = [
        ("本體紀錄數", stats.get("ontology_records", 0)),
        ("上位概念關係數", stats.get("relations", 0)),
        ("樹中詞彙數", stats.get("terms", 0)),
        ("頂層詞彙數", stats.get("roots", 0)),
        ("定義配對", _format_ratio(stats.get("matched_definitions", 0), stats.get("definition_rows", 0))),
        ("詞彙定義覆蓋率", _format_ratio(stats.get("matched_definitions", 0), stats.get("terms", 0))),
    ]
    if graph_summary:
        rows.extend(
            [
                ("連通分量數", graph_summary.get("components", 0)),
                ("最大連通分量", graph_summary.get("largest_component", 0)),
                ("不可達節點對", graph_summary.get("unreachable_pairs", 0)),
            ]
        )

    lines = ["| 指標 | 數值 |", "| --- | --- |"]
    lines.extend(f"| {label} | {value} |" for label, value in rows)
    return lines


def generate_markdown_report(
    dataset_name: str,
    output_path: Path,
    analysis_results: dict[str, Any],
    report_settings: dict[str, Any],
):
    """
    生成一份資料集摘要 Markdown 報告。

    analysis_results 支援的鍵：
        stats: OntologyBundle.stats
        ontology_tree: CompiledForest.to_dict() 的輸出
        graph_summary: GraphAnalyzer.summarize() 的輸出
        tree_dot_source: 本體樹的 DOT 原始碼 (可選)
    """
    report_parts = []
    analysis_time = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    report_parts.append(f"# OntologyInsight 資料集報告: {dataset_name}")
    report_parts.append(f"**分析時間**: {analysis_time}")

    graph_summary = analysis_results.get("graph_summary", {})
    report_parts.append("\n## 1. 資料集概況")
    report_parts.extend(_generate_overview_table(analysis_results.get("stats", {}), graph_summary))

    top_hubs = graph_summary.get("top_hubs", [])
    if top_hubs:
        report_parts.append("\n## 2. 樞紐詞彙 (度數中心性)")
        for i, (term, score) in enumerate(top_hubs):
            report_parts.append(f"{i + 1}. {str(term).replace('-', ' ')} ({score:.4f})")

    ontology_tree = analysis_results.get("ontology_tree")
    if ontology_tree:
        report_parts.append("\n## 3. 本體樹總覽")
        report_parts.append("<details>\n<summary>點擊展開/摺疊本體樹</summary>\n")
        report_parts.append("```")
        report_parts.extend(generate_tree_structure(ontology_tree, report_settings.get("tree_view", {})))
        report_parts.append("```\n</details>\n")

    tree_dot = analysis_results.get("tree_dot_source")
    if tree_dot:
        report_parts.append("## 4. 本體樹 DOT 原始碼")
        report_parts.append("<details>\n<summary>點擊展開/摺疊 DOT 原始碼</summary>\n")
        report_parts.append("```dot")
        report_parts.append(tree_dot)
        report_parts.append("```\n</details>\n")

    try:
        final_report = "\n".join(report_parts)
        output_path.write_text(final_report, encoding="utf-8")
        logging.info(f"Markdown 報告已成功儲存至: {output_path}")
    except Exception as e:
        logging.error(f"寫入 Markdown 報告時發生錯誤: {e}")
