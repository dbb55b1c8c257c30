# src/ontologyinsight/renderers/tree_renderer.py
"""
封裝本體樹的 Graphviz 渲染邏輯。
支援深度限制與可配置的渲染超時 (render_timeout)。
"""

# 1. 標準庫導入
import logging
import subprocess
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import graphviz

# 3. 本專案導入
from ontologyinsight.utils.color_utils import generate_color_palette, get_analogous_dark_color

SYNTHETIC_ROOT_NODE = "__forest_root__"


def _node_label(node: dict[str, Any]) -> str:
    return str(node.get("displayName", node["id"])).replace("-", " ")


def generate_tree_dot_source(forest: dict[str, Any], dataset_name: str, tree_graph_config: dict[str, Any]) -> str:
    """
    將已編譯森林轉換為 DOT 原始碼。每棵頂層子樹使用一種顏色，頂層詞彙以較深的邊框標示。
    """
    layout_engine = tree_graph_config.get("layout_engine", "dot")
    max_depth = tree_graph_config.get("max_depth")
    node_styles = tree_graph_config.get("node_styles", {})
    font_size = str(node_styles.get("font_size", 10))
    root_color = node_styles.get("root_color", "#EAEAEA")

    dot = graphviz.Digraph("OntologyTree", engine=layout_engine)
    dot.attr(
        label=f"{dataset_name} 本體樹",
        labelloc="t",
        fontname="Microsoft YaHei",
        charset="UTF-8",
        rankdir=tree_graph_config.get("rankdir", "LR"),
    )
    dot.attr("node", shape="box", style="rounded,filled", fontname="Arial", fontsize=font_size)
    dot.attr("edge", color="gray50", arrowsize="0.6")

    top_level = forest.get("children", [])
    if not top_level:
        dot.node("empty_tree", "樹中無任何節點", shape="plaintext")
        return dot.source

    dot.node(SYNTHETIC_ROOT_NODE, forest.get("displayName", "root"), fillcolor=root_color)
    palette = generate_color_palette(len(top_level))

    rendered = 0
    for color, subtree_root in zip(palette, top_level, strict=False):
        border_color = get_analogous_dark_color(color)
        stack = [(subtree_root, SYNTHETIC_ROOT_NODE, 1)]
        while stack:
            node, parent_name, depth = stack.pop()
            name = f"term_{rendered}"
            attrs = {"fillcolor": color}
            if depth == 1:
                attrs.update({"color": border_color, "penwidth": "2.0"})
            payload = node.get("payload")
            definitions = payload.get("definitions") if isinstance(payload, dict) else None
            if definitions:
                attrs["tooltip"] = definitions[0]
            dot.node(name, _node_label(node), **attrs)
            dot.edge(parent_name, name)
            rendered += 1
            if max_depth is None or depth < max_depth:
                stack.extend((child, name, depth + 1) for child in reversed(node.get("children", [])))

    logging.info(f"本體樹 DOT 原始碼已生成，包含 {rendered} 個詞彙節點。")
    return dot.source


def render_tree_graph(
    forest: dict[str, Any],
    output_path: Path,
    dataset_name: str,
    tree_graph_config: dict[str, Any],
) -> str:
    """
    使用 graphviz 將本體樹渲染成圖片檔案，並回傳 DOT 原始碼。渲染失敗只記錄錯誤，不拋出例外。
    """
    layout_engine = tree_graph_config.get("layout_engine", "dot")
    dpi = tree_graph_config.get("dpi", 200)
    render_timeout = tree_graph_config.get("render_timeout", 120)

    dot_source = generate_tree_dot_source(forest, dataset_name, tree_graph_config)
    logging.info(f"準備將本體樹渲染至: {output_path} (DPI: {dpi}, Timeout: {render_timeout}s)")
    command = [layout_engine, f"-T{output_path.suffix[1:]}", f"-Gdpi={dpi}"]
    try:
        process = subprocess.run(
            command, input=dot_source.encode("utf-8"), capture_output=True, check=True, timeout=render_timeout
        )
        with open(output_path, "wb") as f:
            f.write(process.stdout)
        logging.info(f"圖表已成功儲存至: {output_path}")
    except subprocess.TimeoutExpired:
        logging.error(f"Graphviz 渲染超時 (超過 {render_timeout} 秒)。")
        logging.info("建議：減少 'max_depth'，或在設定中增加 'render_timeout'。")
    except subprocess.CalledProcessError as e:
        logging.error(f"Graphviz ({layout_engine}) 執行時返回錯誤。")
        error_message = e.stderr.decode("utf-8", errors="ignore")
        logging.error(f"Graphviz 錯誤訊息:\n{error_message}")
    except FileNotFoundError:
        logging.error(f"Graphviz 執行檔 '{layout_engine}' 未找到。請確保 Graphviz 已安裝並已加入系統 PATH。")
    except Exception as e:
        logging.error(f"渲染圖表時發生錯誤: {e}")

    return dot_source
