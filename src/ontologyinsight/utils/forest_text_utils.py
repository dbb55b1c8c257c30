# src/ontologyinsight/utils/forest_text_utils.py
"""
提供將已編譯森林輸出為文字樹的公用函式。
"""

# 1. 標準庫導入
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


def generate_tree_structure(
    forest: dict[str, Any],
    tree_settings: dict[str, Any],
) -> list[str]:
    """
    生成已編譯森林的文字表示結構樹，支援深度與子節點數量限制。

    Args:
        forest: CompiledForest.to_dict() 的輸出。
        tree_settings: 包含限制規則的字典，例如：
                       {
                           "max_depth": 4,
                           "max_children": 25
                       }

    Returns:
        一個包含樹狀結構字串的列表。
    """
    max_depth = tree_settings.get("max_depth")
    max_children = tree_settings.get("max_children")

    tree_lines = [f"{forest.get('displayName', 'root')}/"]

    def recurse(children: list[dict[str, Any]], prefix: str, depth: int):
        """遞迴地建構文字樹的內部輔助函式。"""
        if max_depth is not None and depth > max_depth:
            return

        shown = children if max_children is None else children[:max_children]
        hidden = len(children) - len(shown)

        pointers = ["├── "] * (len(shown) - 1) + ["└── "]
        if hidden:
            pointers[-1] = "├── "
        for pointer, node in zip(pointers, shown, strict=False):
            grandchildren = node.get("children", [])
            suffix = "/" if grandchildren else ""
            tree_lines.append(f"{prefix}{pointer}{node.get('displayName', node.get('id'))}{suffix}")
            if grandchildren:
                extension = "│   " if pointer == "├── " else "    "
                recurse(grandchildren, prefix + extension, depth + 1)

        if hidden:
            tree_lines.append(f"{prefix}└── ... (另有 {hidden} 個)")

    recurse(forest.get("children", []), "", 1)
    return tree_lines
