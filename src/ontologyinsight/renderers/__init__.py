# src/ontologyinsight/renderers/__init__.py
"""
渲染器套件，負責將已編譯的本體樹視覺化為圖檔。
"""

from .tree_renderer import generate_tree_dot_source, render_tree_graph

__all__ = [
    "generate_tree_dot_source",
    "render_tree_graph",
]
