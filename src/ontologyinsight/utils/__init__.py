# src/ontologyinsight/utils/__init__.py
"""
通用工具函式套件。
"""

from .color_utils import generate_color_palette, get_analogous_dark_color
from .forest_text_utils import generate_tree_structure
from .logging_utils import RepeatedMessageFilter
from .path_utils import find_project_root

__all__ = [
    "RepeatedMessageFilter",
    "find_project_root",
    "generate_color_palette",
    "generate_tree_structure",
    "get_analogous_dark_color",
]
