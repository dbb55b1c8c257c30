# src/ontologyinsight/intelligence/__init__.py
"""
圖論分析套件。
"""

from .graph_analyzer import GraphAnalyzer

__all__ = ["GraphAnalyzer"]
