# src/ontologyinsight/reporters/__init__.py
"""
報告生成器套件，負責將資料集處理結果匯總為報告。
"""

from .markdown_reporter import generate_markdown_report

__all__ = ["generate_markdown_report"]
