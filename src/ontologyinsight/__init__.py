# src/ontologyinsight/__init__.py
"""
OntologyInsight：將階層式本體與詞彙定義表轉換為本體樹與詞彙距離矩陣。
"""

__version__ = "0.1.0"
