# src/ontologyinsight/core/__init__.py
"""
OntologyInsight 的核心協調器套件。

此套件負責將解析、建構、渲染和報告等子系統串連起來，
執行完整的資料集處理流程。
"""

from .config_loader import ConfigLoader
from .dataset_processor import DatasetProcessor
from .interactive_wizard import InteractiveWizard
from .ontology_assembler import OntologyAssembler, OntologyBundle, OntologyCycleError

__all__ = [
    "ConfigLoader",
    "DatasetProcessor",
    "InteractiveWizard",
    "OntologyAssembler",
    "OntologyBundle",
    "OntologyCycleError",
]
