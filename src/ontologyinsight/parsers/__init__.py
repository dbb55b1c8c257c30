# src/ontologyinsight/parsers/__init__.py
"""
解析器套件，負責讀取本體與定義表等原始資料集。
"""

from .definition_parser import TermDefinition, load_definition_rows, normalize_term_name, parse_definition_row
from .ontology_parser import BroaderRelation, OntologyFormatError, extract_term_name, iter_broader_relations

__all__ = [
    "BroaderRelation",
    "OntologyFormatError",
    "TermDefinition",
    "extract_term_name",
    "iter_broader_relations",
    "load_definition_rows",
    "normalize_term_name",
    "parse_definition_row",
]
