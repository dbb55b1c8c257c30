# src/ontologyinsight/parsers/ontology_parser.py
"""
解析轉換為 JSON 的 RDF 本體資料，萃取「上位概念」(broader) 父子關係。

此處的過濾規則與特定資料集相關：重複的詞彙、標籤類詞彙、沒有上位概念的詞彙以及上位概念指向自己的關係
都會在進入建構器前被略過。
"""

# 1. 標準庫導入
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

DEFAULT_TERM_URI_PREFIX = "http://www.informea.org/terms/"


class OntologyFormatError(ValueError):
    """本體資料的格式不符合預期。"""


@dataclass(frozen=True)
class BroaderRelation:
    child: str
    child_uri: str
    parent: str
    parent_uri: str


def extract_term_name(uri: str, prefix: str = DEFAULT_TERM_URI_PREFIX) -> str:
    """
    從詞彙 URI 中取出詞彙名稱，即前綴之後的部分。

    Raises:
        OntologyFormatError: 若 URI 不以指定前綴開頭。
    """
    if not isinstance(uri, str) or not uri.startswith(prefix):
        raise OntologyFormatError(f"詞彙 URI 不以 '{prefix}' 開頭: {uri!r}")
    return uri[len(prefix) :]


def _resolve_broader_uri(term_name: str, broader: Any) -> str | None:
    """取得上位概念的 URI。若有多個上位概念，只採用第一個。"""
    if isinstance(broader, list):
        if not broader:
            return None
        if len(broader) > 1:
            ignored = ", ".join(str(b.get("@resource")) for b in broader[1:] if isinstance(b, dict))
            logging.warning(f"詞彙 '{term_name}' 有多個上位概念，僅採用第一個，忽略: {ignored}")
        broader = broader[0]
    if not isinstance(broader, dict):
        return None
    return broader.get("@resource")


def iter_broader_relations(data: dict[str, Any], settings: dict[str, Any] | None = None) -> Iterator[BroaderRelation]:
    """
    逐筆產生本體中合格的父子關係。

    Args:
        data: 本體 JSON，詞彙列表位於 settings["descriptions_key"] (預設 "Description")。
        settings: 設定字典，支援 term_uri_prefix、excluded_term_prefixes、descriptions_key。

    Raises:
        OntologyFormatError: 資料缺少詞彙列表、URI 格式錯誤或父詞彙名稱為空。
    """
    settings = settings or {}
    prefix = settings.get("term_uri_prefix", DEFAULT_TERM_URI_PREFIX)
    excluded_prefixes = tuple(settings.get("excluded_term_prefixes", ["xl_en"]))
    descriptions_key = settings.get("descriptions_key", "Description")

    descriptions = data.get(descriptions_key) if isinstance(data, dict) else None
    if not isinstance(descriptions, list):
        raise OntologyFormatError(f"本體資料中缺少 '{descriptions_key}' 列表。")

    seen: set[str] = set()
    for term in descriptions:
        if not isinstance(term, dict):
            raise OntologyFormatError(f"'{descriptions_key}' 中的項目必須是物件: {term!r}")
        term_uri = term.get("@about")
        name = extract_term_name(term_uri, prefix)
        if name in seen:
            logging.debug(f"略過重複的詞彙: {name}")
            continue
        if excluded_prefixes and name.startswith(excluded_prefixes):
            continue
        if "broader" not in term:
            continue

        parent_uri = _resolve_broader_uri(name, term["broader"])
        if parent_uri is None:
            raise OntologyFormatError(f"詞彙 '{name}' 的上位概念缺少 '@resource'。")
        parent = extract_term_name(parent_uri, prefix)
        if not parent:
            raise OntologyFormatError(f"詞彙 '{name}' 的上位概念名稱為空。")
        if parent == name:
            logging.warning(f"詞彙 '{name}' 的上位概念指向自己，已略過此關係。")
            continue

        seen.add(name)
        yield BroaderRelation(child=name, child_uri=term_uri, parent=parent, parent_uri=parent_uri)
