# src/ontologyinsight/parsers/definition_parser.py
"""
解析詞彙定義表 (CSV)，並將定義表中的詞彙名稱正規化為本體中使用的形式。
"""

# 1. 標準庫導入
import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

DEFAULT_COLUMN_LIMITS = {"topics": 4, "synonyms": 12, "definitions": 4}
_COLUMN_PREFIXES = {"topics": "Topic #", "synonyms": "Synonym #", "definitions": "Definition #"}


@dataclass
class TermDefinition:
    term: str
    topics: list[str] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    definitions: list[str] = field(default_factory=list)


def normalize_term_name(name: str) -> str:
    """
    讓定義表中的名稱與本體詞彙相符：移除括號與單引號、
    合併連續空白、以 '-' 取代空白並轉為小寫。
    """
    for token in ("(", ")", "'"):
        name = name.replace(token, "")
    name = name.replace("  ", " ")
    return name.replace(" ", "-").lower()


def _collect_columns(row: dict[str, Any], prefix: str, limit: int) -> list[str]:
    values = []
    for i in range(1, limit + 1):
        value = row.get(f"{prefix}{i}")
        if value:
            values.append(value)
    return values


def parse_definition_row(row: dict[str, Any], limits: dict[str, int] | None = None) -> TermDefinition:
    """將定義表中的一列轉換為 TermDefinition，空白欄位會被略過。"""
    limits = {**DEFAULT_COLUMN_LIMITS, **(limits or {})}
    return TermDefinition(
        term=normalize_term_name(row.get("Term") or ""),
        topics=_collect_columns(row, _COLUMN_PREFIXES["topics"], limits["topics"]),
        synonyms=_collect_columns(row, _COLUMN_PREFIXES["synonyms"], limits["synonyms"]),
        definitions=_collect_columns(row, _COLUMN_PREFIXES["definitions"], limits["definitions"]),
    )


def load_definition_rows(path: Path, settings: dict[str, Any] | None = None) -> list[dict[str, str]]:
    """
    讀取定義表 CSV，第一列為欄位名稱，略過空白列。

    Args:
        path: CSV 檔案路徑。
        settings: 支援 encoding (預設 ISO-8859-3) 與 escape_char (預設反斜線)。
    """
    settings = settings or {}
    encoding = settings.get("encoding", "ISO-8859-3")
    escape_char = settings.get("escape_char", "\\")

    with open(path, encoding=encoding, newline="") as f:
        reader = csv.DictReader(f, escapechar=escape_char)
        rows = [row for row in reader if any((value or "").strip() for value in row.values() if isinstance(value, str))]

    logging.info(f"從 '{path.name}' 讀取了 {len(rows)} 筆定義。")
    return rows
