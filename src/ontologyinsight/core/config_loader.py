# src/ontologyinsight/core/config_loader.py
"""
負責載入、合併與更新資料集設定。
"""

# 1. 標準庫導入
import copy
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml
from ruamel.yaml import YAML

# 3. 本專案導入
# (無)

DEFAULT_DATASET_CONFIG: dict[str, Any] = {
    "output_dir": "output",
    "analysis_types": [],
    "force_compile": False,
    "ontology": {
        "term_uri_prefix": "http://www.informea.org/terms/",
        "excluded_term_prefixes": ["xl_en"],
        "descriptions_key": "Description",
    },
    "definitions": {
        "encoding": "ISO-8859-3",
        "escape_char": "\\",
        "column_limits": {"topics": 4, "synonyms": 12, "definitions": 4},
    },
    "distance_matrix": {
        "max_terms_before_wizard": 3000,
    },
    "visualization": {
        "tree_graph": {
            "layout_engine": "dot",
            "dpi": 200,
            "render_timeout": 120,
            "rankdir": "LR",
            "max_depth": 3,
            "node_styles": {
                "font_size": 10,
                "root_color": "#EAEAEA",
            },
        },
    },
    "report_settings": {
        "tree_view": {"max_depth": 4, "max_children": 25},
        "top_hubs": 10,
    },
}


class ConfigLoader:
    """一個處理資料集設定檔載入與合併的類別。"""

    def __init__(self, config_path: Path):
        self.config_path = config_path
        self.config = self._load_yaml(config_path)
        if self.config is not None:
            self.config = self._merge_configs(copy.deepcopy(DEFAULT_DATASET_CONFIG), self.config)

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any] | None:
        """安全地載入一個 YAML 檔案。"""
        if not path.is_file():
            logging.error(f"指定的設定檔不存在: {path}")
            return None
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logging.error(f"解析設定檔 '{path.name}' 時發生錯誤: {e}")
            return None
        if data is None:
            return {}
        if not isinstance(data, dict):
            logging.error(f"設定檔 '{path.name}' 的頂層必須是對應表 (mapping)。")
            return None
        return data

    @staticmethod
    def _merge_configs(default: dict, user: dict) -> dict:
        """遞迴地合併使用者設定到預設設定中。"""
        for key, value in user.items():
            if isinstance(value, dict) and isinstance(default.get(key), dict):
                default[key] = ConfigLoader._merge_configs(default[key], value)
            else:
                default[key] = value
        return default

    def resolve_path(self, key: str) -> Path | None:
        """將設定中的相對路徑解析為相對於設定檔所在目錄的絕對路徑。"""
        value = self.config.get(key) if self.config else None
        if not value:
            return None
        return (self.config_path.parent / value).resolve()

    @staticmethod
    def update_config_file(config_path: Path, updates: dict[str, Any]):
        """使用 ruamel.yaml 安全地更新設定檔，保留註解和格式。"""
        yaml_loader = YAML()
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml_loader.load(f)

            for key, value in updates.items():
                keys = key.split(".")
                d = config_data
                for k in keys[:-1]:
                    d = d.setdefault(k, {})
                d[keys[-1]] = value

            with open(config_path, "w", encoding="utf-8") as f:
                yaml_loader.dump(config_data, f)
            logging.info(f"已自動更新設定檔: {config_path.name}")
        except Exception as e:
            logging.error(f"自動更新設定檔 '{config_path.name}' 時失敗: {e}")
