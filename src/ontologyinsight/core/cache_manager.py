# src/ontologyinsight/core/cache_manager.py
"""
負責管理已編譯資料集結果的快取。

核心職責：
1. 計算資料集檔案與設定的指紋 (Fingerprinting)。
2. 管理快取的生命週期 (載入、更新、儲存)。
3. 以原子寫入 (Atomic Writes) 避免寫入中斷導致快取損毀。

距離矩陣的計算為 O(n^3)，同一個資料集版本只應計算一次，其餘執行直接讀取快取。
"""

# 1. 標準庫導入
import contextlib
import hashlib
import json
import logging
import os
import pickle
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

# 快取版本號：當組裝邏輯或輸出格式發生重大變更時，應升級此版本號以強制快取失效。
CACHE_VERSION = "1.0.0"
CACHE_FILENAME = "compiled_dataset.pkl"


class CacheManager:
    """
    管理單一資料集編譯結果快取的類別。
    """

    def __init__(self, cache_dir: Path, fingerprint: str):
        """
        初始化 CacheManager。

        Args:
            cache_dir: 快取存放目錄。
            fingerprint: 資料集檔案與相關設定的雜湊指紋 (任一變更時快取即失效)。
        """
        self.cache_dir = cache_dir
        self.fingerprint = fingerprint
        self.cache_file_path = cache_dir / CACHE_FILENAME
        self.cache_data: Any | None = None
        self.dirty = False

        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def load(self):
        """
        從磁碟載入快取。
        如果版本不匹配或指紋不同，則視為無效快取。
        """
        self.cache_data = None
        if not self.cache_file_path.exists():
            logging.debug("未發現現有快取，將執行完整編譯。")
            return

        try:
            with open(self.cache_file_path, "rb") as f:
                loaded_data = pickle.load(f)

            meta = loaded_data.get("_meta", {})
            if meta.get("version") != CACHE_VERSION:
                logging.info(f"快取版本不匹配 (舊: {meta.get('version')}, 新: {CACHE_VERSION})，快取已失效。")
                return

            if meta.get("fingerprint") != self.fingerprint:
                logging.info("資料集或設定已變更，快取已失效。")
                return

            self.cache_data = loaded_data.get("entry")
            logging.info("成功載入已編譯資料集的快取。")

        except (pickle.UnpicklingError, EOFError, AttributeError, ImportError) as e:
            logging.warning(f"快取檔案損毀或無法讀取，將重置快取: {e}")
        except Exception as e:
            logging.error(f"載入快取時發生未預期的錯誤: {e}")

    def get(self) -> Any | None:
        """回傳快取的編譯結果；未命中時回傳 None。"""
        return self.cache_data

    def update(self, data: Any):
        """以新的編譯結果取代快取內容。"""
        self.cache_data = data
        self.dirty = True

    def save(self):
        """
        將快取寫入磁碟。
        使用原子寫入 (Atomic Write) 以防止寫入中斷導致損毀。
        """
        if not self.dirty:
            logging.debug("快取未變更，跳過寫入。")
            return

        payload = {
            "_meta": {
                "version": CACHE_VERSION,
                "fingerprint": self.fingerprint,
            },
            "entry": self.cache_data,
        }

        temp_path = self.cache_file_path.with_suffix(".tmp")
        try:
            with open(temp_path, "wb") as f:
                pickle.dump(payload, f, protocol=pickle.HIGHEST_PROTOCOL)

            os.replace(temp_path, self.cache_file_path)
            logging.info(f"快取已更新並儲存至: {self.cache_file_path}")
            self.dirty = False
        except Exception as e:
            logging.error(f"儲存快取時發生錯誤: {e}")
            if temp_path.exists():
                with contextlib.suppress(OSError):
                    os.remove(temp_path)

    @staticmethod
    def compute_file_hash(file_path: Path) -> str:
        """計算檔案內容的 MD5 雜湊值。"""
        hasher = hashlib.md5()
        try:
            with open(file_path, "rb") as f:
                for chunk in iter(lambda: f.read(4096), b""):
                    hasher.update(chunk)
            return hasher.hexdigest()
        except OSError:
            return ""

    @classmethod
    def compute_fingerprint(cls, files: list[Path], relevant_config: dict[str, Any]) -> str:
        """結合資料集檔案內容與影響編譯結果的設定，計算快取指紋。"""
        parts = {
            "files": [cls.compute_file_hash(path) for path in files],
            "config": relevant_config,
        }
        serialized = json.dumps(parts, sort_keys=True, default=str)
        return hashlib.md5(serialized.encode("utf-8")).hexdigest()
