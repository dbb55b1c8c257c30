# src/ontologyinsight/utils/logging_utils.py
"""
提供與日誌記錄相關的通用工具和過濾器。
"""

# 1. 標準庫導入
import logging
from collections.abc import Iterable

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

# 大型本體中逐詞彙輸出、內容只差在詞彙名稱的訊息片段。
COLLAPSED_MESSAGE_PATTERNS = ("有多個上位概念",)


class RepeatedMessageFilter(logging.Filter):
    """
    一個自訂的日誌過濾器，用於收斂包含指定片段的逐詞彙訊息。
    每個片段在一個資料集中最多放行 limit 則；其他訊息一律放行。
    """

    def __init__(self, patterns: Iterable[str] = COLLAPSED_MESSAGE_PATTERNS, limit: int = 5):
        super().__init__()
        self.patterns = tuple(patterns)
        self.limit = limit
        self._counts: dict[str, int] = dict.fromkeys(self.patterns, 0)

    def reset(self):
        """開始處理下一個資料集前歸零計數。"""
        self._counts = dict.fromkeys(self.patterns, 0)

    def filter(self, record: logging.LogRecord) -> bool:
        """
        如果訊息不包含任何指定片段，或該片段尚未達到上限，則回傳 True。
        """
        message = record.getMessage()
        for pattern in self.patterns:
            if pattern in message:
                self._counts[pattern] += 1
                if self._counts[pattern] > self.limit:
                    return False
                if self._counts[pattern] == self.limit:
                    record.msg = f"{message} (之後同類訊息不再顯示)"
                    record.args = None
                return True
        return True
