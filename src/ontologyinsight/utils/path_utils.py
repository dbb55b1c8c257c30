# src/ontologyinsight/utils/path_utils.py
"""
提供定位 OntologyInsight 工作區根目錄的工具函式。
"""

# 1. 標準庫導入
import importlib.resources
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

WORKSPACE_MARKER = "configs/workspace.template.yaml"


def _search_upwards(start: Path, marker: str) -> Path | None:
    for candidate in (start, *start.parents):
        if (candidate / marker).exists():
            return candidate
    return None


def find_project_root(marker: str = WORKSPACE_MARKER, start: Path | None = None) -> Path:
    """
    找出包含 configs/ 工作區的根目錄，__main__ 由此讀取 workspace.yaml 與各資料集設定。

    先從 start (預設為當前工作目錄) 向上尋找，讓使用者可以在自己的資料集工作區中執行；
    找不到時再從套件所在位置向上尋找，對應以 `pip install -e .` 安裝的原始碼目錄。

    Raises:
        FileNotFoundError: 兩個起點向上都找不到標記檔案。
    """
    start = (start or Path.cwd()).resolve()
    found = _search_upwards(start, marker)
    if found is not None:
        return found

    package_dir = Path(str(importlib.resources.files("ontologyinsight")))
    found = _search_upwards(package_dir, marker)
    if found is not None:
        return found

    raise FileNotFoundError(f"無法從 '{start}' 或套件目錄 '{package_dir}' 向上找到工作區標記檔案: {marker}")
