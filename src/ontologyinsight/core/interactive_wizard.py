# src/ontologyinsight/core/interactive_wizard.py
"""
負責在大型資料集進行距離矩陣計算前與使用者互動確認。
"""

# 1. 標準庫導入
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from ontologyinsight.core.config_loader import ConfigLoader


class InteractiveWizard:
    """
    距離矩陣的計算量隨詞彙數量呈三次方成長。
    當詞彙數量超過門檻時，由使用者決定是否繼續。
    """

    def __init__(self, config_path: Path):
        self.config_path = config_path

    def run(self, term_count: int, threshold: int) -> str:
        """執行互動式精靈，回傳 "proceed" 或 "exit"。"""
        self._display_menu(term_count, threshold)
        updates, action = self._get_user_choice()
        if updates:
            ConfigLoader.update_config_file(self.config_path, updates)
        return action

    @staticmethod
    def _display_menu(term_count: int, threshold: int):
        """顯示互動式選單給使用者。"""
        print("\n" + "=" * 60)
        logging.info(f"資料集包含 {term_count} 個詞彙，超過建議門檻 {threshold}。")
        logging.warning("全點對最短路徑的計算量為 O(n^3)，可能需要很長的時間。")
        print("-" * 60)
        print("  1. [繼續] 本次繼續計算。")
        print("  2. [總是繼續] 繼續計算，並在設定檔中記錄 force_compile，之後不再詢問。")
        print("  3. [退出] 終止處理。")
        print("=" * 60)

    @staticmethod
    def _get_user_choice() -> tuple[dict[str, Any], str]:
        """獲取並處理使用者的選擇。"""
        while True:
            choice = input("請輸入您的選擇 (1-3): ").strip()
            if choice in ("1", "2", "3"):
                break
            print("無效的輸入，請重新輸入。")

        if choice == "1":
            return {}, "proceed"
        if choice == "2":
            logging.warning("將強制執行完整計算，並記錄於設定檔。")
            return {"force_compile": True}, "proceed"
        return {}, "exit"
