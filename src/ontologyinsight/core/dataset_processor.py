# src/ontologyinsight/core/dataset_processor.py
"""
OntologyInsight 的核心處理引擎。
"""

# 1. 標準庫導入
import json
import logging
import sys
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from ontologyinsight.core.cache_manager import CacheManager
from ontologyinsight.core.config_loader import ConfigLoader
from ontologyinsight.core.interactive_wizard import InteractiveWizard
from ontologyinsight.core.ontology_assembler import OntologyAssembler, OntologyBundle
from ontologyinsight.intelligence.graph_analyzer import GraphAnalyzer
from ontologyinsight.parsers.definition_parser import load_definition_rows
from ontologyinsight.renderers.tree_renderer import render_tree_graph
from ontologyinsight.reporters.markdown_reporter import generate_markdown_report


class DatasetProcessor:
    """一個處理單一資料集完整流程的類別：解析、編譯、快取與輸出。"""

    def __init__(self, config_path: Path):
        self.config_path = config_path
        self.dataset_name = config_path.stem
        self.config_loader = ConfigLoader(config_path)
        self.config = self.config_loader.config

    def _relevant_config(self) -> dict[str, Any]:
        """影響編譯結果的設定；這些設定變更時快取應視為失效。"""
        return {
            "ontology": self.config.get("ontology"),
            "definitions": self.config.get("definitions"),
        }

    def run(self) -> OntologyBundle | None:
        """執行完整的資料集處理流程，回傳組裝結果；中止時回傳 None。"""
        if self.config is None:
            logging.error(f"因設定檔 '{self.config_path.name}' 載入失敗，終止處理。")
            return None

        logging.info(f"========== 開始處理資料集: {self.dataset_name} ==========")

        ontology_path, definitions_path, output_dir = self._prepare_paths()
        if not ontology_path or not output_dir:
            logging.error("準備路徑時失敗，終止處理。")
            return None

        input_files = [p for p in (ontology_path, definitions_path) if p]
        fingerprint = CacheManager.compute_fingerprint(input_files, self._relevant_config())
        cache_manager = CacheManager(output_dir / ".cache", fingerprint)
        cache_manager.load()

        bundle = cache_manager.get()
        if bundle is not None:
            logging.info("資料集未變更，沿用快取中的編譯結果。")
        else:
            bundle = self._assemble(ontology_path, definitions_path)
            if bundle is None:
                return None
            cache_manager.update(bundle)
            cache_manager.save()

        self._write_json(output_dir / f"{self.dataset_name}_tree.json", bundle.tree)
        self._write_json(output_dir / f"{self.dataset_name}_distance_matrix.json", bundle.distance_matrix)

        analysis_types = self.config.get("analysis_types") or []
        if not isinstance(analysis_types, list):
            logging.warning(f"設定檔 '{self.config_path.name}' 中 'analysis_types' 格式不正確，已略過額外分析。")
            analysis_types = []

        report_analysis_results: dict[str, Any] = {}
        for analysis_type in analysis_types:
            self._run_analysis(analysis_type, bundle, output_dir, report_analysis_results)

        logging.info(f"========== 資料集 '{self.dataset_name}' 處理完成 ==========\n")
        return bundle

    def _prepare_paths(self) -> tuple[Path | None, Path | None, Path | None]:
        """根據設定準備所有需要的路徑，相對路徑以設定檔所在目錄為基準。"""
        ontology_path = self.config_loader.resolve_path("ontology_path")
        if not ontology_path or not ontology_path.is_file():
            logging.error(f"設定檔 '{self.config_path.name}' 中的 'ontology_path' 缺少或不存在: {ontology_path}")
            return None, None, None

        definitions_path = self.config_loader.resolve_path("definitions_path")
        if definitions_path and not definitions_path.is_file():
            logging.warning(f"找不到定義表 '{definitions_path}'，將只輸出本體結構。")
            definitions_path = None

        output_dir = self.config_loader.resolve_path("output_dir")
        if not output_dir:
            return None, None, None
        output_dir.mkdir(parents=True, exist_ok=True)

        logging.info(f"本體資料: {ontology_path}")
        logging.info(f"輸出目錄: {output_dir}")
        return ontology_path, definitions_path, output_dir

    def _assemble(self, ontology_path: Path, definitions_path: Path | None) -> OntologyBundle | None:
        """解析資料集並編譯兩種結構。格式錯誤與結構錯誤會直接拋出給呼叫者。"""
        try:
            with open(ontology_path, encoding="utf-8") as f:
                ontology = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logging.error(f"讀取本體資料 '{ontology_path.name}' 時發生錯誤: {e}")
            return None

        definition_settings = self.config.get("definitions", {})
        assembler = OntologyAssembler(self.config.get("ontology", {}), definition_settings)

        logging.info("--- [Phase 1] 解析本體上位概念關係 ---")
        assembler.add_ontology(ontology)

        if definitions_path:
            logging.info("--- [Phase 2] 配對詞彙定義 ---")
            try:
                rows = load_definition_rows(definitions_path, definition_settings)
            except (OSError, UnicodeDecodeError) as e:
                logging.error(f"讀取定義表 '{definitions_path.name}' 時發生錯誤: {e}")
                return None
            assembler.attach_definitions(rows)

        term_count = assembler.graph.size()
        if self._needs_wizard(term_count):
            threshold = self.config["distance_matrix"]["max_terms_before_wizard"]
            action = InteractiveWizard(self.config_path).run(term_count, threshold)
            if action == "exit":
                logging.info("使用者選擇退出。")
                return None

        logging.info("--- [Phase 3] 編譯本體樹與距離矩陣 ---")
        return assembler.assemble()

    def _needs_wizard(self, term_count: int) -> bool:
        """判斷是否需要啟動互動式精靈。"""
        threshold = self.config.get("distance_matrix", {}).get("max_terms_before_wizard")
        return (
            threshold is not None
            and term_count > threshold
            and not self.config.get("force_compile", False)
            and sys.stdout.isatty()
        )

    @staticmethod
    def _write_json(path: Path, data: Any):
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            logging.info(f"已輸出: {path}")
        except (OSError, TypeError) as e:
            logging.error(f"寫入 '{path.name}' 時發生錯誤: {e}")

    def _run_analysis(
        self,
        analysis_type: str,
        bundle: OntologyBundle,
        output_dir: Path,
        report_analysis_results: dict[str, Any],
    ):
        """執行單一類型的額外分析。"""
        logging.info(f"--- 開始執行分析: '{analysis_type}' ---")
        vis_config = self.config.get("visualization", {})
        ontology_tree = bundle.tree["ontologyTree"]

        if analysis_type == "tree_graph":
            tree_graph_config = vis_config.get("tree_graph", {})
            layout_engine = tree_graph_config.get("layout_engine", "dot")
            png_output_path = output_dir / f"{self.dataset_name}_ontology_tree_{layout_engine}.png"
            report_analysis_results["tree_dot_source"] = render_tree_graph(
                forest=ontology_tree,
                output_path=png_output_path,
                dataset_name=self.dataset_name,
                tree_graph_config=tree_graph_config,
            )

        elif analysis_type == "report":
            report_settings = self.config.get("report_settings", {})
            analyzer = GraphAnalyzer(bundle.distance_matrix["ids"], bundle.edges)
            report_analysis_results["stats"] = bundle.stats
            report_analysis_results["ontology_tree"] = ontology_tree
            report_analysis_results["graph_summary"] = analyzer.summarize(
                bundle.distance_matrix, report_settings.get("top_hubs", 10)
            )
            generate_markdown_report(
                dataset_name=self.dataset_name,
                output_path=output_dir / f"{self.dataset_name}_InsightReport.md",
                analysis_results=report_analysis_results,
                report_settings=report_settings,
            )

        else:
            logging.warning(f"未知的分析類型 '{analysis_type}'，已跳過。")
