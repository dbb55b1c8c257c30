"""
Tests for ontologyinsight.utils.logging_utils.
"""

import json
import logging

import pytest
import yaml

from ontologyinsight.core import DatasetProcessor
from ontologyinsight.utils import RepeatedMessageFilter


def _record(msg, level=logging.WARNING):
    return logging.LogRecord("test", level, __file__, 1, msg, None, None)


class _CollectingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.INFO)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


class TestRepeatedMessageFilter:
    """RepeatedMessageFilter 的測試。"""

    def test_identical_unmatched_messages_always_pass(self):
        log_filter = RepeatedMessageFilter()
        header = "--- [Phase 1] 解析本體上位概念關係 ---"
        assert log_filter.filter(_record(header, logging.INFO))
        assert log_filter.filter(_record(header, logging.INFO))

    def test_matching_messages_collapse_after_limit(self):
        log_filter = RepeatedMessageFilter(patterns=["有多個上位概念"], limit=2)
        records = [_record(f"詞彙 't{i}' 有多個上位概念，僅採用第一個，忽略: x") for i in range(4)]

        assert [log_filter.filter(r) for r in records] == [True, True, False, False]
        assert "之後同類訊息不再顯示" in records[1].getMessage()
        assert "之後同類訊息不再顯示" not in records[0].getMessage()

    def test_reset_restores_counts(self):
        log_filter = RepeatedMessageFilter(patterns=["skip"], limit=1)
        assert log_filter.filter(_record("skip a"))
        assert not log_filter.filter(_record("skip b"))

        log_filter.reset()
        assert log_filter.filter(_record("skip c"))

    def test_two_datasets_both_log_phase_headers(self, tmp_path, sample_ontology, caplog):
        (tmp_path / "ontology.json").write_text(json.dumps(sample_ontology), encoding="utf-8")
        config_paths = []
        for name in ("first", "second"):
            config_path = tmp_path / f"{name}.yaml"
            config_path.write_text(
                yaml.safe_dump({"ontology_path": "ontology.json", "output_dir": f"out_{name}"}),
                encoding="utf-8",
            )
            config_paths.append(config_path)

        caplog.set_level(logging.INFO)
        handler = _CollectingHandler()
        message_filter = RepeatedMessageFilter()
        handler.addFilter(message_filter)
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)
        try:
            for config_path in config_paths:
                message_filter.reset()
                assert DatasetProcessor(config_path).run() is not None
        finally:
            root_logger.removeHandler(handler)

        assert handler.messages.count("--- [Phase 1] 解析本體上位概念關係 ---") == 2
        assert handler.messages.count("--- [Phase 3] 編譯本體樹與距離矩陣 ---") == 2


@pytest.mark.parametrize("limit", [1, 3])
def test_limit_is_per_pattern(limit):
    log_filter = RepeatedMessageFilter(patterns=["alpha", "beta"], limit=limit)
    passed_alpha = sum(log_filter.filter(_record(f"alpha {i}")) for i in range(limit + 2))
    passed_beta = sum(log_filter.filter(_record(f"beta {i}")) for i in range(limit + 2))
    assert passed_alpha == passed_beta == limit
