"""
Unit tests for metrics helpers and logging setup.
"""

from __future__ import annotations

import importlib
import json
import logging

import pytest
import structlog

from tests.helpers.metric_delta import metric_delta
from wordcounter.config import MonitoringConfig
from wordcounter.observability import logging as wc_logging
from wordcounter.observability import metrics
from wordcounter.observability.metrics import METRICS, export_prometheus, increment, timed


@pytest.mark.unit
class TestMetrics:
    def test_increment_counter(self):
        with metric_delta(METRICS["no_content"], 2):
            increment("no_content", 2)

    def test_increment_labelled_counter(self):
        with metric_delta(METRICS["extractions"].labels(strategy="fallback"), 1):
            increment("extractions", strategy="fallback")

    def test_unknown_metric_is_ignored(self):
        increment("does_not_exist")

    def test_timed_observes_histogram(self):
        histogram = METRICS["extraction_duration_seconds"]
        before = histogram._sum.get()

        with timed("extraction_duration_seconds"):
            sum(range(1000))

        assert histogram._sum.get() > before

    def test_timed_observes_even_on_error(self):
        with pytest.raises(RuntimeError):
            with timed("extraction_duration_seconds"):
                raise RuntimeError("boom")

    def test_reimport_reuses_collectors(self):
        before = METRICS["no_content"]
        reloaded = importlib.reload(metrics)

        assert reloaded.METRICS["no_content"] is before

    def test_export_prometheus(self):
        increment("extractions", strategy="tree_walker")
        output = export_prometheus()

        assert "wordcounter_extractions_total" in output
        assert 'strategy="tree_walker"' in output


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.unit
@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    def test_console_logging(self):
        wc_logging.configure_logging(MonitoringConfig(log_level="INFO"))

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_logging_writes_json(self, tmp_path):
        log_file = tmp_path / "wordcounter.log"
        wc_logging.configure_logging(MonitoringConfig(log_level="DEBUG", log_file=str(log_file)))

        structlog.get_logger("tests").info("Counted page", words=12)
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        counted = [r for r in records if r["event"] == "Counted page"]
        assert counted[0]["words"] == 12
        assert counted[0]["level"] == "info"
