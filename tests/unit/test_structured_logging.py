"""Unit tests for structured logging functionality."""

import json
import logging
import threading
from decimal import Decimal

from retail_pricing.shared.logging_config import configure_structured_logging
from retail_pricing.shared.logging_utils import get_structured_logger


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_generate_correlation_id(self):
        logger = get_structured_logger("test")
        corr_id = logger.generate_correlation_id()

        assert corr_id.startswith("ORD_")
        assert len(corr_id) == 16  # ORD_ + 12 hex chars

    def test_set_and_clear_correlation_id(self):
        logger = get_structured_logger("test")

        assert logger._correlation_id is None

        logger.set_correlation_id("TEST_123")
        assert logger._correlation_id == "TEST_123"

        logger.clear_correlation_id()
        assert logger._correlation_id is None

    def test_correlated_block_restores_previous_id(self):
        logger = get_structured_logger("test")
        logger.set_correlation_id("OUTER")

        with logger.correlated() as corr_id:
            assert corr_id.startswith("ORD_")
            assert logger._correlation_id == corr_id

        assert logger._correlation_id == "OUTER"

    def test_correlated_block_with_explicit_id(self):
        logger = get_structured_logger("test")
        with logger.correlated("ORDER-42") as corr_id:
            assert corr_id == "ORDER-42"
        assert logger._correlation_id is None

    def test_correlation_ids_are_isolated_between_threads(self):
        logger = get_structured_logger("test.threads")
        barrier = threading.Barrier(2, timeout=5)
        seen = {}

        def price(order_id):
            with logger.correlated(order_id):
                # Both threads are inside their blocks at the same time
                barrier.wait()
                seen[order_id] = logger._correlation_id

        threads = [threading.Thread(target=price, args=(o,)) for o in ("A", "B")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert seen == {"A": "A", "B": "B"}
        assert logger._correlation_id is None

    def test_structured_log_format(self, caplog):
        logger = get_structured_logger("test.module")
        logger.set_correlation_id("TEST_CORR_123")

        with caplog.at_level(logging.INFO):
            logger.info("Order priced", final_total=Decimal("109.90"), items=2)

        assert len(caplog.records) == 1

        log_data = json.loads(caplog.records[0].message)

        assert log_data["level"] == "INFO"
        assert log_data["message"] == "Order priced"
        assert log_data["correlation_id"] == "TEST_CORR_123"
        assert "timestamp" in log_data
        # Decimals keep their exact cents
        assert log_data["context"] == {"final_total": "109.90", "items": 2}

    def test_log_without_correlation_id(self, caplog):
        logger = get_structured_logger("test.module")

        with caplog.at_level(logging.INFO):
            logger.info("Test message without correlation")

        log_data = json.loads(caplog.records[0].message)
        assert log_data["correlation_id"] == "none"
        assert "context" not in log_data

    def test_disabled_level_is_not_emitted(self, caplog):
        logger = get_structured_logger("test.quiet")

        with caplog.at_level(logging.WARNING):
            logger.debug("Debug message")
            logger.info("Info message")

        assert caplog.records == []

    def test_different_log_levels(self, caplog):
        logger = get_structured_logger("test.module")

        with caplog.at_level(logging.DEBUG):
            logger.debug("Debug message")
            logger.info("Info message")
            logger.warning("Warning message")
            logger.error("Error message")

        levels = [json.loads(r.message)["level"] for r in caplog.records]
        assert levels == ["DEBUG", "INFO", "WARNING", "ERROR"]
        assert [r.levelno for r in caplog.records] == [
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
        ]


class TestConfigureStructuredLogging:
    """Test root logging setup."""

    def test_quiets_prometheus_client(self):
        configure_structured_logging("debug")
        assert logging.getLogger("prometheus_client").level == logging.WARNING
