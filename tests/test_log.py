"""
Unit Tests for logger setup.
"""

import logging

from chess_ai.log import setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_writes_to_file(self, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"

        logger = setup_logger(debug=True, log_file=log_file)
        logging.getLogger("chess_ai.search.minimax").debug("depth 1 done")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "depth 1 done" in log_file.read_text()

        logger.handlers.clear()

    def test_info_level_by_default(self, tmp_path):
        logger = setup_logger(log_file=tmp_path / "engine.log")

        assert logger.name == "chess_ai"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

        logger.handlers.clear()
