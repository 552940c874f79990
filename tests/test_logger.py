"""
Tests for the package logger.
"""
import logging

from pcmclip.utils.logger import LOG_LEVEL_ENV, setup_logger


class TestLogger:

    def test_explicit_level(self):
        logger = setup_logger("pcmclip.test.explicit", "debug")
        assert logger.level == logging.DEBUG

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
        logger = setup_logger("pcmclip.test.env")
        assert logger.level == logging.WARNING

    def test_handler_attached_once(self):
        setup_logger("pcmclip.test.once")
        logger = setup_logger("pcmclip.test.once")
        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self, monkeypatch, caplog):
        monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")
        logger = setup_logger("pcmclip.test.unknown")
        assert logger.level == logging.INFO
        assert "Unknown log level 'verbose'" in caplog.text
