"""日志配置与评估器的日志输出"""

import logging

import pytest

from mahjong_evaluator import (
    Context,
    InvalidHandSizeError,
    check_all_yaku,
    from_string,
    is_tenpai,
    parse_tiles,
)
from mahjong_evaluator.utils.logging import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_explicit_level(self, restore_root_logger):
        root = setup_logging(level=logging.DEBUG)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_level_from_env(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("LOG_LEVEL", "error")
        assert setup_logging().level == logging.ERROR

    def test_json_format(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("LOG_FORMAT", "json")
        root = setup_logging()
        assert len(root.handlers) == 1

    def test_invalid_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        with pytest.raises(ValueError):
            setup_logging()

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError):
            setup_logging()


class TestEvaluatorLogs:
    def test_rejected_hand_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mahjong_evaluator"):
            with pytest.raises(InvalidHandSizeError):
                is_tenpai(parse_tiles("123m"))
        assert "rejected hand" in caplog.text

    def test_skipped_yaku_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mahjong_evaluator"):
            check_all_yaku(parse_tiles("123m456p789s111z2z"), from_string("2z"), Context())
        assert "seat_wind" in caplog.text
