import logging

from quotevote.utils.logging_helper import get_logger


def test_name_comes_from_calling_module(tmp_path):
    log = get_logger(log_dir=tmp_path)
    assert log.name == "quotevote.test_logging_helper"
    assert get_logger(log_dir=tmp_path) is log


def test_writes_log_file_and_honours_env_level(tmp_path, monkeypatch):
    monkeypatch.setenv("QUOTEVOTE_LOG_LEVEL", "debug")
    log = get_logger("levels_check", log_dir=tmp_path)
    assert log.level == logging.DEBUG
    log.debug("dropped 2 votes")
    for handler in log.handlers:
        handler.flush()
    assert "dropped 2 votes" in (tmp_path / "levels_check.log").read_text(encoding="utf-8")
