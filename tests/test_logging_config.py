import logging
from logging.handlers import RotatingFileHandler

import pytest

from core.logging_config import (
    SessionIdFilter, get_logger, get_session_id, setup_logging
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if any(isinstance(f, SessionIdFilter) for f in handler.filters):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_writes_to_rotating_file(tmp_path, restore_root_logger):
    setup_logging(level="DEBUG", log_dir=str(tmp_path), log_file="test.log")
    get_logger("tests.logging").debug("hello from test")

    for handler in restore_root_logger.handlers:
        handler.flush()

    contents = (tmp_path / "test.log").read_text(encoding='utf-8')
    assert "hello from test" in contents
    assert f"[session_id={get_session_id()}]" in contents
    assert restore_root_logger.level == logging.DEBUG


def test_setup_starts_a_new_session(tmp_path, restore_root_logger):
    setup_logging(log_dir=str(tmp_path), log_file="a.log")
    first = get_session_id()
    setup_logging(log_dir=str(tmp_path), log_file="a.log")
    assert get_session_id() != first


def test_setup_replaces_previous_handlers(tmp_path, restore_root_logger):
    setup_logging(log_dir=str(tmp_path), log_file="a.log")
    setup_logging(log_dir=str(tmp_path), log_file="a.log")
    assert len(restore_root_logger.handlers) == 2


def test_session_filter_tags_records():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert SessionIdFilter().filter(record) is True
    assert record.session_id == get_session_id()


def test_repeated_setup_closes_old_file_handler(tmp_path, restore_root_logger):
    setup_logging(log_dir=str(tmp_path), log_file="a.log")
    old_file_handler = next(
        h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)
    )
    setup_logging(log_dir=str(tmp_path), log_file="a.log")
    assert old_file_handler not in restore_root_logger.handlers
    assert old_file_handler.stream is None
