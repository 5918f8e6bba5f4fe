import logging

import pytest

import settings
from paymentsessions.api_logger import APILogger


def _file_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    APILogger.start_logger(settings.LOG_FILE_PATH)


def test_no_file_handler_without_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    _logger = APILogger.start_logger("").get()

    assert _file_handlers(_logger) == []
    assert list(tmp_path.iterdir()) == []


def test_file_handler_with_path(tmp_path):
    log_file = tmp_path / "nested" / "payments.log"

    _logger = APILogger.start_logger(str(log_file)).get()

    assert [h.baseFilename for h in _file_handlers(_logger)] == [str(log_file)]
    assert log_file.parent.is_dir()


def test_restart_does_not_stack_handlers():
    APILogger.start_logger(None)

    _logger = APILogger.start_logger(None).get()

    assert len(_logger.handlers) == 1
