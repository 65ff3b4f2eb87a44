import logging

import pytest
from rich.logging import RichHandler

from flagset.utils import running_in_container, setup_logging


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli(restore_root_handlers):
    setup_logging(mode="cli")
    handlers = restore_root_handlers.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_with_file(restore_root_handlers, tmp_path):
    log_file = tmp_path / "flagset.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    handlers = restore_root_handlers.handlers
    assert len(handlers) == 2
    assert isinstance(handlers[1], logging.FileHandler)

    logging.getLogger("flagset").debug("hello %s", "json")
    handlers[1].flush()
    assert '"message": "hello json"' in log_file.read_text()


def test_setup_logging_env_mode(restore_root_handlers, monkeypatch):
    monkeypatch.setenv("FLAGSET_LOG_MODE", "json")
    setup_logging()
    handler = restore_root_handlers.handlers[0]
    assert not isinstance(handler, RichHandler)


def test_setup_logging_invalid_mode(restore_root_handlers):
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")


def test_running_in_container_returns_bool():
    assert isinstance(running_in_container(), bool)
