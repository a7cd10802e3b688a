import logging

import pytest

from blog_list_api.app.core.config import Settings
from blog_list_api.app.core.logging_config import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_blog_list_api", False)]


def test_debug_forces_debug_level():
    logger = configure_logging(Settings(debug=True, log_level="ERROR", log_file=None))
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG


def test_log_level_is_used_without_debug():
    logger = configure_logging(Settings(debug=False, log_level="warning", log_file=None))
    assert logger.level == logging.WARNING


def test_unknown_log_level_falls_back_to_info():
    logger = configure_logging(Settings(debug=False, log_level="chatty", log_file=None))
    assert logger.level == logging.INFO


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "blog_list.log"
    logger = configure_logging(Settings(debug=False, log_level="INFO", log_file=str(log_file)))
    assert any(isinstance(h, logging.FileHandler) for h in own_handlers(logger))

    logging.getLogger(f"{PACKAGE_LOGGER}.services").info("blog created")
    for handler in own_handlers(logger):
        handler.flush()
    assert "[INFO] blog_list_api.services: blog created" in log_file.read_text(encoding="utf-8")


def test_repeated_configuration_replaces_handlers(tmp_path):
    configure_logging(Settings(debug=False, log_file=str(tmp_path / "first.log")))
    logger = configure_logging(Settings(debug=False, log_file=None))
    handlers = own_handlers(logger)
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)
