import logging

from v4hooks.logging_config import setup_logger


def test_setup_logger_adds_handlers_once(tmp_path):
    log_file = tmp_path / "hooks.log"

    logger = setup_logger("v4hooks_test_once", level=logging.DEBUG, log_file=str(log_file))
    again = setup_logger("v4hooks_test_once", log_file=str(log_file))

    assert again is logger
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logger.info("hello hooks")
    for handler in logger.handlers:
        handler.flush()
    assert "INFO - hello hooks" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logger_console_only():
    logger = setup_logger("v4hooks_test_console", detailed=True)

    assert len(logger.handlers) == 1
    assert "%(filename)s" in logger.handlers[0].formatter._fmt

    logger.removeHandler(logger.handlers[0])
