import logging

import pytest

from core.logging_config import LOGGER_NAMES, setup_logging


@pytest.fixture()
def restore_loggers():
    yield
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def test_setup_logging_sets_level(restore_loggers):
    setup_logging('DEBUG')
    for name in LOGGER_NAMES:
        assert logging.getLogger(name).level == logging.DEBUG
    assert logging.getLogger('view.view').getEffectiveLevel() == logging.DEBUG


def test_setup_logging_twice_does_not_duplicate_handlers(restore_loggers):
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    assert len(logging.getLogger('core').handlers) == 1


def test_setup_logging_with_file(tmp_path, restore_loggers):
    log_file = tmp_path / 'pong.log'
    setup_logging(logging.INFO, str(log_file))
    logging.getLogger('game.pong').info('hello')
    for handler in logging.getLogger('game').handlers:
        handler.flush()
    assert 'hello' in log_file.read_text(encoding='utf-8')
    for name in LOGGER_NAMES:
        for handler in logging.getLogger(name).handlers:
            handler.close()


def test_unknown_level_is_rejected(restore_loggers):
    with pytest.raises(ValueError):
        setup_logging('LOUD')


def test_resetup_closes_previous_file_handler(tmp_path, restore_loggers):
    setup_logging(logging.INFO, str(tmp_path / 'first.log'))
    old_handlers = [
        h for h in logging.getLogger('core').handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(old_handlers) == 1

    setup_logging(logging.INFO, str(tmp_path / 'second.log'))

    assert old_handlers[0].stream is None
    for name in LOGGER_NAMES:
        assert old_handlers[0] not in logging.getLogger(name).handlers
        for handler in logging.getLogger(name).handlers:
            handler.close()


def test_initialized_message_reaches_configured_handlers(tmp_path, restore_loggers):
    log_file = tmp_path / 'pong.log'
    setup_logging(logging.INFO, str(log_file))
    for handler in logging.getLogger('core').handlers:
        handler.flush()
        handler.close()
    assert 'Logging initialized.' in log_file.read_text(encoding='utf-8')
