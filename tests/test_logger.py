# -*- coding: utf-8 -*-

import logging

import pytest

from HistoSeg.config import Config
from HistoSeg.logger import (ColoredFormatter, FileHandler, Logger,
                             LoggerHistory, activate_logfile,
                             logger_config_update)


@pytest.fixture
def restore_level():
    level = Logger.level
    yield
    Logger.setLevel(level)


def test_history_keeps_latest_records():
    Logger.info('Test: hello history')
    assert 'hello history' in LoggerHistory.history[0].getMessage()


def test_level_update(restore_level):
    logger_config_update('logging', 'level', 'warning')
    assert Logger.level == logging.WARNING
    with pytest.raises(AttributeError, match="doesn't exist"):
        logger_config_update('logging', 'level', 'verbose')


def test_config_drives_level(restore_level):
    previous = Config.get('logging', 'level')
    try:
        Config.set('logging', 'level', 'debug')
        assert Logger.level == logging.DEBUG
    finally:
        Config.set('logging', 'level', previous)


def test_trace_level(restore_level):
    Logger.setLevel(9)
    Logger.trace('Test: traced')
    assert 'TRACE' in LoggerHistory.history[0].levelname


def test_formatter_aligns_tag():
    formatter = ColoredFormatter('%(message)s', use_color=False)
    record = logging.LogRecord('histoseg', logging.INFO, __file__, 1,
                               'Session: 3 object histograms', None, None)
    assert formatter.format(record) == \
        '[Session     ] 3 object histograms'


def test_logfile(tmp_path):
    path = tmp_path / 'logs' / 'histoseg.log'
    activate_logfile(str(path))
    try:
        Logger.warning('Test: written to file')
    finally:
        activate_logfile(None)
    assert 'written to file' in path.read_text()
