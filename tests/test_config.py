# -*- coding: utf-8 -*-

import logging

import pytest

from HistoSeg.config import ConfigParser, setup_logging
from HistoSeg.logger import Logger, LoggerHistory


def test_defaults(config):
    assert config.getint('segmentation', 'block_size') == 8
    assert config.getint('capture', 'background_block') == 128
    assert config.getint('capture', 'object_size') == 50
    assert config.getcolor('colors', 'background') == (0, 0, 0)
    assert config.getcolor('colors', 'object') == (0, 0, 255)
    assert config.get('logging', 'level') == 'info'


def test_environment_overrides():
    config = ConfigParser(environ={
        'HISTOSEG_SEGMENTATION_BLOCK_SIZE': '16',
        'HISTOSEG_CAPTURE_OBJECT_SIZE': '30',
        'HISTOSEG_UNKNOWN_KEY': 'x',
        'PATH': '/bin',
    })
    assert config.getint('segmentation', 'block_size') == 16
    assert config.getint('capture', 'object_size') == 30
    assert not config.has_section('unknown')


@pytest.mark.parametrize('raw', ['1,2', 'a,b,c', '0,0,256'])
def test_invalid_colors(config, raw):
    config.set('colors', 'object', raw)
    with pytest.raises(ValueError):
        config.getcolor('colors', 'object')


def test_callbacks_fire_on_set(config):
    calls = []
    config.add_callback(lambda *args: calls.append(args), 'segmentation',
                        'block_size')
    config.set('segmentation', 'block_size', 4)
    config.set('segmentation', 'alpha', 0.2)
    assert calls == [('segmentation', 'block_size', '4')]
    with pytest.raises(ValueError):
        config.add_callback(print, None, 'level')


def test_read_and_write_file(config, tmp_path):
    path = tmp_path / 'histoseg.ini'
    path.write_text('[segmentation]\nblock_size = 12\n\n'
                    '[colors]\nobject = 255,0,0\n')
    calls = []
    config.add_callback(lambda *args: calls.append(args), 'segmentation')
    config.read_file_path(str(path))
    assert config.getint('segmentation', 'block_size') == 12
    assert config.getcolor('colors', 'object') == (255, 0, 0)
    assert config.getint('capture', 'object_size') == 50
    assert ('segmentation', 'block_size', '12') in calls

    out = tmp_path / 'out.ini'
    assert config.write_file_path(str(out))
    assert 'block_size = 12' in out.read_text()


def test_missing_file(config, tmp_path):
    with pytest.raises(IOError):
        config.read_file_path(str(tmp_path / 'nope.ini'))


def test_getdefault(config):
    assert config.getdefault('nope', 'x', 3) == 3
    assert config.getdefault('segmentation', 'nope', 3) == 3
    assert config.getdefault('segmentation', 'block_size', 3) == '8'


def test_unknown_log_level_falls_back_to_default():
    level = Logger.level
    config = ConfigParser(environ={'HISTOSEG_LOGGING_LEVEL': 'bogus'})
    try:
        setup_logging(config)
        assert config.get('logging', 'level') == 'info'
        assert Logger.level == logging.INFO
        record = next(r for r in LoggerHistory.history
                      if r.levelno == logging.WARNING)
        assert "unknown log level 'bogus'" in record.getMessage()
    finally:
        Logger.setLevel(level)
