# -*- coding: utf-8 -*-

import logging
import os
import sys
from functools import partial


__all__ = [
    'Logger', 'LOG_LEVELS', 'COLORS', 'LoggerHistory', 'FileHandler',
    'logger_config_update', 'activate_logfile'
]

Logger = None

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = list(range(8))

RESET_SEQ = '\033[0m'
COLOR_SEQ = '\033[1;%dm'
BOLD_SEQ = '\033[1m'


def formatter_message(msg, use_color=True):
    if use_color:
        msg = msg.replace('$RESET', RESET_SEQ)
        msg = msg.replace('$BOLD', BOLD_SEQ)
    else:
        msg = msg.replace('$RESET', '').replace('$BOLD', '')

    return msg

COLORS = {
    'TRACE': MAGENTA,
    'WARNING': YELLOW,
    'INFO': GREEN,
    'DEBUG': CYAN,
    'CRITICAL': RED,
    'ERROR': RED
}

TRACE = 9
logging.addLevelName(TRACE, 'TRACE')

LOG_LEVELS = {
    'trace': TRACE,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL
}


class FileHandler(logging.Handler):
    """
    Writes records to a log file once one has been activated. Records
    emitted before activation are kept in the history and flushed on the
    first write.
    """
    history = []
    filename = None
    fd = None

    def _configure(self):
        directory = os.path.dirname(FileHandler.filename)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        FileHandler.fd = open(FileHandler.filename, 'a', encoding='utf-8')

    def _write_message(self, record):
        if FileHandler.fd in (None, False):
            return

        msg = self.format(record)
        stream = FileHandler.fd

        stream.write('[%-18s]' % record.levelname)
        stream.write('%s\n' % msg)
        stream.flush()

    def emit(self, record):
        # during the startup, store the message in the history
        if Logger.logfile_activated is None:
            FileHandler.history += [record]
            return

        # startup done, if the log file is not activated, avoid history
        if Logger.logfile_activated is False:
            FileHandler.history = []
            return

        if FileHandler.fd is None:
            try:
                self._configure()
            except OSError:
                FileHandler.fd = False
                Logger.exception('Logger: error while activating the log file')
                return

            while FileHandler.history:
                _msg = FileHandler.history.pop(0)
                self._write_message(_msg)

        self._write_message(record)


class LoggerHistory(logging.Handler):

    history = []

    def emit(self, record):
        LoggerHistory.history = [record] + LoggerHistory.history[:100]


class ColoredFormatter(logging.Formatter):

    def __init__(self, msg, use_color=True):
        super(ColoredFormatter, self).__init__(msg)
        self.use_color = use_color

    def format(self, record):
        if isinstance(record.msg, str):
            msg = record.msg.split(':', 1)
            if len(msg) == 2:
                record.msg = '[%-12s]%s' % (msg[0], msg[1])
        levelname = record.levelname
        if self.use_color and levelname in COLORS:
            levelname_color = (
                COLOR_SEQ % (30 + COLORS[levelname]) + levelname + RESET_SEQ)
            record.levelname = levelname_color
        return logging.Formatter.format(self, record)


def logger_config_update(section, key, value):
    if LOG_LEVELS.get(value) is None:
        raise AttributeError("Loglevel {0!r} doesn't exist".format(value))
    Logger.setLevel(level=LOG_LEVELS.get(value))


def activate_logfile(filename):
    """
    Start writing to ``filename``, or pass None to drop the buffered
    history and keep logging to the console only.
    """
    if FileHandler.fd:
        FileHandler.fd.close()
    FileHandler.fd = None
    if not filename:
        Logger.logfile_activated = False
        return
    FileHandler.filename = filename
    Logger.logfile_activated = True


# HistoSeg default logger instance
Logger = logging.getLogger('histoseg')
Logger.logfile_activated = None
Logger.trace = partial(Logger.log, TRACE)
Logger.setLevel(logging.INFO)

Logger.addHandler(LoggerHistory())
Logger.addHandler(FileHandler())

use_color = (
    os.name != 'nt' and
    os.environ.get('TERM') in ('xterm', 'rxvt', 'rxvt-unicode', 'xterm-256color')
)

color_fmt = formatter_message('[%(levelname)-18s] %(message)s', use_color)
formatter = ColoredFormatter(color_fmt, use_color=use_color)
console = logging.StreamHandler(sys.stderr)
console.setFormatter(formatter)
Logger.addHandler(console)
