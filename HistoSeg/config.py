# -*- coding: utf-8 -*-

"""
Configuration of HistoSeg.

Values live in an INI file with the following sections::

    [segmentation]
    block_size = 8          # side of the classified blocks, in pixels
    alpha = 0.5             # weight of the segmentation in the overlay

    [capture]
    background_block = 128  # side of the blocks of a background capture
    object_size = 50        # side of the centered object capture square

    [colors]
    background = 0,0,0      # BGR paint color of background blocks
    object = 0,0,255        # BGR paint color of object blocks

    [camera]
    index = 0
    width = 640
    height = 480

    [logging]
    level = info
    log_file =

Any value can be overridden from the environment with
``HISTOSEG_<SECTION>_<KEY>``, e.g. ``HISTOSEG_SEGMENTATION_BLOCK_SIZE=16``.
"""

from collections import OrderedDict
from configparser import RawConfigParser as PythonConfigParser
from os import environ
from os.path import exists

from HistoSeg.logger import Logger, logger_config_update, activate_logfile


__all__ = ['Config', 'ConfigParser', 'DEFAULTS', 'setup_logging']


DEFAULTS = OrderedDict([
    ('segmentation', OrderedDict([
        ('block_size', '8'),
        ('alpha', '0.5'),
    ])),
    ('capture', OrderedDict([
        ('background_block', '128'),
        ('object_size', '50'),
    ])),
    ('colors', OrderedDict([
        ('background', '0,0,0'),
        ('object', '0,0,255'),
    ])),
    ('camera', OrderedDict([
        ('index', '0'),
        ('width', '640'),
        ('height', '480'),
    ])),
    ('logging', OrderedDict([
        ('level', 'info'),
        ('log_file', ''),
    ])),
])

ENV_PREFIX = 'HISTOSEG_'


class ConfigParser(PythonConfigParser):
    """
    RawConfigParser with HistoSeg defaults, environment overrides and
    per-key callbacks fired whenever a value is set.
    """

    def __init__(self, defaults=DEFAULTS, environ=environ):
        PythonConfigParser.__init__(self)
        self._callbacks = []
        self.filename = None
        for section, values in defaults.items():
            self.setdefaults(section, values)
        self._environ = environ
        self.update_from_env()

    def optionxform(self, optionstr):
        return optionstr.lower()

    def add_callback(self, callback, section=None, key=None):
        """
        Add a callback called as ``callback(section, key, value)`` when a
        matching value is set. A None section or key matches everything.
        """
        if section is None and key is not None:
            raise ValueError('You cannot specify a key without a section')
        self._callbacks.append((callback, section, key))

    def _do_callbacks(self, section, key, value):
        for callback, csection, ckey in self._callbacks:
            if csection is not None and csection != section:
                continue
            if ckey is not None and ckey != key:
                continue
            callback(section, key, value)

    def set(self, section, option, value):
        """
        Set a value, converting it to a string, and fire the callbacks.
        """
        value = str(value)
        ret = PythonConfigParser.set(self, section, option, value)
        self._do_callbacks(section, option, value)
        return ret

    def setdefaults(self, section, keyvalues):
        self.adddefaultsection(section)
        for key, value in keyvalues.items():
            self.setdefault(section, key, value)

    def setdefault(self, section, option, value):
        if self.has_option(section, option):
            return
        self.set(section, option, value)

    def adddefaultsection(self, section):
        if self.has_section(section):
            return
        self.add_section(section)

    def getdefault(self, section, option, defaultvalue):
        if not self.has_section(section):
            return defaultvalue
        if not self.has_option(section, option):
            return defaultvalue
        return self.get(section, option)

    def getcolor(self, section, option):
        """
        Read a ``b,g,r`` value as a tuple of three ints in 0..255.
        """
        raw = self.get(section, option)
        try:
            color = tuple(int(c) for c in raw.split(','))
        except ValueError:
            raise ValueError('Invalid color {!r} for {}.{}'.format(
                raw, section, option))
        if len(color) != 3 or not all(0 <= c <= 255 for c in color):
            raise ValueError('Invalid color {!r} for {}.{}'.format(
                raw, section, option))
        return color

    def update_from_env(self):
        """
        Apply every ``HISTOSEG_<SECTION>_<KEY>`` environment variable whose
        section and key are known.
        """
        for name, value in self._environ.items():
            if not name.startswith(ENV_PREFIX):
                continue
            rest = name[len(ENV_PREFIX):].lower()
            for section in self.sections():
                prefix = section + '_'
                if not rest.startswith(prefix):
                    continue
                key = rest[len(prefix):]
                if self.has_option(section, key):
                    Logger.debug('Config: {}.{} overridden from {}'.format(
                        section, key, name))
                    self.set(section, key, value)

    def read_file_path(self, filename):
        """
        Read an INI file; environment overrides keep precedence.
        """
        if not exists(filename):
            raise IOError('Config file {!r} does not exist'.format(filename))
        self.filename = filename
        with open(filename, encoding='utf-8') as fd:
            self.read_file(fd, source=filename)
        # read_file() bypasses set(), refire for the values we care about
        for section in self.sections():
            for key, value in self.items(section):
                self._do_callbacks(section, key, value)
        self.update_from_env()
        Logger.info('Config: loaded {}'.format(filename))

    def write_file_path(self, filename=None):
        filename = filename or self.filename
        if filename is None:
            return False
        with open(filename, 'w', encoding='utf-8') as fd:
            PythonConfigParser.write(self, fd)
        return True


def _logfile_update(section, key, value):
    activate_logfile(value or None)


def setup_logging(config):
    """
    Bind the logging section of ``config`` to the Logger. An unknown level
    is reported and replaced by the default one.
    """
    config.add_callback(logger_config_update, 'logging', 'level')
    config.add_callback(_logfile_update, 'logging', 'log_file')
    level = config.get('logging', 'level')
    try:
        logger_config_update('logging', 'level', level)
    except AttributeError:
        default = DEFAULTS['logging']['level']
        Logger.warning('Config: unknown log level {!r}, using {!r}'.format(
            level, default))
        config.set('logging', 'level', default)
    _logfile_update('logging', 'log_file', config.get('logging', 'log_file'))


Config = ConfigParser()
setup_logging(Config)
