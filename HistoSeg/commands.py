# -*- coding: utf-8 -*-

from collections import deque

from HistoSeg.base import logger
from HistoSeg.exceptions import SegmentationError


__all__ = [
    'Command', 'CommandDispatcher', 'KEY_BINDINGS'
]


class Command(object):
    CAPTURE_BACKGROUND = 'capture_background'
    CAPTURE_OBJECT = 'capture_object'
    COMPARE = 'compare'
    TOGGLE_RECOGNITION = 'toggle_recognition'
    TOGGLE_FREEZE = 'toggle_freeze'
    QUIT = 'quit'

    kinds = (CAPTURE_BACKGROUND, CAPTURE_OBJECT, COMPARE, TOGGLE_RECOGNITION,
             TOGGLE_FREEZE, QUIT)


ESC = 27

KEY_BINDINGS = {
    ord('b'): Command.CAPTURE_BACKGROUND,
    ord('a'): Command.CAPTURE_OBJECT,
    ord('v'): Command.COMPARE,
    ord('r'): Command.TOGGLE_RECOGNITION,
    ord('f'): Command.TOGGLE_FREEZE,
    ord('q'): Command.QUIT,
    ESC: Command.QUIT,
}


class CommandDispatcher(object):
    """
    Queue of user commands run against a Session.

    Commands are posted as they come (from the keyboard or elsewhere) and
    run in order by dispatch(), with the frame that is current at that
    time. Capture and compare commands whose region is unusable are logged
    and reported, they do not stop the queue.

    >>> dispatcher = CommandDispatcher(Session())
    >>> dispatcher.post(Command.CAPTURE_BACKGROUND)
    >>> dispatcher.dispatch(frame)
    [('capture_background', 20)]
    """

    def __init__(self, session, bindings=None):
        self.session = session
        self.bindings = KEY_BINDINGS if bindings is None else bindings
        self.recognizing = False
        self.frozen = False
        self.done = False
        self._queue = deque()
        self._handlers = {
            Command.CAPTURE_BACKGROUND: self._capture_background,
            Command.CAPTURE_OBJECT: self._capture_object,
            Command.COMPARE: self._compare,
            Command.TOGGLE_RECOGNITION: self._toggle_recognition,
            Command.TOGGLE_FREEZE: self._toggle_freeze,
            Command.QUIT: self._quit,
        }

    def post(self, kind, **params):
        """
        Queue a command.

        :param kind: one of Command.kinds
        :param params: keyword arguments of the command, e.g. ``region``
        """
        if kind not in self._handlers:
            raise ValueError('Unknown command {!r}'.format(kind))
        self._queue.append((kind, params))

    def post_key(self, key):
        """
        Queue the command bound to a key code, if any.

        :param key: key code as returned by cv2.waitKey()
        :return: True if the key is bound to a command
        """
        if key < 0:
            return False
        kind = self.bindings.get(key & 0xFF)
        if kind is None:
            return False
        self.post(kind)
        return True

    def pending(self):
        return len(self._queue)

    def dispatch(self, frame):
        """
        Run every queued command.

        :param frame: current frame
        :return: list of (kind, result) pairs in the order the commands
                 ran; the result of a failed command is its exception.
        """
        results = []
        while self._queue:
            kind, params = self._queue.popleft()
            try:
                result = self._handlers[kind](frame, **params)
            except (SegmentationError, ValueError) as e:
                logger.warning('Command: {} failed: {}'.format(kind, e))
                result = e
            results.append((kind, result))
        return results

    def _capture_background(self, frame, regions=None, block_size=None):
        return self.session.capture_background(frame, regions, block_size)

    def _capture_object(self, frame, region=None):
        return self.session.capture_object(frame, region)

    def _compare(self, frame, region_a=None, region_b=None):
        return self.session.compare(frame, region_a, region_b)

    def _toggle_recognition(self, frame):
        self.recognizing = not self.recognizing
        logger.info('Command: recognition {}'.format(
            'on' if self.recognizing else 'off'))
        return self.recognizing

    def _toggle_freeze(self, frame):
        self.frozen = not self.frozen
        return self.frozen

    def _quit(self, frame):
        self.done = True
        return True
