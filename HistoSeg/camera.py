# -*- coding: utf-8 -*-

import abc
import itertools
import time

from HistoSeg.base import cv2, npy, logger
from HistoSeg.image import to_array


__all__ = [
    'FrameSource', 'Camera', 'VirtualCamera'
]


class FrameSource(object, metaclass=abc.ABCMeta):
    """
    An abstract Camera-type class, for handling multiple types of video
    input. Any sources of image inherit from it.
    """
    _cap_time = None  # timestamp of the last acquired image

    def get_property(self, p):
        return None

    def get_all_properties(self):
        return {}

    @abc.abstractmethod
    def get_image(self):
        """
        Return the next frame, or None when there is none.
        """
        return None

    def release(self):
        pass

    @property
    def capture_time(self):
        return self._cap_time

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.release()


class Camera(FrameSource):
    prop_map = {
        'width': cv2.CAP_PROP_FRAME_WIDTH,
        'height': cv2.CAP_PROP_FRAME_HEIGHT,
        'brightness': cv2.CAP_PROP_BRIGHTNESS,
        'contrast': cv2.CAP_PROP_CONTRAST,
        'saturation': cv2.CAP_PROP_SATURATION,
        'hue': cv2.CAP_PROP_HUE,
        'gain': cv2.CAP_PROP_GAIN,
        'exposure': cv2.CAP_PROP_EXPOSURE
    }

    def __init__(self, cam_idx=0, prop_set=None):
        """
        In the camera constructor, cam_idx indicates which camera to connect to
        and prop_set is a dictionary which can be used to set any camera
        attributes, supported props are currently:
        height, width, brightness, contrast, saturation, hue, gain, and exposure

        :param cam_idx: the index of the camera, these go from 0 upward,
                         and are system specific.
        :param prop_set: the property set for the camera (i.e. a dict of
                          camera properties).
        :Note:
        For most web cameras only the width and height properties are
        supported.
        """
        if prop_set is None:
            prop_set = {'width': 640, 'height': 480}

        self._index = cam_idx
        self._cv2_capture = cv2.VideoCapture(cam_idx)
        if not self._cv2_capture.isOpened():
            raise IOError("Couldn't open camera {}".format(cam_idx))

        for p, value in prop_set.items():
            if p in self.prop_map:
                self._cv2_capture.set(self.prop_map[p], value)
            else:
                logger.warning('Camera: unknown property {!r}'.format(p))

    def get_property(self, p):
        """
        Retrieve the value of a given property.

        :param p: the property to retrieve
        :return: specified property, if it can't be found the method return False
        """
        if p in self.prop_map:
            return self._cv2_capture.get(self.prop_map[p])

        return False

    def get_all_properties(self):
        props = {}

        for p in self.prop_map:
            props[p] = self.get_property(p)

        return props

    def get_image(self):
        ok, frame = self._cv2_capture.read()
        self._cap_time = time.time()
        if not ok:
            logger.warning('Camera: no frame from camera {}'.format(
                self._index))
            return None
        return frame

    def release(self):
        self._cv2_capture.release()

    @property
    def index(self):
        return self._index


class VirtualCamera(FrameSource):
    """
    The virtual camera lets you test algorithms or functions by providing
    a Camera object which is not a physically connected device.

    The source is an image file, a frame, or a list of frames played in a
    loop.
    """

    def __init__(self, source):
        if isinstance(source, (list, tuple)):
            frames = [to_array(s) for s in source]
        else:
            frames = [to_array(source)]
        if not frames:
            raise ValueError('VirtualCamera needs at least one frame')
        self._frames = frames
        self._cycle = itertools.cycle(frames)

    def get_image(self):
        self._cap_time = time.time()
        return npy.copy(next(self._cycle))

    def get_property(self, p):
        height, width = self._frames[0].shape[:2]
        return {'width': width, 'height': height}.get(p, False)
