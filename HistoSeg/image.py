# -*- coding: utf-8 -*-

"""
Frame helpers.

A frame is a ``(height, width, 3)`` uint8 numpy array, in the channel order
OpenCV hands out (BGR). Nothing in the histogram depends on that order.
"""

import os
from collections import namedtuple

from PIL import Image as PILImage

from HistoSeg.base import npy, istuple, isnum
from HistoSeg.exceptions import EmptyRegionError


__all__ = [
    'Point', 'Region', 'to_array', 'validate', 'load_image', 'blank'
]


Point = namedtuple('Point', ['x', 'y'])


class Region(namedtuple('Region', ['top_left', 'bottom_right'])):
    """
    A rectangle of pixels, ``top_left`` included and ``bottom_right``
    excluded on both axes.
    """
    __slots__ = ()

    def __new__(cls, top_left, bottom_right):
        return super(Region, cls).__new__(cls, _point(top_left),
                                          _point(bottom_right))

    @classmethod
    def from_size(cls, x, y, width, height):
        return cls((x, y), (x + width, y + height))

    @classmethod
    def centered(cls, width, height, size):
        """
        A ``size`` x ``size`` square centered in a ``width`` x ``height``
        frame.
        """
        half = size // 2
        return cls((width // 2 - half, height // 2 - half),
                   (width // 2 + half, height // 2 + half))

    @property
    def width(self):
        return max(0, self.bottom_right.x - self.top_left.x)

    @property
    def height(self):
        return max(0, self.bottom_right.y - self.top_left.y)

    @property
    def area(self):
        return self.width * self.height

    def is_empty(self):
        return self.area == 0

    def clip(self, width, height):
        """
        Clip the region to a ``width`` x ``height`` frame.

        :param width: frame width
        :param height: frame height
        :return: the clipped Region
        :raise EmptyRegionError: nothing of the region is left.
        """
        x0 = min(max(self.top_left.x, 0), width)
        y0 = min(max(self.top_left.y, 0), height)
        x1 = min(max(self.bottom_right.x, 0), width)
        y1 = min(max(self.bottom_right.y, 0), height)
        clipped = Region((x0, y0), (x1, y1))
        if clipped.is_empty():
            raise EmptyRegionError(
                'Region {} is empty inside a {}x{} image'.format(
                    tuple(self), width, height))
        return clipped

    def slices(self):
        """
        numpy slices selecting the region, rows first.
        """
        return (slice(self.top_left.y, self.bottom_right.y),
                slice(self.top_left.x, self.bottom_right.x))


def _point(p):
    if isinstance(p, Point):
        return p
    if (istuple(p) or isinstance(p, list)) and len(p) == 2 \
            and all(isnum(c) for c in p):
        return Point(int(p[0]), int(p[1]))
    raise TypeError('Expected an (x, y) pair, got {!r}'.format(p))


def validate(image):
    """
    Check that ``image`` is a ``(height, width, 3)`` uint8 array.

    :return: the image itself
    """
    if not isinstance(image, npy.ndarray):
        raise ValueError('Expected a numpy array, got {}'.format(
            type(image).__name__))
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError('Expected a 3 channel image, got shape {}'.format(
            image.shape))
    if image.dtype != npy.uint8:
        raise ValueError('Expected 8-bit channels, got {}'.format(
            image.dtype))
    return image


def load_image(path):
    """
    Load an image file as a BGR frame.
    """
    if not os.path.exists(path):
        raise IOError('No such image: {!r}'.format(path))
    with PILImage.open(path) as img:
        rgb = npy.asarray(img.convert('RGB'))
    return npy.ascontiguousarray(rgb[:, :, ::-1])


def to_array(data):
    """
    Turn input types in a common form used by the rest of the package: a
    BGR uint8 numpy frame. Accepts numpy arrays, PIL images and paths.
    """
    if isinstance(data, npy.ndarray):
        return validate(data)
    if isinstance(data, PILImage.Image):
        rgb = npy.asarray(data.convert('RGB'))
        return npy.ascontiguousarray(rgb[:, :, ::-1])
    if isinstance(data, (str, os.PathLike)):
        return load_image(data)
    raise ValueError('Image is not in an accepted format: {}'.format(
        type(data).__name__))


def blank(width, height, color=(0, 0, 0)):
    """
    A ``width`` x ``height`` frame filled with ``color``.
    """
    img = npy.empty((height, width, 3), dtype=npy.uint8)
    img[:, :] = color
    return img
