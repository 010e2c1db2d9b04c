# -*- coding: utf-8 -*-

from HistoSeg.base import rev_tuple


__all__ = [
    'Color', 'Label'
]


class Label(object):
    """
    The two classes a block can be given.
    """
    BACKGROUND = 0
    OBJECT = 1

    names = {
        BACKGROUND: 'background',
        OBJECT: 'object',
    }

    @classmethod
    def name(cls, label):
        return cls.names[label]


class Color(object):
    """
    Color is a class which stores commonly used colors.

    Default _color space is RGB, frames coming from OpenCV are BGR: use
    to_bgr() before painting them.
    """
    BLACK = (0, 0, 0)
    WHITE = (255, 255, 255)
    RED = (255, 0, 0)

    # segmentation overlay
    BACKGROUND = BLACK
    FOREGROUND = RED

    @classmethod
    def to_bgr(cls, color):
        """
        Convert a RGB _color to BGR.

        Args:
            color (tuple): RGB _color

        Returns:
            (tuple) the same _color in BGR order

        Examples:
            >>> Color.to_bgr(Color.RED)
            (0, 0, 255)
        """
        return rev_tuple(color)

    @classmethod
    def label_colors(cls):
        """
        The default BGR paint colors of a segmentation, indexed by Label.
        """
        return {
            Label.BACKGROUND: cls.to_bgr(cls.BACKGROUND),
            Label.OBJECT: cls.to_bgr(cls.FOREGROUND),
        }
