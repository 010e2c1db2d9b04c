# -*- coding: utf-8 -*-

from HistoSeg.base import logger
from HistoSeg.color import Label
from HistoSeg.config import Config
from HistoSeg.image import Region, validate
from HistoSeg.segmentation.block_segmentation import (block_grid, overlay,
                                                      segment)
from HistoSeg.segmentation.reference_set import ReferenceSet
from HistoSeg.segmentation.sampler import Sampler


__all__ = [
    'Session'
]


class Session(object):
    """
    Holds the background and object references of one segmentation
    session, and the captures that fill them.

    A background capture replaces the whole background set with the
    histograms of the large blocks tiling the frame. An object capture adds
    the histogram of the small square at the center of the frame to the
    object set, so object captures accumulate while only the last
    background capture counts.

    >>> session = Session()
    >>> session.capture_background(empty_scene)
    >>> session.capture_object(scene_with_object)
    >>> reco = session.segment(frame)
    """

    def __init__(self, block_size=None, background_block=None,
                 object_size=None, colors=None, alpha=None, config=None):
        if config is None:
            config = Config
        if block_size is None:
            block_size = config.getint('segmentation', 'block_size')
        if background_block is None:
            background_block = config.getint('capture', 'background_block')
        if object_size is None:
            object_size = config.getint('capture', 'object_size')
        if colors is None:
            colors = {
                Label.BACKGROUND: config.getcolor('colors', 'background'),
                Label.OBJECT: config.getcolor('colors', 'object'),
            }
        if alpha is None:
            alpha = config.getfloat('segmentation', 'alpha')

        for name, value in (('block_size', block_size),
                            ('background_block', background_block),
                            ('object_size', object_size)):
            if value < 1:
                raise ValueError('{} must be positive, got {}'.format(
                    name, value))

        self.block_size = block_size
        self.background_block = background_block
        self.object_size = object_size
        self.colors = colors
        self.alpha = alpha
        self._sampler = Sampler()
        self._background_set = ReferenceSet(Label.BACKGROUND)
        self._object_set = ReferenceSet(Label.OBJECT)

    @property
    def background_set(self):
        return self._background_set

    @property
    def object_set(self):
        return self._object_set

    def object_region(self, frame):
        """
        The square an object capture samples by default.
        """
        height, width = frame.shape[:2]
        return Region.centered(width, height, self.object_size)

    @staticmethod
    def halves(frame):
        """
        Left and right halves of the frame.
        """
        height, width = frame.shape[:2]
        return (Region((0, 0), (width // 2, height)),
                Region((width // 2, 0), (width, height)))

    def capture_background(self, frame, regions=None, block_size=None):
        """
        Replace the background references.

        :param frame: frame showing the background only
        :param regions: regions to sample, by default the
                        ``background_block`` blocks fully inside the frame
        :param block_size: override of ``background_block``
        :return: the number of background references
        """
        validate(frame)
        if regions is None:
            if block_size is None:
                block_size = self.background_block
            height, width = frame.shape[:2]
            regions = block_grid(width, height, block_size, partial=False)
        distributions = self._sampler.sample_all(frame, regions)
        if not distributions:
            logger.warning('Session: frame too small for background blocks, '
                           'background references cleared')

        self._background_set.replace(distributions)
        nb = len(self._background_set)
        logger.info('Session: {} background histograms'.format(nb))
        return nb

    def capture_object(self, frame, region=None):
        """
        Add one object reference.

        :param frame: frame with the object inside ``region``
        :param region: region to sample, the centered ``object_size``
                       square by default
        :return: the number of object references
        """
        if region is None:
            region = self.object_region(frame)
        self._object_set.append(self._sampler.sample(frame, region))
        nb = len(self._object_set)
        logger.info('Session: {} object histograms'.format(nb))
        return nb

    def compare(self, frame, region_a=None, region_b=None):
        """
        Distance between the color distributions of two regions of a frame,
        the left and right halves by default.
        """
        if region_a is None or region_b is None:
            left, right = self.halves(frame)
            region_a = left if region_a is None else region_a
            region_b = right if region_b is None else region_b
        dist = self._sampler.sample(frame, region_a).distance(
            self._sampler.sample(frame, region_b))
        logger.info('Session: distance is {:.6f}'.format(dist))
        return dist

    def segment(self, frame):
        """
        Paint every block of the frame with the color of its label.
        """
        return segment(frame, self._background_set, self._object_set,
                       self.block_size, self.colors)

    def recognize(self, frame):
        """
        The segmentation blended over the gray frame.
        """
        return overlay(frame, self.segment(frame), self.alpha)

    def reset(self):
        self._background_set.clear()
        self._object_set.clear()
        logger.info('Session: references cleared')
