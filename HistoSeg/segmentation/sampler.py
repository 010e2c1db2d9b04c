# -*- coding: utf-8 -*-

from HistoSeg.base import logger
from HistoSeg.image import Region, validate
from HistoSeg.segmentation.color_distribution import ColorDistribution


__all__ = [
    'Sampler', 'sample', 'region_distance'
]


def sample(image, top_left, bottom_right):
    """
    Color distribution of the pixels ``top_left <= (x, y) < bottom_right``.

    The region is clipped to the image first, so blocks hanging over the
    right or bottom edge only count the pixels they actually cover.

    :param image: (height, width, 3) uint8 frame
    :param top_left: (x, y) of the first pixel
    :param bottom_right: (x, y) one past the last pixel
    :return: a finished ColorDistribution
    :raise EmptyRegionError: the clipped region holds no pixel
    :raise ValueError: ``image`` is not a 3 channel uint8 frame
    """
    validate(image)
    height, width = image.shape[:2]
    region = Region(top_left, bottom_right).clip(width, height)
    cd = ColorDistribution()
    cd.add_pixels(image[region.slices()])
    cd.finished()
    return cd


def region_distance(image, region_a, region_b):
    """
    Distance between the color distributions of two regions of the same
    image.
    """
    return sample(image, *region_a).distance(sample(image, *region_b))


class Sampler(object):
    """
    Builds color distributions out of the regions of a frame.

    >>> sampler = Sampler()
    >>> cd = sampler.sample(frame, Region((0, 0), (32, 32)))
    """

    def sample(self, image, region):
        region = Region(*region)
        logger.trace('Sampler: sampling {}'.format(tuple(region)))
        return sample(image, region.top_left, region.bottom_right)

    def sample_all(self, image, regions):
        """
        Sample every region in turn.

        :return: list of ColorDistribution, in the order of ``regions``
        """
        return [sample(image, *Region(*r)) for r in regions]
