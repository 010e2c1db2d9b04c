# -*- coding: utf-8 -*-

__all__ = [
    'SegmentationError', 'EmptyRegionError', 'EmptyDistributionError',
    'DistributionFinishedError', 'DistributionNotFinishedError'
]


class SegmentationError(Exception):
    """
    Base class of every error raised by HistoSeg.
    """


class EmptyRegionError(SegmentationError, ValueError):
    """
    The requested region holds no pixel once clipped to the image.
    """


class EmptyDistributionError(SegmentationError, ValueError):
    """
    A color distribution was finished without any sample.
    """


class DistributionFinishedError(SegmentationError):
    pass


class DistributionNotFinishedError(SegmentationError):
    pass
