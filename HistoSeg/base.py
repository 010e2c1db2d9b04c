# -*- coding: utf-8 -*-

import numbers

try:
    import cv2
except ImportError:
    raise ImportError("Cannot load OpenCV library which is required.")
else:
    if cv2.__version__ < '3':
        raise ImportError("Your OpenCV library version is lower than 3.")

import numpy as npy

from HistoSeg.logger import Logger as logger


# couple quick typecheck helper functions
def isnum(n):
    """
    Determines if it is a number or not.
    Returns: Boolean
    """
    return isinstance(n, numbers.Number) and not isinstance(n, bool)


def istuple(n):
    """
    Determines if it is a tuple or not.
    Returns: Boolean
    """
    return type(n) == tuple


def rev_tuple(n):
    """
    Reverses a tuple.
    Returns: Tuple
    """
    return tuple(reversed(n))
