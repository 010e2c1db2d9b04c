# -*- coding: utf-8 -*-

from HistoSeg.image import blank


BLACK = (0, 0, 0)
RED = (0, 0, 255)  # BGR
GREEN = (0, 255, 0)
BLUE = (255, 0, 0)


def halves(width, height, left, right):
    img = blank(width, height, left)
    img[:, width // 2:] = right
    return img
