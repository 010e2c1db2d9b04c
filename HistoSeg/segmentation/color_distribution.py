# -*- coding: utf-8 -*-

from HistoSeg.base import npy
from HistoSeg.exceptions import (EmptyDistributionError,
                                 DistributionFinishedError,
                                 DistributionNotFinishedError)


__all__ = [
    'ColorDistribution', 'BINS', 'BIN_WIDTH', 'CELLS'
]

BINS = 8
BIN_SHIFT = 5  # 256 / 8 == 1 << 5
BIN_WIDTH = 1 << BIN_SHIFT
CELLS = BINS * BINS * BINS


class ColorDistribution(object):
    """
    A color histogram of a set of pixels, 8 bins per channel.

    Each channel value is quantized into one of 8 bins of 32 levels, so a
    pixel falls into one of 512 cells. Cells are kept in a single flat
    buffer, the cell of bins (i, j, k) being ``i * 64 + j * 8 + k``.

    Samples are counted with add() or add_pixels(), then finished() turns
    the counts into proportions. A finished distribution can be compared
    to another one with distance() and no longer accepts samples.

    >>> cd = ColorDistribution()
    >>> cd.add((255, 0, 0))
    >>> cd.finished()
    >>> cd.distance(cd)
    0.0
    """
    __slots__ = ('_data', '_nb', '_finished')

    def __init__(self):
        self._data = npy.zeros(CELLS, dtype=npy.float64)
        self._nb = 0
        self._finished = False
        self.reset()

    @staticmethod
    def cell_index(color):
        """
        Flat cell index of a three channel color.

        :param color: three channel values in 0..255
        :return: int in 0..511
        """
        if len(color) != 3:
            raise ValueError('Expected 3 channel values, got {!r}'.format(
                color))
        i, j, k = (int(c) for c in color)
        if not (0 <= i <= 255 and 0 <= j <= 255 and 0 <= k <= 255):
            raise ValueError('Channel values must be in 0..255, got {!r}'
                             .format(color))
        return (i >> BIN_SHIFT) * BINS * BINS + (j >> BIN_SHIFT) * BINS + \
            (k >> BIN_SHIFT)

    def reset(self):
        """
        Zero every cell and the sample count.
        """
        self._data.fill(0.0)
        self._nb = 0
        self._finished = False

    def add(self, color):
        """
        Count one pixel.

        :param color: three channel values in 0..255
        :return: None
        """
        self._check_open()
        self._data[self.cell_index(color)] += 1.0
        self._nb += 1

    def add_pixels(self, pixels):
        """
        Count every pixel of an array whose last axis holds the three
        channels. Same result as add() on each pixel in turn.

        :param pixels: uint8 array of shape (..., 3)
        :return: None
        """
        self._check_open()
        pixels = npy.asarray(pixels)
        if pixels.shape[-1:] != (3,):
            raise ValueError('Expected (..., 3) pixels, got shape {}'.format(
                pixels.shape))
        if pixels.dtype != npy.uint8:
            if pixels.size and (pixels.min() < 0 or pixels.max() > 255):
                raise ValueError('Channel values must be in 0..255')
            pixels = pixels.astype(npy.uint8)

        bins = npy.right_shift(pixels.reshape(-1, 3), BIN_SHIFT).astype(npy.intp)
        idx = bins[:, 0] * (BINS * BINS) + bins[:, 1] * BINS + bins[:, 2]
        self._data += npy.bincount(idx, minlength=CELLS)
        self._nb += idx.shape[0]

    def finished(self):
        """
        Indicate that no more sample will be added: every cell becomes
        the proportion of the samples falling into it.

        :raise EmptyDistributionError: no sample was added.
        :raise DistributionFinishedError: already finished.
        """
        self._check_open()
        if self._nb == 0:
            raise EmptyDistributionError(
                'Cannot finish a color distribution without samples')
        self._data /= float(self._nb)
        self._finished = True

    def distance(self, other):
        """
        Chi-square distance between two finished distributions::

            sum((a - b) ** 2 / (a + b))  for every cell where a + b != 0

        The result is 0 for identical distributions, symmetric, and at most
        2 for two distributions with no cell in common.
        """
        if not (self._finished and other._finished):
            raise DistributionNotFinishedError(
                'Both distributions must be finished to be compared')
        a = self._data
        b = other._data
        denominator = a + b
        mask = denominator != 0
        diff = a[mask] - b[mask]
        return float(npy.sum(diff * diff / denominator[mask]))

    def dominant_bin(self):
        """
        The (i, j, k) bins of the most populated cell.
        """
        idx = int(npy.argmax(self._data))
        return idx // (BINS * BINS), (idx // BINS) % BINS, idx % BINS

    def copy(self):
        cd = ColorDistribution()
        cd._data[:] = self._data
        cd._nb = self._nb
        cd._finished = self._finished
        return cd

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def _check_open(self):
        if self._finished:
            raise DistributionFinishedError(
                'Color distribution is finished, it cannot be changed')

    @property
    def nb(self):
        """
        Number of samples added so far.
        """
        return self._nb

    @property
    def is_finished(self):
        return self._finished

    @property
    def histogram(self):
        """
        Read-only (8, 8, 8) view of the cells.
        """
        view = self._data.reshape(BINS, BINS, BINS).view()
        view.flags.writeable = False
        return view

    def __getstate__(self):
        return self._data.copy(), self._nb, self._finished

    def __setstate__(self, state):
        data, self._nb, self._finished = state
        self._data = npy.array(data, dtype=npy.float64)

    def __eq__(self, other):
        if not isinstance(other, ColorDistribution):
            return NotImplemented
        return (self._nb == other._nb and
                self._finished == other._finished and
                npy.array_equal(self._data, other._data))

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    __hash__ = None

    def __repr__(self):
        return '<ColorDistribution nb={} finished={}>'.format(
            self._nb, self._finished)
