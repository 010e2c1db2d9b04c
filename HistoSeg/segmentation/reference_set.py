# -*- coding: utf-8 -*-

import threading

from HistoSeg.color import Label
from HistoSeg.exceptions import SegmentationError
from HistoSeg.segmentation.color_distribution import ColorDistribution


__all__ = [
    'ReferenceSet', 'NO_DATA'
]

# distance to a set without any distribution
NO_DATA = float('inf')


class ReferenceSet(object):
    """
    The color distributions describing one class, background or object.

    Distributions are appended while capturing and read while
    classifying. Readers work on a snapshot, so a capture running in
    another thread never shows them a half-updated set.
    """

    def __init__(self, label=Label.BACKGROUND, distributions=None):
        self._label = label
        self._lock = threading.Lock()
        self._items = ()
        if distributions:
            self.extend(distributions)

    @property
    def label(self):
        return self._label

    def clear(self):
        """
        Forget every distribution.
        """
        with self._lock:
            self._items = ()

    def append(self, distribution):
        """
        Add one finished distribution to the set.
        """
        self._check(distribution)
        with self._lock:
            self._items = self._items + (distribution,)

    def replace(self, distributions):
        """
        Swap the whole content of the set for ``distributions`` at once.
        """
        distributions = tuple(distributions)
        for cd in distributions:
            self._check(cd)
        with self._lock:
            self._items = distributions

    def extend(self, distributions):
        distributions = tuple(distributions)
        for cd in distributions:
            self._check(cd)
        with self._lock:
            self._items = self._items + distributions

    def snapshot(self):
        """
        The current distributions as a tuple.
        """
        with self._lock:
            return self._items

    def minimum_distance(self, query):
        """
        Smallest distance between ``query`` and a distribution of the set.

        :return: float, NO_DATA when the set is empty
        """
        items = self.snapshot()
        if not items:
            return NO_DATA
        return min(query.distance(cd) for cd in items)

    def _check(self, distribution):
        if not isinstance(distribution, ColorDistribution):
            raise SegmentationError(
                'Expected a ColorDistribution, got {}'.format(
                    type(distribution).__name__))
        if not distribution.is_finished:
            raise SegmentationError(
                'Only finished distributions can be stored')

    def __len__(self):
        return len(self.snapshot())

    def __iter__(self):
        return iter(self.snapshot())

    def __getitem__(self, index):
        return self.snapshot()[index]

    def __bool__(self):
        return bool(self.snapshot())

    def __getstate__(self):
        return {'label': self._label, 'items': self.snapshot()}

    def __setstate__(self, state):
        self._label = state['label']
        self._items = tuple(state['items'])
        self._lock = threading.Lock()

    def __repr__(self):
        return '<ReferenceSet {} ({} distributions)>'.format(
            Label.name(self._label), len(self))
