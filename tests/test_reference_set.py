# -*- coding: utf-8 -*-

import math

import pytest

from HistoSeg.color import Label
from HistoSeg.exceptions import SegmentationError
from HistoSeg.segmentation.color_distribution import ColorDistribution
from HistoSeg.segmentation.reference_set import NO_DATA, ReferenceSet


def dist_of(*colors):
    cd = ColorDistribution()
    for c in colors:
        cd.add(c)
    cd.finished()
    return cd


def test_empty_set_has_no_data_distance():
    refs = ReferenceSet()
    d = refs.minimum_distance(dist_of((0, 0, 0)))
    assert d == NO_DATA
    assert math.isinf(d)
    assert len(refs) == 0
    assert not refs


def test_minimum_distance_considers_every_member():
    refs = ReferenceSet(Label.OBJECT)
    refs.append(dist_of((0, 0, 255)))
    assert refs.minimum_distance(dist_of((0, 255, 0))) == pytest.approx(2.0)
    refs.append(dist_of((0, 255, 0)))
    assert len(refs) == 2
    assert refs.minimum_distance(dist_of((0, 255, 0))) == 0.0
    assert refs.minimum_distance(dist_of((0, 0, 255))) == 0.0


def test_clear_forgets_everything():
    refs = ReferenceSet(distributions=[dist_of((0, 0, 0)),
                                       dist_of((9, 9, 9))])
    assert len(refs) == 2
    refs.clear()
    assert len(refs) == 0
    assert refs.minimum_distance(dist_of((0, 0, 0))) == NO_DATA


def test_only_finished_distributions_are_accepted():
    refs = ReferenceSet()
    open_cd = ColorDistribution()
    open_cd.add((0, 0, 0))
    with pytest.raises(SegmentationError):
        refs.append(open_cd)
    with pytest.raises(SegmentationError):
        refs.append('not a distribution')
    with pytest.raises(SegmentationError):
        refs.extend([dist_of((0, 0, 0)), open_cd])
    assert len(refs) == 0


def test_snapshot_is_unaffected_by_later_changes():
    refs = ReferenceSet()
    first = dist_of((0, 0, 0))
    refs.append(first)
    snap = refs.snapshot()
    refs.append(dist_of((1, 1, 1)))
    refs.clear()
    assert snap == (first,)


def test_iteration_and_indexing_keep_order():
    a, b = dist_of((0, 0, 0)), dist_of((255, 255, 255))
    refs = ReferenceSet(Label.BACKGROUND, [a, b])
    assert list(refs) == [a, b]
    assert refs[1] is b
    assert refs.label == Label.BACKGROUND
    assert 'background' in repr(refs)


def test_replace_swaps_content():
    refs = ReferenceSet(distributions=[dist_of((0, 0, 0))])
    new = [dist_of((255, 0, 0)), dist_of((0, 255, 0))]
    refs.replace(new)
    assert list(refs) == new
    with pytest.raises(SegmentationError):
        refs.replace([ColorDistribution()])
    assert list(refs) == new
