# -*- coding: utf-8 -*-

import numpy as npy
import pytest

from HistoSeg.exceptions import EmptyRegionError
from HistoSeg.image import Region, blank
from HistoSeg.segmentation.sampler import Sampler, region_distance, sample

from tests.helpers import BLACK, RED, halves


def test_sample_is_finished_and_counts_region_pixels(black_frame):
    cd = sample(black_frame, (2, 3), (12, 8))
    assert cd.is_finished
    assert cd.nb == 10 * 5


def test_sample_excludes_bottom_right_bound():
    img = halves(4, 4, BLACK, RED)
    cd = sample(img, (0, 0), (2, 4))
    assert cd.histogram[0, 0, 0] == 1.0
    cd = sample(img, (1, 0), (3, 4))
    assert cd.histogram[0, 0, 0] == pytest.approx(0.5)
    assert cd.histogram[0, 0, 7] == pytest.approx(0.5)


def test_sample_clips_to_image(noisy_frame):
    height, width = noisy_frame.shape[:2]
    clipped = sample(noisy_frame, (width - 5, height - 5), (width, height))
    overhanging = sample(noisy_frame, (width - 5, height - 5),
                         (width + 20, height + 20))
    assert overhanging == clipped
    assert overhanging.nb == 25

    negative = sample(noisy_frame, (-10, -10), (3, 3))
    assert negative.nb == 9


@pytest.mark.parametrize('top_left, bottom_right', [
    ((100, 0), (120, 10)),    # right of the image
    ((0, 48), (10, 60)),      # below the image
    ((5, 5), (5, 10)),        # zero width
    ((8, 8), (2, 2)),         # inverted
])
def test_sample_empty_region_fails(black_frame, top_left, bottom_right):
    with pytest.raises(EmptyRegionError):
        sample(black_frame, top_left, bottom_right)


def test_region_distance():
    img = halves(20, 10, BLACK, RED)
    left = Region((0, 0), (10, 10))
    right = Region((10, 0), (20, 10))
    assert region_distance(img, left, right) == pytest.approx(2.0)
    assert region_distance(img, left, left) == 0.0


def test_sampler_validates_image():
    sampler = Sampler()
    with pytest.raises(ValueError):
        sampler.sample(npy.zeros((10, 10), dtype=npy.uint8),
                       Region((0, 0), (2, 2)))
    with pytest.raises(ValueError):
        sampler.sample(npy.zeros((10, 10, 3), dtype=npy.float32),
                       Region((0, 0), (2, 2)))


def test_sampler_sample_all_keeps_order():
    img = halves(20, 10, BLACK, RED)
    red, black = Sampler().sample_all(img, [((10, 0), (20, 10)),
                                            ((0, 0), (10, 10))])
    assert red.dominant_bin() == (0, 0, 7)
    assert black.dominant_bin() == (0, 0, 0)


def test_sample_does_not_touch_image(noisy_frame):
    before = noisy_frame.copy()
    sample(noisy_frame, (0, 0), (20, 20))
    assert npy.array_equal(before, noisy_frame)


def test_region_helpers():
    r = Region.centered(640, 480, 50)
    assert r == Region((295, 215), (345, 265))
    assert r.width == 50 and r.height == 50
    assert Region.from_size(1, 2, 3, 4) == Region((1, 2), (4, 6))
    with pytest.raises(TypeError):
        Region('a', (1, 1))
    assert blank(3, 2, RED).shape == (2, 3, 3)


@pytest.mark.parametrize('image, bottom_right', [
    (npy.full((4, 4, 3), 0.9, dtype=npy.float32), (4, 4)),
    (npy.zeros((4, 3), dtype=npy.uint8), (3, 4)),    # rows read as pixels
])
def test_sample_rejects_malformed_frames(image, bottom_right):
    with pytest.raises(ValueError):
        sample(image, (0, 0), bottom_right)
