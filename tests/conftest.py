# -*- coding: utf-8 -*-

import numpy as npy
import pytest

from HistoSeg.config import ConfigParser
from HistoSeg.image import blank

from tests.helpers import BLACK, RED


@pytest.fixture
def config():
    return ConfigParser(environ={})


@pytest.fixture
def black_frame():
    return blank(64, 48, BLACK)


@pytest.fixture
def red_frame():
    return blank(64, 48, RED)


@pytest.fixture
def noisy_frame():
    rng = npy.random.RandomState(0)
    return rng.randint(0, 256, size=(37, 53, 3)).astype(npy.uint8)
