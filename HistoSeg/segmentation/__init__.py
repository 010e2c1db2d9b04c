# -*- coding: utf-8 -*-

from .color_distribution import *
from .sampler import *
from .reference_set import *
from .classifier import *
from .segmentation_base import *
from .block_segmentation import *
