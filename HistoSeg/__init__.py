# -*- coding: utf-8 -*-
from .logger import Logger
from .config import Config
from .exceptions import *
from .color import *
from .image import *
from .segmentation import *
from .session import *
from .commands import *
from .camera import *
from .version import __version__
