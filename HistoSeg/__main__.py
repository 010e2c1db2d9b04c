# -*- coding: utf-8 -*-
import sys

from HistoSeg.live import main

sys.exit(main())
