# -*- coding: utf-8 -*-
"""Application constants: timing, tabulation, defaults and colors."""

FRAMERATE = 60
PATH_TABULATION_SIZE = 500

DEFAULT_OA = 1.0
DEFAULT_AB = 1.0
DEFAULT_AM_PER_AB = 0.5
DEFAULT_PERIOD_S = 3.0

# Sliders are integer-valued in Qt; 1000 steps gives a 0.001 resolution.
SLIDER_STEPS = 1000

DARK = "#282828"
TRACE = "#0078d7"
ERROR_BACKGROUND = "#ffcccc"
ERROR_BORDER = "#b3b3b3"
