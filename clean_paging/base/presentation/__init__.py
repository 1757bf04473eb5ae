# (c) Nelen & Schuurmans

from .paged_view_adapter import *  # NOQA
from .renderer import *  # NOQA
