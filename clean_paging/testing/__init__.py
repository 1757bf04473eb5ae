# (c) Nelen & Schuurmans

from .manual_scheduler import *  # NOQA
