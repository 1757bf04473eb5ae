# (c) Nelen & Schuurmans

from .paged_view import *  # NOQA
