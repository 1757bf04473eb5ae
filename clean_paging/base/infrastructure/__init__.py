# (c) Nelen & Schuurmans

from .asyncio_scheduler import *  # NOQA
