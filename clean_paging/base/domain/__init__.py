# (c) Nelen & Schuurmans

from .domain_event import *  # NOQA
from .exceptions import *  # NOQA
from .field_path import *  # NOQA
from .filter import *  # NOQA
from .options import *  # NOQA
from .pagination import *  # NOQA
from .property import *  # NOQA
from .scheduler import *  # NOQA
from .search import *  # NOQA
from .sort import *  # NOQA
from .types import *  # NOQA
from .value_object import *  # NOQA
