"""
The entire public API is available at root level::

    from rakuten_ws import Resource, Registry, SearchResult, to_snake, ...
"""
from . import errors, naming
from .__about__ import __description__, __version__  # noqa
from .config import *  # noqa
from .errors import *  # noqa
from .naming import *  # noqa
from .resource import *  # noqa
from .search import *  # noqa

__all__ = ["errors", "naming"]
