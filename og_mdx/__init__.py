"""Open Graph metadata extraction and classification."""

from .config import FetchConfig
from .content import extract
from .errors import FetchTimeoutError, OpenGraphError
from .fetcher import fetch, fetch_with_config
from .models import OpenGraphObject
from .taxonomy import TYPES, classify, is_schema, is_type

__all__ = [
    "FetchConfig",
    "FetchTimeoutError",
    "OpenGraphError",
    "OpenGraphObject",
    "TYPES",
    "classify",
    "extract",
    "fetch",
    "fetch_with_config",
    "is_schema",
    "is_type",
]
