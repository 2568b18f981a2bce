# __init__.py

from .attributes import HIGHLIGHT_ATTRS
from .config import ColordinateConfig
from .document import to_document
from .errors import ColordinateError, HostQueryFailure, SessionError, ValidationError
from .extractor import extract_current
from .hosts import EmbeddedHost, RemoteHost, create_host
from .logger import Logger
from .model import Color, ConfigModel, GroupConfig, parse
from .script import to_colorscheme, to_script
from .session import ColordinateSession, MemoryBuffer

__all__ = [
    "HIGHLIGHT_ATTRS",
    "Color", "ConfigModel", "GroupConfig",
    "parse", "to_script", "to_colorscheme", "to_document", "extract_current",
    "EmbeddedHost", "RemoteHost", "create_host",
    "ColordinateSession", "MemoryBuffer", "ColordinateConfig", "Logger",
    "ColordinateError", "ValidationError", "HostQueryFailure", "SessionError",
]
