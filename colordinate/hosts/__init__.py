# hosts/__init__.py

from typing import Optional

from .base import Host
from .embedded import EmbeddedHost, HighlightGroup
from .remote import RemoteHost


def create_host(endpoint: Optional[str] = None, logger=None, **kwargs) -> Host:
    """Return a RemoteHost for endpoint, or an EmbeddedHost when endpoint is None."""
    if endpoint:
        return RemoteHost(endpoint, logger=logger, **kwargs)
    return EmbeddedHost(logger=logger)


__all__ = ['Host', 'EmbeddedHost', 'HighlightGroup', 'RemoteHost', 'create_host']
