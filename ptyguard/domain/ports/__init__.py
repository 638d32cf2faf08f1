"""Domain ports - interfaces for infrastructure to implement."""

from .pty_port import PTYFactory
from .url_opener import URLOpener

__all__ = [
    "PTYFactory",
    "URLOpener",
]
