"""Translation backends.

Exports:
    Backend: Protocol every backend satisfies
    BaseBackend: Shared translate pipeline (defaults, links, plurals)
    SimpleBackend: In-memory nested dict
    KeyValueBackend: Flat JSON values in any MutableMapping
    ChainBackend: Ordered combination of backends
    load_file: Decode one locale file (.json, .yml, .yaml)

Python 3.13+.
"""

from .base import BaseBackend
from .chain import ChainBackend
from .key_value import KeyValueBackend, SubtreeProxy
from .loading import LOADERS, expand_load_path, load_file
from .protocol import Backend
from .simple import SimpleBackend

__all__ = [
    "LOADERS",
    "Backend",
    "BaseBackend",
    "ChainBackend",
    "KeyValueBackend",
    "SimpleBackend",
    "SubtreeProxy",
    "expand_load_path",
    "load_file",
]
