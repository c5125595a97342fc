"""
jsdev - Activate tagged comments in JavaScript sources

A one-pass macro preprocessor that turns selected /*tag ...*/ comments
into debugging, logging or tracing code.
"""

__version__ = "1.0.0"

from .driver import Preprocessor, transform, stream_transform
from .tags import TagRegistry, registry_fromTokens
from .log import LOG, state_connectToLogger

__all__ = [
    "Preprocessor",
    "transform",
    "stream_transform",
    "TagRegistry",
    "registry_fromTokens",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
