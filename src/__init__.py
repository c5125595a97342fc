"""
jsdev - Activate tagged comments in JavaScript sources

A one-pass macro preprocessor that keeps debug/trace/log instrumentation
inert as comments, and turns a chosen subset of it into code on demand.
"""

__version__ = "1.0.0"

from .lib import Preprocessor, TagRegistry, registry_fromTokens, transform, LOG, state_connectToLogger

__all__ = [
    "Preprocessor",
    "TagRegistry",
    "registry_fromTokens",
    "transform",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
