"""
Models package for jsdev

Contains data structures and type definitions for the preprocessing pipeline.
"""

from .state import ProgramState, pipeline
from .tags import TagDefinition
from .scanner import CursorState, TransformResult, EOF
from .errors import (
    JsdevError,
    ConfigurationError,
    ScanError,
    OutputError,
    InputError,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "TagDefinition",
    "CursorState",
    "TransformResult",
    "EOF",
    "JsdevError",
    "ConfigurationError",
    "ScanError",
    "OutputError",
    "InputError",
]
