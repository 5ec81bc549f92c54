"""Readable renaming of mangled JavaScript syntax trees."""

from __future__ import annotations

from .exceptions import (
    DuplicateLabelError,
    LabelError,
    NameSpaceExhaustedError,
    UnmangleError,
    UnresolvedLabelError,
)
from .name_pool import NamePool
from .options import UnmangleOptions, keep_names
from .report import RenameReport
from .scope import analyze
from .unmangler import Unmangler, unmangle

__version__ = "0.1.0"

__all__ = [
    "unmangle",
    "Unmangler",
    "UnmangleOptions",
    "NamePool",
    "RenameReport",
    "analyze",
    "keep_names",
    "UnmangleError",
    "LabelError",
    "DuplicateLabelError",
    "UnresolvedLabelError",
    "NameSpaceExhaustedError",
]
