# src/file_merge/__init__.py
"""
Concatenate every file of a directory that ends with a given suffix into a
single output file, each preceded by a `--- FILE: <name> ---` header.

Typical use:
    from file_merge import merge_files
    merge_files("src", suffix=".rs")
"""

from .concatenator import Concatenator, merge_files
from .config import load_config
from .errors import (
    ConfigurationError,
    InputFileReadError,
    MergeError,
    OutputWriteError,
    TargetDirectoryError,
)
from .models import MergeConfig, MergedFile, MergeResult

__all__ = [
    "Concatenator",
    "merge_files",
    "load_config",
    "MergeConfig",
    "MergedFile",
    "MergeResult",
    "MergeError",
    "ConfigurationError",
    "TargetDirectoryError",
    "InputFileReadError",
    "OutputWriteError",
]
