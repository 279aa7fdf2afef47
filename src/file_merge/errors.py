# src/file_merge/errors.py


class MergeError(Exception):
    """Base class for every failure that aborts a merge run."""


class ConfigurationError(MergeError, ValueError):
    """Raised when the merge settings cannot be loaded or fail validation."""


class TargetDirectoryError(MergeError):
    """Raised when the target directory is missing or cannot be listed."""


class InputFileReadError(MergeError):
    """Raised when an input file cannot be opened or read mid-run."""


class OutputWriteError(MergeError):
    """Raised when the output file cannot be created or written."""
