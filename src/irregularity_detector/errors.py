"""Exceptions raised while scanning a directory."""


class ScanError(Exception):
    """Base class for scan failures."""


class DirectoryUnavailable(ScanError):
    """The scan root is missing, not a directory, or cannot be listed."""


class FileUnreadable(ScanError):
    """A single file could not be opened or read. The scan goes on without it."""

    def __init__(self, path, reason):
        super().__init__(f"Failed to open the file: {path} ({reason})")
        self.path = path
        self.reason = reason


class RangeTooSmall(ScanError, ValueError):
    """The byte range left after trimming is too short to analyze."""


# An empty analyzed range is handled exactly like a short one.
DivisionDegenerate = RangeTooSmall


class SignatureTableError(ScanError, ValueError):
    """A signature file could not be parsed into (name, score) entries."""
