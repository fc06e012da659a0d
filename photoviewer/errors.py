"""Error types raised by the viewer core and its collaborators."""

from __future__ import annotations


class PhotoViewerError(Exception):
    """Base class for viewer errors."""


class ImageLoadFailed(PhotoViewerError):
    """The file is missing, unreadable or not a decodable image."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Error reading {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class DirectoryUnavailable(PhotoViewerError):
    """The directory of the loaded image could not be listed."""

    def __init__(self, directory: str, reason: str = ""):
        self.directory = directory
        self.reason = reason
        msg = f"Cannot list {directory}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
