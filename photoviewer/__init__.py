"""PhotoViewer - a minimal image viewer with pan, zoom, rotate and flip."""

__version__ = "1.0.0"
