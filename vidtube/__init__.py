"""VidTube: REST backend for a video-sharing platform."""

__version__ = "0.1.0"
