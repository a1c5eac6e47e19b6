# errors.py


class PathTracerError(Exception):
    """Base class for errors raised by the renderer."""


class ConfigurationError(PathTracerError, ValueError):
    """Render settings or scene rejected before any pixel work starts."""
