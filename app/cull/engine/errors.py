"""Exception types raised by the deletion engine."""


class CullError(Exception):
    """Base class for all cull errors."""


class ConfigurationError(CullError):
    """Raised when a search configuration is invalid.

    Configuration errors are fatal and are always raised before any
    traversal of the filesystem begins.
    """
