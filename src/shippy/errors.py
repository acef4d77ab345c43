"""Custom exception types for shippy."""


class ShippyError(Exception):
    """Base exception for all expected release-note generation errors."""


class ConfigurationError(ShippyError):
    """Raised when runtime configuration or caller input is missing or invalid."""


class AuthenticationError(ShippyError):
    """Raised when the GitLab API token cannot be obtained."""


class ParseError(ShippyError):
    """Raised when a release tag does not carry a numeric suffix."""


class NotFoundError(ShippyError):
    """Raised when a tag or a requested merge request does not exist."""


class RefNotFoundError(NotFoundError):
    """Raised when a ref name resolves through none of the lookup strategies."""


class HistoryError(ShippyError):
    """Raised when walking the repository history fails."""


class TransportError(ShippyError):
    """Raised when a GitLab API request cannot be sent or is rejected."""


class DecodeError(ShippyError):
    """Raised when a GitLab API response is not the expected JSON."""
