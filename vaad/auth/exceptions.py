"""Exception taxonomy for admin authentication.

Only ``AuthenticationError`` and the ``InvalidSessionError`` family are
expected during normal operation. ``ConfigurationError`` means the service
cannot issue or accept session tokens at all.
"""


class AuthenticationError(Exception):
    """Raised when submitted credentials are rejected."""

    pass


class ConfigurationError(Exception):
    """Raised when the auth configuration is unusable (e.g. no signing key)."""

    pass


class InvalidSessionError(Exception):
    """Base class for session tokens that must be rejected."""

    reason = "invalid"


class MalformedTokenError(InvalidSessionError):
    """Token cannot be parsed or lacks the required claims."""

    reason = "malformed"


class TokenSignatureError(InvalidSessionError):
    """Token signature does not match the server signing key."""

    reason = "signature_mismatch"


class TokenExpiredError(InvalidSessionError):
    """Token is past its expiry time."""

    reason = "expired"
