"""Errors raised while resolving and decoding name service accounts."""


class NameServiceError(Exception):
    """Base class for every name service failure."""


class EmptyPathError(NameServiceError, ValueError):
    """Raised when a name path has no labels."""


class DerivationExhaustedError(NameServiceError):
    """Raised when no bump seed yields an off-curve program address."""


class AccountNotFoundError(NameServiceError, LookupError):
    """Raised when the RPC node has no account at the name key."""


class InvalidRecordError(NameServiceError, ValueError):
    """Raised when account data is too short for a name record header."""
