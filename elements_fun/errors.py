"""
elements-fun Exceptions

Every error is raised synchronously to the caller. Nothing is retried and
nothing falls back to a default hash or key.
"""


class ElementsFunError(Exception):
    """Base exception for elements-fun."""
    pass


class InvalidContract(ElementsFunError):
    """Contract is malformed or cannot be serialized canonically."""
    pass


class EmptySeed(ElementsFunError):
    """Master seed has zero length."""
    pass


class EncodingError(ElementsFunError):
    """Byte length or format mismatch in caller-supplied data."""
    pass


class ConfigError(ElementsFunError):
    """Configuration file or values are invalid."""
    pass
