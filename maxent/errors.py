"""
Error taxonomy for the MaxEnt prior layer.

All errors derive from ValueError so that service code which validates
input with ``except ValueError`` (see maxent.services) handles them
without special cases.

    ConfigError - missing or invalid parameter, unknown grid scheme,
                  unreadable model file
    DomainError - query argument outside its documented range
    DataError   - tabulated data that cannot be parsed

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""


class MaxentError(ValueError):
    """Base class for all errors raised by the maxent package."""


class ConfigError(MaxentError):
    """A parameter is missing, malformed, or out of its allowed range."""


class DomainError(MaxentError):
    """A query argument lies outside the documented domain."""


class DataError(MaxentError):
    """Tabulated input data could not be parsed."""
