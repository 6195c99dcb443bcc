"""Exception hierarchy for the Person API."""
from __future__ import annotations


class PersonApiError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(PersonApiError):
    """Raised at construction/startup when required configuration is missing or invalid."""


class UnsupportedDataSourceError(ConfigurationError, ValueError):
    """Raised when a repository is requested for an unknown data source."""

    def __init__(self, data_source: object, message: str = "Unsupported data source."):
        super().__init__(message)
        self.data_source = data_source
        self.message = message


class OperationCancelledError(PersonApiError):
    """Raised when a repository call starts with its cancel event already set."""
