"""
Exceptions for the extraction module.

This module defines custom exceptions used while extracting descriptions.
"""


class ExtractionError(Exception):
    """Base class for extraction exceptions."""

    pass


class ProviderNotConfigured(ExtractionError):
    """
    Exception raised when a completion provider is used without a credential.
    """

    pass


class ProviderError(ExtractionError):
    """
    Exception raised when a completion provider call fails.

    This covers HTTP error statuses, client/transport errors and responses
    that do not have the expected chat completion shape.
    """

    pass
