# src/goldwatch/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised by the providers
and handled by the update cycle.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class NetworkError(DomainError):
    """Raised on transport failure, timeout, non-success HTTP status or undecodable body."""
    pass


class ValidationError(DomainError):
    """Raised when an upstream response does not have the expected shape."""
    pass


class NoDataAvailable(DomainError):
    """Raised when the spot price cannot be fetched and nothing is cached."""
    pass
