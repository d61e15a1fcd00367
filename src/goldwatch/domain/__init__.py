# src/goldwatch/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from goldwatch.domain.models import (
    CycleState,
    DisplayState,
    DisplayStatus,
    ExchangeRate,
    Notice,
    PriceProvenance,
    RateSource,
    SpotPriceReading,
)
from goldwatch.domain.errors import (
    DomainError,
    NetworkError,
    NoDataAvailable,
    ValidationError,
)

__all__ = [
    "SpotPriceReading",
    "ExchangeRate",
    "DisplayState",
    "DisplayStatus",
    "CycleState",
    "Notice",
    "PriceProvenance",
    "RateSource",
    "DomainError",
    "NetworkError",
    "ValidationError",
    "NoDataAvailable",
]
