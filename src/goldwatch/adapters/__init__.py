# src/goldwatch/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (price and exchange rate APIs)
- Formatting (display strings)
- Telegram (scheduler, presentation sink and commands)
"""

__all__ = []
