# src/goldwatch/__init__.py
"""
GoldWatch - Gold Price Ticker

Periodically fetches the gold spot price (USD/oz) and the USD→CNY exchange
rate, derives a per-gram local price with a trend indicator, and keeps a
Telegram ticker message up to date. Survives transient API failures by
falling back to backup sources, cached values and a default rate.
"""

__version__ = "1.0.0"
