"""Utility functions for roview."""

from .configure_logging import configure_logging, reset_logging

__all__ = ["configure_logging", "reset_logging"]
