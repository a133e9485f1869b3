# app/utils/__init__.py
"""
Shared helpers used across the api, models and services packages.
"""

from .datetime_utils import DateTimeUtils

__all__ = ['DateTimeUtils']
