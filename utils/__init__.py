"""
Utility functions package for the court scheduler.
"""

from .date_utils import DateUtils
from .text_utils import TextUtils

__all__ = ['DateUtils', 'TextUtils']
