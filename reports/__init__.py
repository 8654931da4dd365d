"""
Reports package for the court scheduler.
"""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
