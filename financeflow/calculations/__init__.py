"""
Financial Calculation Engine

Pure, stateless calculators for loans, livestock investments and
savings goals. No function performs I/O or keeps state between calls.
"""

from financeflow.calculations import loans, livestock, goals

__all__ = ["loans", "livestock", "goals"]
