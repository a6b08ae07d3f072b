"""
FinanceFlow - personal and agricultural finance dashboard service.
"""

__version__ = "0.1.0"
