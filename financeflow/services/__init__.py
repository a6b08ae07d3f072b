"""
Application services module.
"""

from financeflow.services.advice import AdviceService, get_advice_service

__all__ = ["AdviceService", "get_advice_service"]
