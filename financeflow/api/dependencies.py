"""
FastAPI dependencies shared by the routers.
"""

from fastapi import Request

from financeflow.ledger import FinanceStore


def get_store(request: Request) -> FinanceStore:
    """Return the ledger store owned by the running application."""
    return request.app.state.store
