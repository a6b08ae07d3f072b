"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI

from financeflow import __version__
from financeflow.config import get_settings
from financeflow.api import router as api_router
from financeflow.ledger import FinanceStore

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_store() -> FinanceStore:
    """Create the session store, optionally pre-filled with sample data."""
    store = FinanceStore(budget=settings.default_monthly_budget)
    if settings.seed_demo_data:
        store.seed_demo_data()
        logger.info("Loaded demo transactions, goals and categories")
    return store


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Personal and agricultural finance dashboard: budgets, goals and loan calculators",
    version=__version__,
    debug=settings.debug,
)
app.state.store = create_store()

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}
