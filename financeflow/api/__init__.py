"""
API routes for the finance dashboard.
"""

from fastapi import APIRouter

from financeflow.api import advice, calculations, ledger, planner

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculators"])
router.include_router(planner.router, prefix="/planner", tags=["planner"])
router.include_router(ledger.router, tags=["ledger"])
router.include_router(advice.router, prefix="/advice", tags=["advice"])
