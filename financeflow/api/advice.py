"""
Personalized financial advice API endpoint.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from financeflow.api.dependencies import get_store
from financeflow.ledger import FinanceStore
from financeflow.services.advice import (
    AdviceService,
    AdviceUnavailableError,
    build_advice_request,
    get_advice_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ADVICE_FAILURE_MESSAGE = "Could not generate financial advice. Please try again later."


class AdviceResponse(BaseModel):
    advice: str


@router.post("", response_model=AdviceResponse)
def generate_advice(
    store: FinanceStore = Depends(get_store),
    service: AdviceService = Depends(get_advice_service),
):
    """Generate advice from the current spending, goals, income and budget."""
    request = build_advice_request(store)
    try:
        advice = service.generate(request)
    except AdviceUnavailableError:
        raise HTTPException(status_code=503, detail=ADVICE_FAILURE_MESSAGE)
    return AdviceResponse(advice=advice)
