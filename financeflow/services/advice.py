"""
Financial advice generation using the OpenAI chat completions API.

Builds a fixed prompt from the ledger and passes it to the model. There is no
retry: a failed call raises AdviceUnavailableError for the caller to report.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from openai import OpenAI, OpenAIError

from financeflow.config import get_settings
from financeflow.formatting import format_currency
from financeflow.ledger import EntryType, FinanceStore

logger = logging.getLogger(__name__)

ADVICE_PROMPT = """You are a personal finance advisor. Based on the user's spending habits, savings goals, income, and budget, provide personalized financial advice.

Spending Habits: {spending_habits}
Savings Goals: {savings_goals}
Income: {income}
Budget: {budget}

Provide specific and actionable recommendations to help the user improve their financial situation and achieve their savings goals."""

NO_EXPENSES = "No expenses recorded."
NO_GOALS = "No savings goals set."


class AdviceUnavailableError(Exception):
    """Advice could not be generated."""

    pass


@dataclass(frozen=True)
class AdviceRequest:
    """Inputs substituted into the advice prompt."""

    spending_habits: str
    savings_goals: str
    income: float
    budget: float

    def to_prompt(self) -> str:
        return ADVICE_PROMPT.format(
            spending_habits=self.spending_habits,
            savings_goals=self.savings_goals,
            income=self.income,
            budget=self.budget,
        )


def build_advice_request(store: FinanceStore) -> AdviceRequest:
    """Summarize the ledger's expenses and goals for the advice prompt."""
    spending_habits = "\n".join(
        f"- {format_currency(t.amount)} on {t.category} ({t.description})"
        for t in store.list_transactions(EntryType.expense)
    )
    savings_goals = "\n".join(
        f"- Save {format_currency(g.target_amount)} for {g.name}"
        for g in store.list_goals()
    )
    summary = store.summary()

    return AdviceRequest(
        spending_habits=spending_habits or NO_EXPENSES,
        savings_goals=savings_goals or NO_GOALS,
        income=summary.total_income,
        budget=store.budget,
    )


class AdviceService:
    """Advice generator backed by an OpenAI client."""

    def __init__(self, client: Optional[OpenAI] = None, model: Optional[str] = None):
        settings = get_settings()
        self.model = model or settings.openai_model
        self.temperature = settings.openai_temperature
        self.client = client

        if self.client is None and settings.openai_api_key:
            self.client = OpenAI(api_key=settings.openai_api_key)

    def generate(self, request: AdviceRequest) -> str:
        """
        Generate personalized advice.

        Args:
            request: Prompt inputs built from the ledger

        Returns:
            Advice text from the model

        Raises:
            AdviceUnavailableError: If no client is configured, the call
                fails, or the model returns no text
        """
        if self.client is None:
            logger.error("Advice requested but no OpenAI API key is configured")
            raise AdviceUnavailableError("Advice generation is not configured")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": request.to_prompt()}],
                temperature=self.temperature,
            )
        except OpenAIError as e:
            logger.error(f"Failed to generate advice: {str(e)}")
            raise AdviceUnavailableError(str(e)) from e

        advice = response.choices[0].message.content if response.choices else None
        if not advice:
            logger.error("Advice model returned an empty response")
            raise AdviceUnavailableError("Empty response from advice model")

        return advice.strip()


# Singleton instance
_advice_service: Optional[AdviceService] = None


def get_advice_service() -> AdviceService:
    """Get the advice service singleton."""
    global _advice_service
    if _advice_service is None:
        _advice_service = AdviceService()
    return _advice_service
