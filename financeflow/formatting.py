"""
Display formatting helpers shared by plan summaries and advice prompts.
"""


def format_currency(amount: float) -> str:
    """Format an amount as US dollars, e.g. 1234.5 -> "$1,234.50"."""
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def format_months(months: float) -> str:
    """Format a month count with one decimal place."""
    return f"{months:.1f}"
