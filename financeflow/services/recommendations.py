"""
Static investment and loan suggestions.

The text is a fixed lookup by location, time horizon and risk appetite.
It is illustrative only and carries a disclaimer.
"""

import enum
from typing import Dict, Tuple


class Location(str, enum.Enum):
    urban = "urban"
    rural = "rural"


class TimeHorizon(str, enum.Enum):
    short_term = "short-term"
    medium_term = "medium-term"
    long_term = "long-term"


class RiskAppetite(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


HORIZON_HEADINGS = {
    TimeHorizon.short_term: "### For Savings (1-3 Years):",
    TimeHorizon.medium_term: "### For Investments (3-5 Years):",
    TimeHorizon.long_term: "### For Long-Term Growth (5+ Years):",
}

INVESTMENTS: Dict[Tuple[Location, TimeHorizon, RiskAppetite], str] = {
    # Rural
    (Location.rural, TimeHorizon.short_term, RiskAppetite.low): (
        "- **Cooperative Bank Fixed Deposits (FDs):** Very safe, predictable returns, supports local community.\n"
        "- **Post Office Time Deposit:** Government-backed security."
    ),
    (Location.rural, TimeHorizon.short_term, RiskAppetite.medium): (
        "- **Kisan Vikas Patra (KVP):** A government savings scheme that doubles the investment over a certain period.\n"
        "- **Balanced Mutual Funds:** A mix of equity and debt for moderate growth."
    ),
    (Location.rural, TimeHorizon.short_term, RiskAppetite.high): (
        "- **High-yield Savings Account in a Rural Bank:** Safe and offers better returns than traditional savings.\n"
        "- **Equity Linked Savings Scheme (ELSS):** Higher risk with tax benefits, suitable for those with some risk capacity."
    ),
    (Location.rural, TimeHorizon.medium_term, RiskAppetite.low): (
        "- **National Savings Certificates (NSC):** Government-backed, fixed return, tax benefits.\n"
        "- **Debt Mutual Funds:** Investing in government and corporate bonds."
    ),
    (Location.rural, TimeHorizon.medium_term, RiskAppetite.medium): (
        "- **Large-Cap Equity Funds:** Investing in top, stable companies. Lower risk within equities.\n"
        "- **Hybrid Funds:** A balanced mix of stocks and bonds."
    ),
    (Location.rural, TimeHorizon.medium_term, RiskAppetite.high): (
        "- **Flexi-Cap/Multi-Cap Equity Funds:** Diversified across different-sized companies, higher risk-return potential.\n"
        "- **Real Estate Investment in Farmland:** Can provide rental income and capital appreciation."
    ),
    (Location.rural, TimeHorizon.long_term, RiskAppetite.low): (
        "- **Public Provident Fund (PPF):** Long-term, government-backed, tax-free returns.\n"
        "- **Sukanya Samriddhi Yojana:** For a girl child's future education and marriage expenses."
    ),
    (Location.rural, TimeHorizon.long_term, RiskAppetite.medium): (
        "- **Index Funds (e.g., Nifty 50):** Invests in the market index, diversified and relatively safe for long-term equity exposure.\n"
        "- **Gold Bonds:** An alternative to physical gold, offering interest income."
    ),
    (Location.rural, TimeHorizon.long_term, RiskAppetite.high): (
        "- **Mid-Cap/Small-Cap Equity Funds:** Higher risk with the potential for high returns from growing companies.\n"
        "- **Direct Equity:** Investing directly in stocks, requires knowledge and research."
    ),
    # Urban
    (Location.urban, TimeHorizon.short_term, RiskAppetite.low): (
        "- **Bank Fixed Deposits (FDs):** Safe, predictable returns.\n"
        "- **Liquid Mutual Funds:** Low risk, higher liquidity than FDs."
    ),
    (Location.urban, TimeHorizon.medium_term, RiskAppetite.low): (
        "- **Corporate Bond Funds:** Investing in bonds issued by companies.\n"
        "- **National Savings Certificates (NSC):** Government-backed, fixed return."
    ),
    (Location.urban, TimeHorizon.medium_term, RiskAppetite.medium): (
        "- **Balanced Advantage Funds:** Dynamically allocate between equity and debt.\n"
        "- **Large-Cap Equity Funds:** Investing in top, stable blue-chip companies."
    ),
    (Location.urban, TimeHorizon.medium_term, RiskAppetite.high): (
        "- **Real Estate Investment Trusts (REITs):** Invest in a portfolio of income-generating real estate."
    ),
    (Location.urban, TimeHorizon.long_term, RiskAppetite.low): (
        "- **Public Provident Fund (PPF):** Long-term, tax-free returns, government-backed.\n"
        "- **Voluntary Provident Fund (VPF):** Higher contribution than EPF, with same benefits."
    ),
    (Location.urban, TimeHorizon.long_term, RiskAppetite.medium): (
        "- **Index Funds (Nifty 50, Sensex):** Diversified, market-linked returns.\n"
        "- **ELSS Mutual Funds:** Tax-saving funds with a 3-year lock-in, equity exposure."
    ),
    (Location.urban, TimeHorizon.long_term, RiskAppetite.high): (
        "- **Mid-Cap/Small-Cap Equity Funds:** Higher risk, high growth potential.\n"
        "- **Direct Equity/Stocks:** Requires significant research and risk tolerance."
    ),
}

# Urban short-term savers with any appetite above low share one list
_URBAN_SHORT_TERM_GROWTH = (
    "- **Arbitrage Funds:** Low-risk funds that leverage price differences in different markets.\n"
    "- **Short-Term Debt Funds:** Invest in debt instruments with short maturities."
)
INVESTMENTS[(Location.urban, TimeHorizon.short_term, RiskAppetite.medium)] = _URBAN_SHORT_TERM_GROWTH
INVESTMENTS[(Location.urban, TimeHorizon.short_term, RiskAppetite.high)] = _URBAN_SHORT_TERM_GROWTH

LOANS = {
    Location.rural: (
        "- **Kisan Credit Card (KCC):** For short-term credit for farming needs like seeds, fertilizers, and pesticides.\n"
        "- **Tractor and Equipment Loans:** Offered by most rural and commercial banks to finance machinery purchase.\n"
        "- **Microfinance Loans:** Small loans from Microfinance Institutions (MFIs) for various needs, including small business or livestock.\n"
    ),
    Location.urban: (
        "- **Home Loans:** For purchasing property.\n"
        "- **Car Loans:** For purchasing a vehicle.\n"
        "- **Personal Loans:** Unsecured loans for various personal needs.\n"
    ),
}

DISCLAIMER = (
    "*Disclaimer: This is not real financial advice. Please consult with a certified "
    "financial advisor before making any investment or loan decisions.*"
)


def recommend(location: Location, horizon: TimeHorizon, risk: RiskAppetite) -> str:
    """Return markdown suggestions for the given profile."""
    location = Location(location)
    horizon = TimeHorizon(horizon)
    risk = RiskAppetite(risk)

    return (
        f"Based on your selections for a user in a {location.value} area, here are some "
        f"mock investment and loan recommendations:\n\n"
        f"{HORIZON_HEADINGS[horizon]}\n"
        f"{INVESTMENTS[(location, horizon, risk)]}\n"
        f"### For Loans:\n"
        f"{LOANS[location]}\n"
        f"{DISCLAIMER}"
    )
