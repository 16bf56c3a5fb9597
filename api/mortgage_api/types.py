"""GraphQL types for the mortgage calculator API."""

from __future__ import annotations

from typing import Optional

import strawberry

from amortization.loan import OneTimePolicy, PaymentType
from amortization.results import PayoffStatus

# Library enums double as GraphQL enums (values are the member names).
strawberry.enum(PaymentType)
strawberry.enum(OneTimePolicy)
strawberry.enum(PayoffStatus)


# --- Input types (request payloads) ---


@strawberry.input
class LoanInput:
    """Loan terms as numbers. interestRatePercent is a percentage (6.5 means 6.5%)."""

    loan_amount: float
    interest_rate_percent: float
    loan_term_years: float
    extra_payment: float = 0.0
    payment_type: PaymentType = PaymentType.ONE_TIME


@strawberry.input
class LoanFormInput:
    """Loan terms as typed in the calculator form; grouping separators are allowed."""

    loan_amount: str
    interest_rate: str
    loan_term_years: str
    extra_payment: str = "0"
    payment_type: PaymentType = PaymentType.ONE_TIME


# --- Output types (response payloads) ---


@strawberry.type
class TimeSavingsType:
    years: int
    months: int


@strawberry.type
class MortgageDisplay:
    """Currency-formatted amounts and the "Yy Mm" time savings, ready to render."""

    monthly_payment_regular: str
    monthly_payment_extra: str
    total_interest_regular: str
    total_interest_extra: str
    total_amount_regular: str
    total_amount_extra: str
    interest_savings: str
    time_savings: str


@strawberry.type
class MortgageResultsType:
    """Regular vs extra-payment comparison."""

    monthly_payment_regular: float
    monthly_payment_extra: float
    total_interest_regular: float
    total_amount_regular: float
    total_interest_extra: float
    total_amount_extra: float
    interest_savings: float
    time_savings: TimeSavingsType
    payments_with_extra: int
    total_payments_regular: int
    payment_type: PaymentType
    payoff_status: PayoffStatus
    amortizes: bool
    display: MortgageDisplay
    one_time_policy: Optional[OneTimePolicy] = None
    reduced_principal: Optional[float] = None
    one_time_payment_amount: Optional[float] = None
