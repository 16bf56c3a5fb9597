"""Client-side types for the Mortgage GraphQL API (mirror API contracts)."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LoanInput:
    """Loan terms. payment_type is "ONE_TIME" or "MONTHLY" (GraphQL enum names)."""

    loan_amount: float
    interest_rate_percent: float
    loan_term_years: float
    extra_payment: float = 0.0
    payment_type: str = "ONE_TIME"


@dataclass
class LoanFormInput:
    """Loan terms as typed in the calculator form, e.g. loan_amount="300,000"."""

    loan_amount: str
    interest_rate: str
    loan_term_years: str
    extra_payment: str = "0"
    payment_type: str = "ONE_TIME"


@dataclass
class TimeSavings:
    years: int
    months: int


@dataclass
class MortgageResult:
    """Regular vs extra-payment comparison plus the server's display strings."""

    monthly_payment_regular: float
    monthly_payment_extra: float
    total_interest_regular: float
    total_amount_regular: float
    total_interest_extra: float
    total_amount_extra: float
    interest_savings: float
    time_savings: TimeSavings
    payments_with_extra: int
    total_payments_regular: int
    payment_type: str
    payoff_status: str
    display: dict[str, str]
    one_time_policy: Optional[str] = None
    reduced_principal: Optional[float] = None
    one_time_payment_amount: Optional[float] = None

    @property
    def amortizes(self) -> bool:
        return self.payoff_status == "PAID_OFF"
