"""Calculation results: one immutable record per call to the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from amortization.config import MONTHS_PER_YEAR
from amortization.loan import OneTimePolicy, PaymentType


class PayoffStatus(str, Enum):
    """How a payoff simulation ended."""

    PAID_OFF = "paidOff"
    # Scheduled payment does not cover the interest accruing in a period.
    NON_AMORTIZING = "nonAmortizing"
    ITERATION_LIMIT = "iterationLimit"


@dataclass(frozen=True)
class TimeSavings:
    years: int
    months: int

    @classmethod
    def from_months(cls, months: int) -> TimeSavings:
        months = max(0, months)
        return cls(years=months // MONTHS_PER_YEAR, months=months % MONTHS_PER_YEAR)

    @property
    def total_months(self) -> int:
        return self.years * MONTHS_PER_YEAR + self.months


@dataclass(frozen=True)
class ExtraScenario:
    """Outcome of applying an extra-payment strategy (before savings are derived)."""

    monthly_payment: float
    payments: int
    total_interest: float
    total_amount: float
    status: PayoffStatus = PayoffStatus.PAID_OFF
    reduced_principal: Optional[float] = None
    one_time_payment_amount: Optional[float] = None


@dataclass(frozen=True)
class MortgageResults:
    """
    Regular vs extra-payment comparison for one set of LoanInputs.

    Monetary totals are rounded to cents; monthly payments are not.
    payoff_status reports whether the extra-payment schedule actually
    amortizes; anything other than PAID_OFF means payments_with_extra
    and the savings figures describe a partial schedule.
    """

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
    payment_type: PaymentType
    one_time_policy: Optional[OneTimePolicy] = None
    payoff_status: PayoffStatus = PayoffStatus.PAID_OFF
    reduced_principal: Optional[float] = None
    one_time_payment_amount: Optional[float] = None

    @property
    def amortizes(self) -> bool:
        return self.payoff_status is PayoffStatus.PAID_OFF
