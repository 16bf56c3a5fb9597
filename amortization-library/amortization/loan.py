"""Loan inputs (data only; computation via AmortizationEngine)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from amortization.config import MONTHS_PER_YEAR


class PaymentType(str, Enum):
    """How the extra payment is applied."""

    ONE_TIME = "oneTime"
    MONTHLY = "monthly"


class OneTimePolicy(str, Enum):
    """
    What a one-time principal reduction does to the rest of the loan.

    REAMORTIZE recomputes a lower payment over the unchanged term.
    SHORTEN_TERM keeps the regular payment and pays the loan off earlier.
    """

    REAMORTIZE = "reamortize"
    SHORTEN_TERM = "shortenTerm"


@dataclass(frozen=True)
class LoanInputs:
    """
    Fixed-rate loan with an optional extra payment.

    interest_rate_percent is the nominal annual rate in percent (6.5 means 6.5%).
    one_time_policy is ignored unless payment_type is ONE_TIME.
    """

    loan_amount: float
    interest_rate_percent: float
    loan_term_years: float
    extra_payment: float = 0.0
    payment_type: PaymentType = PaymentType.ONE_TIME
    one_time_policy: OneTimePolicy = OneTimePolicy.REAMORTIZE

    @property
    def monthly_rate(self) -> float:
        return self.interest_rate_percent / 100 / MONTHS_PER_YEAR

    @property
    def scheduled_payments(self) -> int:
        """Number of monthly payments in the term, rounded half-up."""
        return math.floor(self.loan_term_years * MONTHS_PER_YEAR + 0.5)

    def is_finite(self) -> bool:
        return all(
            math.isfinite(v)
            for v in (
                self.loan_amount,
                self.interest_rate_percent,
                self.loan_term_years,
                self.extra_payment,
            )
        )
