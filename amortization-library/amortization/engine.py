"""
Amortization engine: computes the regular vs extra-payment comparison for a loan.

Design intent:
- Loan inputs are **data only**; the engine never mutates them.
- The regular schedule is closed-form and the extra-payment scenario comes from a
  **registry of strategies**, one per product design, enabling:
  - Declaring alternative one-time policies without touching the engine
  - Registering custom strategies in a caller-owned engine
- Inputs that cannot produce a schedule, or whose figures overflow a float,
  yield None rather than an exception.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from amortization.interfaces import ExtraPaymentStrategy
from amortization.loan import LoanInputs, PaymentType
from amortization.results import ExtraScenario, MortgageResults, PayoffStatus, TimeSavings
from amortization.simulation import level_payment, round_to_cents

logger = logging.getLogger(__name__)


class AmortizationEngine:
    """
    Registry-based amortization engine.

    Strategies are registered at initialization and dispatched based on
    can_apply() checks. First matching strategy wins.
    """

    def __init__(self) -> None:
        self._strategies: list[ExtraPaymentStrategy] = []

    def register(self, strategy: ExtraPaymentStrategy) -> None:
        """Register a strategy for dispatch.

        Order matters: first matching strategy wins.
        """
        self._strategies.append(strategy)

    def strategy_for(self, inputs: LoanInputs) -> ExtraPaymentStrategy:
        for strategy in self._strategies:
            if strategy.can_apply(inputs):
                return strategy
        raise ValueError(
            f"No strategy registered for payment_type={inputs.payment_type.value}, "
            f"one_time_policy={inputs.one_time_policy.value}. "
            "Register a strategy with engine.register(strategy)."
        )

    def compute(self, inputs: LoanInputs) -> Optional[MortgageResults]:
        """Return the comparison, or None when the inputs describe no loan yet."""
        if not _has_schedule(inputs):
            logger.debug("No result for %s", inputs)
            return None

        n = inputs.scheduled_payments
        try:
            regular_payment = level_payment(inputs.loan_amount, inputs.monthly_rate, n)
        except OverflowError:
            logger.debug("Payment overflows for %s", inputs)
            return None
        total_interest_regular = round_to_cents(regular_payment * n - inputs.loan_amount)
        total_amount_regular = round_to_cents(inputs.loan_amount + total_interest_regular)
        if not math.isfinite(total_amount_regular):
            logger.debug("Totals overflow for %s", inputs)
            return None
        one_time = inputs.payment_type is PaymentType.ONE_TIME

        if inputs.extra_payment == 0:
            extra = ExtraScenario(
                monthly_payment=regular_payment,
                payments=n,
                total_interest=total_interest_regular,
                total_amount=total_amount_regular,
                reduced_principal=inputs.loan_amount if one_time else None,
                one_time_payment_amount=0.0 if one_time else None,
            )
        else:
            strategy = self.strategy_for(inputs)
            logger.debug("Applying %s", type(strategy).__name__)
            extra = strategy.apply(inputs, regular_payment)
            if not _is_finite(extra):
                logger.debug("Extra scenario overflows for %s", inputs)
                return None

        total_interest_extra = extra.total_interest
        if extra.status is PayoffStatus.PAID_OFF:
            # Extra-payment interest is capped at the closed-form baseline;
            # a cent-rounded simulation can drift a few cents above it.
            total_interest_extra = min(total_interest_extra, total_interest_regular)

        return MortgageResults(
            monthly_payment_regular=regular_payment,
            monthly_payment_extra=extra.monthly_payment,
            total_interest_regular=total_interest_regular,
            total_amount_regular=total_amount_regular,
            total_interest_extra=total_interest_extra,
            total_amount_extra=extra.total_amount,
            interest_savings=max(0.0, round_to_cents(total_interest_regular - total_interest_extra)),
            time_savings=TimeSavings.from_months(n - extra.payments),
            payments_with_extra=extra.payments,
            total_payments_regular=n,
            payment_type=inputs.payment_type,
            one_time_policy=inputs.one_time_policy if one_time else None,
            payoff_status=extra.status,
            reduced_principal=extra.reduced_principal,
            one_time_payment_amount=extra.one_time_payment_amount,
        )


def _has_schedule(inputs: LoanInputs) -> bool:
    if not inputs.is_finite() or inputs.extra_payment < 0:
        return False
    return (
        inputs.loan_amount > 0
        and inputs.monthly_rate > 0
        and inputs.scheduled_payments > 0
    )


def _is_finite(extra: ExtraScenario) -> bool:
    return all(
        math.isfinite(value)
        for value in (extra.monthly_payment, extra.total_interest, extra.total_amount)
    )


def create_default_engine() -> AmortizationEngine:
    """Factory for default engine with all built-in strategies registered."""
    from amortization.strategies import (
        MonthlyExtraStrategy,
        OneTimeReamortizeStrategy,
        OneTimeShortenTermStrategy,
    )

    engine = AmortizationEngine()
    engine.register(OneTimeReamortizeStrategy())
    engine.register(OneTimeShortenTermStrategy())
    engine.register(MonthlyExtraStrategy())
    return engine
