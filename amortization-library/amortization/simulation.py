"""
Amortization primitives: the level-payment formula and the payoff simulation.

Both strategies in `amortization.strategies` build on these two functions and
nothing else; they never share code with each other.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from amortization.config import PAYOFF_THRESHOLD, SAFETY_CAP_MULTIPLIER
from amortization.results import PayoffStatus

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def round_to_cents(value: float) -> float:
    """Round half-up to two decimal places. Infinities and NaN pass through."""
    if not math.isfinite(value):
        return value
    return float(Decimal(repr(value)).quantize(TWO_PLACES, ROUND_HALF_UP))


def level_payment(principal: float, monthly_rate: float, scheduled_payments: int) -> float:
    """
    Fixed-rate amortized payment:
      M = P * r(1+r)^n / ((1+r)^n - 1)
    monthly_rate must be positive.
    """
    growth = (1 + monthly_rate) ** scheduled_payments
    if growth == 1:
        # Rate too small to register in floating point.
        return principal / scheduled_payments
    return principal * monthly_rate * growth / (growth - 1)


@dataclass(frozen=True)
class SimulationResult:
    payments: int
    total_interest: float
    status: PayoffStatus


def simulate_payoff(
    principal: float,
    scheduled_payment: float,
    monthly_rate: float,
    extra_per_period: float,
    scheduled_payments: int,
) -> SimulationResult:
    """
    Pay down `principal` month by month until the balance is within a cent.

    Each period accrues interest on the balance, applies the principal portion
    of `scheduled_payment` plus `extra_per_period` (never more than the
    balance), and rounds the balance to cents. The loop is capped at
    SAFETY_CAP_MULTIPLIER * scheduled_payments periods.

    Cent rounding drifts by a few cents over a long schedule, so a balance
    smaller than one scheduled payment left after payment `scheduled_payments`
    is settled with that payment. A level-payment schedule therefore never
    runs past its term, and extra payments never add a period.

    Stops early with NON_AMORTIZING when the scheduled payment does not cover
    the period's interest; reports ITERATION_LIMIT if the cap is reached with
    a balance still outstanding.
    """
    max_iterations = SAFETY_CAP_MULTIPLIER * scheduled_payments
    balance = principal
    total_interest = 0.0
    count = 0
    status = PayoffStatus.PAID_OFF

    while balance > PAYOFF_THRESHOLD and count < max_iterations:
        interest = balance * monthly_rate
        principal_portion = scheduled_payment - interest
        if principal_portion <= 0:
            status = PayoffStatus.NON_AMORTIZING
            logger.warning(
                "Payment %.2f does not cover interest %.2f on balance %.2f after %d payments",
                scheduled_payment,
                interest,
                balance,
                count,
            )
            break
        total_interest += interest
        balance -= min(principal_portion + extra_per_period, balance)
        balance = round_to_cents(balance)
        count += 1
        if count == scheduled_payments and 0 < balance < scheduled_payment:
            balance = 0.0

    if status is PayoffStatus.PAID_OFF and balance > PAYOFF_THRESHOLD:
        status = PayoffStatus.ITERATION_LIMIT
        logger.warning(
            "Balance %.2f still outstanding after %d payments (cap reached)",
            balance,
            count,
        )

    return SimulationResult(
        payments=count,
        total_interest=round_to_cents(total_interest),
        status=status,
    )
