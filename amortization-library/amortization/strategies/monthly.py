"""Recurring monthly extra payment (accelerated amortization)."""

from __future__ import annotations

from amortization.loan import LoanInputs, PaymentType
from amortization.results import ExtraScenario
from amortization.simulation import round_to_cents, simulate_payoff
from amortization.strategies.base import BaseStrategy


class MonthlyExtraStrategy(BaseStrategy):
    """Add the extra amount to the principal portion of every scheduled payment."""

    def can_apply(self, inputs: LoanInputs) -> bool:
        return inputs.payment_type is PaymentType.MONTHLY

    def apply(self, inputs: LoanInputs, regular_payment: float) -> ExtraScenario:
        sim = simulate_payoff(
            principal=inputs.loan_amount,
            scheduled_payment=regular_payment,
            monthly_rate=inputs.monthly_rate,
            extra_per_period=inputs.extra_payment,
            scheduled_payments=inputs.scheduled_payments,
        )
        monthly_payment = regular_payment + inputs.extra_payment
        return ExtraScenario(
            monthly_payment=monthly_payment,
            payments=sim.payments,
            total_interest=sim.total_interest,
            total_amount=round_to_cents(monthly_payment * sim.payments),
            status=sim.status,
        )
