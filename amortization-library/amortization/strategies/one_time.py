"""
One-time extra payment (principal curtailment).

The lump sum is applied immediately as a principal reduction. What happens to
the remaining schedule is a product decision, declared by OneTimePolicy:

- REAMORTIZE: re-amortize the reduced balance over the original term, so the
  monthly payment drops and the number of payments stays the same.
- SHORTEN_TERM: keep the regular payment, so the loan is paid off sooner.

A lump sum at least as large as the principal pays the loan off outright
under either policy.
"""

from __future__ import annotations

from abc import abstractmethod

from amortization.loan import LoanInputs, OneTimePolicy, PaymentType
from amortization.results import ExtraScenario
from amortization.simulation import level_payment, round_to_cents, simulate_payoff
from amortization.strategies.base import BaseStrategy


class OneTimeStrategy(BaseStrategy):
    """Common handling for one-time payments; subclasses pick the policy."""

    policy: OneTimePolicy

    def can_apply(self, inputs: LoanInputs) -> bool:
        return (
            inputs.payment_type is PaymentType.ONE_TIME
            and inputs.one_time_policy is self.policy
        )

    def apply(self, inputs: LoanInputs, regular_payment: float) -> ExtraScenario:
        extra = inputs.extra_payment
        if extra >= inputs.loan_amount:
            return ExtraScenario(
                monthly_payment=0.0,
                payments=0,
                total_interest=0.0,
                total_amount=round_to_cents(extra),
                reduced_principal=0.0,
                one_time_payment_amount=extra,
            )
        return self._apply_reduced(inputs, inputs.loan_amount - extra, regular_payment)

    @abstractmethod
    def _apply_reduced(
        self, inputs: LoanInputs, reduced_principal: float, regular_payment: float
    ) -> ExtraScenario:
        """Schedule for the balance left after the lump sum."""
        ...


class OneTimeReamortizeStrategy(OneTimeStrategy):
    """Lower the monthly payment; keep the term."""

    policy = OneTimePolicy.REAMORTIZE

    def _apply_reduced(
        self, inputs: LoanInputs, reduced_principal: float, regular_payment: float
    ) -> ExtraScenario:
        # Level-payment loan over the original n payments, same closed form as
        # the regular baseline.
        n = inputs.scheduled_payments
        payment = level_payment(reduced_principal, inputs.monthly_rate, n)
        return ExtraScenario(
            monthly_payment=payment,
            payments=n,
            total_interest=round_to_cents(payment * n - reduced_principal),
            total_amount=round_to_cents(inputs.extra_payment + payment * n),
            reduced_principal=reduced_principal,
            one_time_payment_amount=inputs.extra_payment,
        )


class OneTimeShortenTermStrategy(OneTimeStrategy):
    """Keep the monthly payment; shorten the term."""

    policy = OneTimePolicy.SHORTEN_TERM

    def _apply_reduced(
        self, inputs: LoanInputs, reduced_principal: float, regular_payment: float
    ) -> ExtraScenario:
        sim = simulate_payoff(
            principal=reduced_principal,
            scheduled_payment=regular_payment,
            monthly_rate=inputs.monthly_rate,
            extra_per_period=0.0,
            scheduled_payments=inputs.scheduled_payments,
        )
        return ExtraScenario(
            monthly_payment=regular_payment,
            payments=sim.payments,
            total_interest=sim.total_interest,
            total_amount=round_to_cents(inputs.extra_payment + regular_payment * sim.payments),
            status=sim.status,
            reduced_principal=reduced_principal,
            one_time_payment_amount=inputs.extra_payment,
        )
