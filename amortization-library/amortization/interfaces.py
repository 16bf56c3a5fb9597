"""
Protocol-based interfaces for the engine's extension point.

Any class that implements can_apply() and apply() satisfies
ExtraPaymentStrategy without inheriting from BaseStrategy, so alternative
extra-payment products can be registered with an AmortizationEngine
without modifying the built-in strategies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from amortization.loan import LoanInputs
    from amortization.results import ExtraScenario


@runtime_checkable
class ExtraPaymentStrategy(Protocol):
    """Protocol for extra-payment strategies.

    A strategy turns validated LoanInputs with a positive extra payment into
    the extra-payment scenario; the engine derives savings from it.
    """

    def can_apply(self, inputs: LoanInputs) -> bool:
        """Return True if this strategy handles the given inputs."""
        ...

    def apply(self, inputs: LoanInputs, regular_payment: float) -> ExtraScenario:
        """Compute the extra-payment scenario given the regular monthly payment."""
        ...
