"""Base strategy abstract class for extra-payment implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from amortization.loan import LoanInputs
from amortization.results import ExtraScenario


class BaseStrategy(ABC):
    """Abstract base class for extra-payment strategies.

    Subclasses implement can_apply() and apply() for one product design.
    The engine only calls apply() with a positive extra payment.
    """

    @abstractmethod
    def can_apply(self, inputs: LoanInputs) -> bool:
        """Return True if this strategy handles the inputs."""
        ...

    @abstractmethod
    def apply(self, inputs: LoanInputs, regular_payment: float) -> ExtraScenario:
        """Compute the extra-payment scenario."""
        ...
