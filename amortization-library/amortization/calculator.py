"""
Calculation entrypoint.

Most callers should only need `compute_mortgage(inputs)`. It delegates to a
default `AmortizationEngine` with the built-in strategies registered.

Callers that need custom strategies can build their own engine with
`create_default_engine()` or `AmortizationEngine()` and `register()`.
"""

from typing import Optional

from amortization.engine import create_default_engine
from amortization.loan import LoanInputs
from amortization.results import MortgageResults

_default_engine = create_default_engine()


def compute_mortgage(inputs: LoanInputs) -> Optional[MortgageResults]:
    """Return the regular vs extra-payment comparison, or None for insufficient input."""
    return _default_engine.compute(inputs)
