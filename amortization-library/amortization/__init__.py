"""Amortization library: loan inputs, extra-payment strategies, engine, and display helpers."""

from amortization.calculator import compute_mortgage
from amortization.engine import AmortizationEngine, create_default_engine
from amortization.formatting import (
    clean_number,
    format_currency,
    format_time_savings,
    parse_numeric_input,
    validate_numeric_input,
)
from amortization.interfaces import ExtraPaymentStrategy
from amortization.loan import LoanInputs, OneTimePolicy, PaymentType
from amortization.results import MortgageResults, PayoffStatus, TimeSavings
from amortization.simulation import (
    SimulationResult,
    level_payment,
    round_to_cents,
    simulate_payoff,
)
from amortization.strategies import (
    BaseStrategy,
    MonthlyExtraStrategy,
    OneTimeReamortizeStrategy,
    OneTimeShortenTermStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "ExtraPaymentStrategy",
    "AmortizationEngine",
    "create_default_engine",
    "compute_mortgage",
    "LoanInputs",
    "PaymentType",
    "OneTimePolicy",
    "MortgageResults",
    "PayoffStatus",
    "TimeSavings",
    "SimulationResult",
    "level_payment",
    "round_to_cents",
    "simulate_payoff",
    "BaseStrategy",
    "MonthlyExtraStrategy",
    "OneTimeReamortizeStrategy",
    "OneTimeShortenTermStrategy",
    "clean_number",
    "format_currency",
    "format_time_savings",
    "parse_numeric_input",
    "validate_numeric_input",
]
