"""Extra-payment strategies for the registry-based amortization engine."""

from amortization.strategies.base import BaseStrategy
from amortization.strategies.monthly import MonthlyExtraStrategy
from amortization.strategies.one_time import (
    OneTimeReamortizeStrategy,
    OneTimeShortenTermStrategy,
    OneTimeStrategy,
)

__all__ = [
    "BaseStrategy",
    "MonthlyExtraStrategy",
    "OneTimeStrategy",
    "OneTimeReamortizeStrategy",
    "OneTimeShortenTermStrategy",
]
