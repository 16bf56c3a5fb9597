"""Runtime settings read from the environment (defaults suit local runs and Docker)."""

import os
from dataclasses import dataclass

from amortization.loan import OneTimePolicy


@dataclass(frozen=True)
class Settings:
    title: str
    currency_symbol: str
    default_one_time_policy: OneTimePolicy
    log_level: str


def get_settings() -> Settings:
    """Read settings from the environment. Raises ValueError for an unknown policy name."""
    return Settings(
        title=os.environ.get("MORTGAGE_API_TITLE", "Mortgage API"),
        currency_symbol=os.environ.get("MORTGAGE_CURRENCY_SYMBOL", "$"),
        default_one_time_policy=OneTimePolicy(
            os.environ.get("MORTGAGE_ONE_TIME_POLICY", OneTimePolicy.REAMORTIZE.value)
        ),
        log_level=os.environ.get("MORTGAGE_LOG_LEVEL", "INFO").upper(),
    )
