"""Numeric constants shared by the amortization engine."""

MONTHS_PER_YEAR = 12

# A schedule is considered paid off once the balance drops to a cent or less.
PAYOFF_THRESHOLD = 0.01

# Simulations stop after SAFETY_CAP_MULTIPLIER * scheduled payments.
SAFETY_CAP_MULTIPLIER = 2

DEFAULT_CURRENCY_SYMBOL = "$"
