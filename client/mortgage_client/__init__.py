"""Python client for the Mortgage GraphQL API."""

from mortgage_client.client import MortgageClient
from mortgage_client.types import LoanFormInput, LoanInput, MortgageResult, TimeSavings

__all__ = [
    "LoanFormInput",
    "LoanInput",
    "MortgageClient",
    "MortgageResult",
    "TimeSavings",
]
