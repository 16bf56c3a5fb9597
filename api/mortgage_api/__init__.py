"""GraphQL API over the amortization library."""

__version__ = "0.1.0"
