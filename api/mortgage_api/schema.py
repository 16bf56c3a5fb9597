"""GraphQL schema: mortgage calculation queries."""

from typing import Optional

import strawberry

from amortization.formatting import validate_numeric_input as is_valid_numeric
from amortization.loan import OneTimePolicy

from mortgage_api import __version__
from mortgage_api.services import compute, compute_from_form
from mortgage_api.types import LoanFormInput, LoanInput, MortgageResultsType


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return __version__

    @strawberry.field
    def compute_mortgage(
        self,
        loan: LoanInput,
        one_time_policy: Optional[OneTimePolicy] = None,
    ) -> Optional[MortgageResultsType]:
        """Compare regular and extra-payment schedules. Null when inputs describe no loan yet."""
        return compute(loan=loan, one_time_policy=one_time_policy)

    @strawberry.field
    def compute_mortgage_from_form(
        self,
        form: LoanFormInput,
        one_time_policy: Optional[OneTimePolicy] = None,
    ) -> Optional[MortgageResultsType]:
        """Same as computeMortgage, from raw form text (e.g. "300,000")."""
        return compute_from_form(form=form, one_time_policy=one_time_policy)

    @strawberry.field
    def validate_numeric_input(self, value: str) -> bool:
        """True if value is a non-negative number once grouping separators are removed."""
        return is_valid_numeric(value)


schema = strawberry.Schema(query=Query)
