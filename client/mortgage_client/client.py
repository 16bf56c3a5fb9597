"""Mortgage API client using sgqlc."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Optional

from sgqlc.endpoint.http import HTTPEndpoint

from mortgage_client.types import LoanFormInput, LoanInput, MortgageResult, TimeSavings

logger = logging.getLogger(__name__)

RESULT_FIELDS = """
    monthlyPaymentRegular
    monthlyPaymentExtra
    totalInterestRegular
    totalAmountRegular
    totalInterestExtra
    totalAmountExtra
    interestSavings
    timeSavings { years months }
    paymentsWithExtra
    totalPaymentsRegular
    paymentType
    oneTimePolicy
    payoffStatus
    reducedPrincipal
    oneTimePaymentAmount
    display {
        monthlyPaymentRegular
        monthlyPaymentExtra
        totalInterestRegular
        totalInterestExtra
        totalAmountRegular
        totalAmountExtra
        interestSavings
        timeSavings
    }
"""


def _loan_to_vars(loan: LoanInput) -> dict[str, Any]:
    """Serialize LoanInput to GraphQL variables (camelCase)."""
    return {
        "loanAmount": loan.loan_amount,
        "interestRatePercent": loan.interest_rate_percent,
        "loanTermYears": loan.loan_term_years,
        "extraPayment": loan.extra_payment,
        "paymentType": loan.payment_type,
    }


def _form_to_vars(form: LoanFormInput) -> dict[str, Any]:
    return {
        "loanAmount": form.loan_amount,
        "interestRate": form.interest_rate,
        "loanTermYears": form.loan_term_years,
        "extraPayment": form.extra_payment,
        "paymentType": form.payment_type,
    }


def _result_from_payload(raw: dict[str, Any]) -> MortgageResult:
    """Deserialize a computeMortgage payload (camelCase) into MortgageResult."""
    return MortgageResult(
        monthly_payment_regular=raw["monthlyPaymentRegular"],
        monthly_payment_extra=raw["monthlyPaymentExtra"],
        total_interest_regular=raw["totalInterestRegular"],
        total_amount_regular=raw["totalAmountRegular"],
        total_interest_extra=raw["totalInterestExtra"],
        total_amount_extra=raw["totalAmountExtra"],
        interest_savings=raw["interestSavings"],
        time_savings=TimeSavings(
            years=raw["timeSavings"]["years"],
            months=raw["timeSavings"]["months"],
        ),
        payments_with_extra=raw["paymentsWithExtra"],
        total_payments_regular=raw["totalPaymentsRegular"],
        payment_type=raw["paymentType"],
        payoff_status=raw["payoffStatus"],
        display=dict(raw.get("display") or {}),
        one_time_policy=raw.get("oneTimePolicy"),
        reduced_principal=raw.get("reducedPrincipal"),
        one_time_payment_amount=raw.get("oneTimePaymentAmount"),
    )


class MortgageClient:
    """
    Client for the Mortgage GraphQL API.
    Use from notebooks or scripts; the base URL defaults to MORTGAGE_API_URL.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: float = 30.0,
        endpoint: Optional[Callable[..., dict]] = None,
    ) -> None:
        self._url = (url or os.environ.get("MORTGAGE_API_URL", "http://api:8000/graphql")).rstrip("/")
        self._timeout = timeout
        self._endpoint = endpoint or HTTPEndpoint(self._url, timeout=timeout)

    def _request(self, query: str, variables: dict | None = None) -> dict:
        result = self._endpoint(query, variables or {})
        if "errors" in result and result["errors"]:
            logger.debug("GraphQL errors from %s: %s", self._url, result["errors"])
            raise RuntimeError(f"GraphQL errors: {result['errors']}")
        return result.get("data", {})

    def version(self) -> str:
        """Call the version query."""
        query = """
            query Version {
                version
            }
        """
        data = self._request(query)
        return data["version"]

    def compute_mortgage(
        self,
        loan: LoanInput,
        one_time_policy: str | None = None,
    ) -> MortgageResult | None:
        """Compare regular and extra-payment schedules. None when the API has no result."""
        query = """
            query ComputeMortgage(
                $loan: LoanInput!,
                $oneTimePolicy: OneTimePolicy
            ) {
                computeMortgage(
                    loan: $loan,
                    oneTimePolicy: $oneTimePolicy
                ) {
                    %s
                }
            }
        """ % RESULT_FIELDS
        variables: dict[str, Any] = {"loan": _loan_to_vars(loan)}
        if one_time_policy is not None:
            variables["oneTimePolicy"] = one_time_policy
        data = self._request(query, variables)
        raw = data.get("computeMortgage")
        if raw is None:
            return None
        return _result_from_payload(raw)

    def compute_mortgage_from_form(
        self,
        form: LoanFormInput,
        one_time_policy: str | None = None,
    ) -> MortgageResult | None:
        """
        Same as compute_mortgage, from raw form text.

        Invalid fields come back as a GraphQL error ("Invalid amount", ...),
        raised here as RuntimeError.
        """
        query = """
            query ComputeMortgageFromForm(
                $form: LoanFormInput!,
                $oneTimePolicy: OneTimePolicy
            ) {
                computeMortgageFromForm(
                    form: $form,
                    oneTimePolicy: $oneTimePolicy
                ) {
                    %s
                }
            }
        """ % RESULT_FIELDS
        variables: dict[str, Any] = {"form": _form_to_vars(form)}
        if one_time_policy is not None:
            variables["oneTimePolicy"] = one_time_policy
        data = self._request(query, variables)
        raw = data.get("computeMortgageFromForm")
        if raw is None:
            return None
        return _result_from_payload(raw)

    def validate_numeric_input(self, value: str) -> bool:
        """Ask the API whether form text is a valid non-negative number."""
        query = """
            query ValidateNumericInput($value: String!) {
                validateNumericInput(value: $value)
            }
        """
        data = self._request(query, {"value": value})
        return data["validateNumericInput"]
