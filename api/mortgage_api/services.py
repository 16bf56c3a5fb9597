"""Service layer: convert GraphQL inputs to LoanInputs, run the engine, and shape results."""

from __future__ import annotations

import logging
import math
from typing import Optional

from amortization.calculator import compute_mortgage
from amortization.formatting import (
    format_currency,
    format_time_savings,
    parse_numeric_input,
    validate_numeric_input,
)
from amortization.loan import LoanInputs, OneTimePolicy
from amortization.results import MortgageResults

from mortgage_api.settings import get_settings
from mortgage_api.types import (
    LoanFormInput,
    LoanInput,
    MortgageDisplay,
    MortgageResultsType,
    TimeSavingsType,
)

logger = logging.getLogger(__name__)

# Field-level messages shown next to each form input.
FORM_ERRORS = {
    "loan_amount": "Invalid amount",
    "interest_rate": "Invalid rate",
    "loan_term_years": "Invalid term",
    "extra_payment": "Invalid payment",
}


def _validate_loan(loan: LoanInput) -> None:
    for field in ("loan_amount", "interest_rate_percent", "loan_term_years", "extra_payment"):
        value = getattr(loan, field)
        if not math.isfinite(value):
            raise ValueError(f"loan.{field} must be a finite number")
        if value < 0:
            raise ValueError(f"loan.{field} must be >= 0")


def form_errors(form: LoanFormInput) -> dict[str, str]:
    """Return {field: message} for every form field that is not a valid amount."""
    errors: dict[str, str] = {}
    for field, message in FORM_ERRORS.items():
        text = getattr(form, field)
        if field == "extra_payment" and not text.strip():
            continue
        if not validate_numeric_input(text):
            errors[field] = message
    return errors


def results_to_type(results: MortgageResults, currency_symbol: str) -> MortgageResultsType:
    """Build the GraphQL result, including display strings."""

    def money(amount: float) -> str:
        return format_currency(amount, symbol=currency_symbol)

    display = MortgageDisplay(
        monthly_payment_regular=money(results.monthly_payment_regular),
        monthly_payment_extra=money(results.monthly_payment_extra),
        total_interest_regular=money(results.total_interest_regular),
        total_interest_extra=money(results.total_interest_extra),
        total_amount_regular=money(results.total_amount_regular),
        total_amount_extra=money(results.total_amount_extra),
        interest_savings=money(results.interest_savings),
        time_savings=format_time_savings(results.time_savings),
    )
    return MortgageResultsType(
        monthly_payment_regular=results.monthly_payment_regular,
        monthly_payment_extra=results.monthly_payment_extra,
        total_interest_regular=results.total_interest_regular,
        total_amount_regular=results.total_amount_regular,
        total_interest_extra=results.total_interest_extra,
        total_amount_extra=results.total_amount_extra,
        interest_savings=results.interest_savings,
        time_savings=TimeSavingsType(
            years=results.time_savings.years,
            months=results.time_savings.months,
        ),
        payments_with_extra=results.payments_with_extra,
        total_payments_regular=results.total_payments_regular,
        payment_type=results.payment_type,
        payoff_status=results.payoff_status,
        amortizes=results.amortizes,
        display=display,
        one_time_policy=results.one_time_policy,
        reduced_principal=results.reduced_principal,
        one_time_payment_amount=results.one_time_payment_amount,
    )


def _run(inputs: LoanInputs, currency_symbol: str) -> Optional[MortgageResultsType]:
    results = compute_mortgage(inputs)
    if results is None:
        logger.info(
            "No result for amount=%s rate=%s term=%s",
            inputs.loan_amount,
            inputs.interest_rate_percent,
            inputs.loan_term_years,
        )
        return None
    if not results.amortizes:
        logger.warning("Extra-payment schedule ended with %s", results.payoff_status.value)
    logger.info(
        "Computed %s extra=%s: %d -> %d payments",
        inputs.payment_type.value,
        inputs.extra_payment,
        results.total_payments_regular,
        results.payments_with_extra,
    )
    return results_to_type(results, currency_symbol)


def compute(
    loan: LoanInput,
    one_time_policy: Optional[OneTimePolicy] = None,
) -> Optional[MortgageResultsType]:
    """Compute the comparison for numeric inputs; None when there is nothing to show yet."""
    _validate_loan(loan)
    settings = get_settings()
    inputs = LoanInputs(
        loan_amount=loan.loan_amount,
        interest_rate_percent=loan.interest_rate_percent,
        loan_term_years=loan.loan_term_years,
        extra_payment=loan.extra_payment,
        payment_type=loan.payment_type,
        one_time_policy=one_time_policy or settings.default_one_time_policy,
    )
    return _run(inputs, settings.currency_symbol)


def compute_from_form(
    form: LoanFormInput,
    one_time_policy: Optional[OneTimePolicy] = None,
) -> Optional[MortgageResultsType]:
    """Validate and parse raw form text, then compute."""
    errors = form_errors(form)
    if errors:
        details = "; ".join(f"{field}: {message}" for field, message in errors.items())
        raise ValueError(f"Invalid form input ({details})")
    settings = get_settings()
    extra_text = form.extra_payment if form.extra_payment.strip() else "0"
    inputs = LoanInputs(
        loan_amount=parse_numeric_input(form.loan_amount),
        interest_rate_percent=parse_numeric_input(form.interest_rate),
        loan_term_years=parse_numeric_input(form.loan_term_years),
        extra_payment=parse_numeric_input(extra_text),
        payment_type=form.payment_type,
        one_time_policy=one_time_policy or settings.default_one_time_policy,
    )
    return _run(inputs, settings.currency_symbol)
