"""Demo: 300k / 6.5% / 30Y loan with no extra, monthly extra, and one-time extra under both policies."""

from amortization.calculator import compute_mortgage
from amortization.formatting import format_currency, format_time_savings
from amortization.loan import LoanInputs, OneTimePolicy, PaymentType
from amortization.results import MortgageResults


def _print_results(title: str, results: MortgageResults | None) -> None:
    print(title)
    if results is None:
        print("   (no result)\n")
        return
    print(f"   Monthly payment    = {format_currency(results.monthly_payment_regular)}")
    print(f"   With extra         = {format_currency(results.monthly_payment_extra)}")
    print(f"   Total interest     = {format_currency(results.total_interest_regular)}"
          f" -> {format_currency(results.total_interest_extra)}")
    print(f"   Total amount       = {format_currency(results.total_amount_regular)}"
          f" -> {format_currency(results.total_amount_extra)}")
    print(f"   Payments           = {results.total_payments_regular} -> {results.payments_with_extra}")
    print(f"   Interest saved     = {format_currency(results.interest_savings)}")
    print(f"   Time saved         = {format_time_savings(results.time_savings)}\n")


def main() -> None:
    base = dict(loan_amount=300_000, interest_rate_percent=6.5, loan_term_years=30)

    # 1) No extra payment
    _print_results("1) No extra payment", compute_mortgage(LoanInputs(**base)))

    # 2) 500 extra every month
    _print_results(
        "2) Monthly extra 500",
        compute_mortgage(LoanInputs(**base, extra_payment=500, payment_type=PaymentType.MONTHLY)),
    )

    # 3) 50k up front, payment re-amortized over the same 30 years
    _print_results(
        "3) One-time 50,000 (re-amortize)",
        compute_mortgage(LoanInputs(**base, extra_payment=50_000)),
    )

    # 4) 50k up front, same payment, shorter term
    _print_results(
        "4) One-time 50,000 (shorten term)",
        compute_mortgage(
            LoanInputs(**base, extra_payment=50_000, one_time_policy=OneTimePolicy.SHORTEN_TERM)
        ),
    )

    # 5) Missing input
    _print_results("5) Zero interest rate", compute_mortgage(LoanInputs(300_000, 0, 30)))
    print("Done.")


if __name__ == "__main__":
    main()
