"""Integration tests for GraphQL mortgage queries."""

import pytest
from fastapi.testclient import TestClient

from amortization.engine import AmortizationEngine
from amortization.loan import LoanInputs
from amortization.results import ExtraScenario
from amortization.simulation import simulate_payoff
from mortgage_api import services
from mortgage_api.main import app


client = TestClient(app)

RESULT_FIELDS = """
    monthlyPaymentRegular
    monthlyPaymentExtra
    totalInterestRegular
    totalInterestExtra
    totalAmountRegular
    totalAmountExtra
    interestSavings
    timeSavings { years months }
    paymentsWithExtra
    totalPaymentsRegular
    paymentType
    oneTimePolicy
    payoffStatus
    amortizes
    reducedPrincipal
    oneTimePaymentAmount
    display {
      monthlyPaymentRegular
      monthlyPaymentExtra
      interestSavings
      timeSavings
    }
"""


def _query(body: str) -> dict:
    response = client.post("/graphql", json={"query": body})
    assert response.status_code == 200
    return response.json()


def test_compute_mortgage_regular_payment():
    """300k / 6.5% / 30Y: regular payment and formatted display."""
    data = _query(
        """
        query {
          computeMortgage(
            loan: { loanAmount: 300000, interestRatePercent: 6.5, loanTermYears: 30 }
          ) { %s }
        }
        """
        % RESULT_FIELDS
    )
    assert "errors" not in data
    result = data["data"]["computeMortgage"]
    assert abs(result["monthlyPaymentRegular"] - 1896.20) < 0.01
    assert result["totalPaymentsRegular"] == 360
    assert result["paymentsWithExtra"] == 360
    assert result["interestSavings"] == 0
    assert result["paymentType"] == "ONE_TIME"
    assert result["oneTimePolicy"] == "REAMORTIZE"
    assert result["payoffStatus"] == "PAID_OFF"
    assert result["amortizes"] is True
    assert result["display"]["monthlyPaymentRegular"] == "$1,896.20"
    assert result["display"]["timeSavings"] == "0y 0m"


def test_compute_mortgage_monthly_extra():
    """500 extra per month saves interest and about 12.5 years."""
    data = _query(
        """
        query {
          computeMortgage(
            loan: {
              loanAmount: 300000
              interestRatePercent: 6.5
              loanTermYears: 30
              extraPayment: 500
              paymentType: MONTHLY
            }
          ) { %s }
        }
        """
        % RESULT_FIELDS
    )
    assert "errors" not in data
    result = data["data"]["computeMortgage"]
    assert result["paymentsWithExtra"] < 360
    assert result["interestSavings"] > 0
    assert abs(result["monthlyPaymentExtra"] - (result["monthlyPaymentRegular"] + 500)) < 1e-6
    assert result["oneTimePolicy"] is None
    assert result["timeSavings"]["years"] == 12
    assert result["display"]["timeSavings"].startswith("12y ")


def test_compute_mortgage_one_time_policies():
    """oneTimePolicy argument selects re-amortize or shorten-term."""
    template = """
        query {
          computeMortgage(
            loan: {
              loanAmount: 300000
              interestRatePercent: 6.5
              loanTermYears: 30
              extraPayment: 50000
            }
            oneTimePolicy: %s
          ) { %s }
        }
    """
    reamortized = _query(template % ("REAMORTIZE", RESULT_FIELDS))["data"]["computeMortgage"]
    shortened = _query(template % ("SHORTEN_TERM", RESULT_FIELDS))["data"]["computeMortgage"]

    assert reamortized["paymentsWithExtra"] == 360
    assert reamortized["monthlyPaymentExtra"] < reamortized["monthlyPaymentRegular"]
    assert reamortized["reducedPrincipal"] == 250000
    assert reamortized["oneTimePaymentAmount"] == 50000

    assert shortened["paymentsWithExtra"] < 360
    assert shortened["monthlyPaymentExtra"] == shortened["monthlyPaymentRegular"]
    assert shortened["oneTimePolicy"] == "SHORTEN_TERM"


def test_compute_mortgage_default_policy_from_environment(monkeypatch):
    """MORTGAGE_ONE_TIME_POLICY sets the policy used when none is requested."""
    monkeypatch.setenv("MORTGAGE_ONE_TIME_POLICY", "shortenTerm")
    data = _query(
        """
        query {
          computeMortgage(
            loan: { loanAmount: 300000, interestRatePercent: 6.5, loanTermYears: 30, extraPayment: 50000 }
          ) { oneTimePolicy paymentsWithExtra }
        }
        """
    )
    assert "errors" not in data
    result = data["data"]["computeMortgage"]
    assert result["oneTimePolicy"] == "SHORTEN_TERM"
    assert result["paymentsWithExtra"] < 360


def test_compute_mortgage_currency_symbol_from_environment(monkeypatch):
    """MORTGAGE_CURRENCY_SYMBOL changes display strings only."""
    monkeypatch.setenv("MORTGAGE_CURRENCY_SYMBOL", "£")
    data = _query(
        """
        query {
          computeMortgage(
            loan: { loanAmount: 300000, interestRatePercent: 6.5, loanTermYears: 30 }
          ) { display { monthlyPaymentRegular } }
        }
        """
    )
    assert data["data"]["computeMortgage"]["display"]["monthlyPaymentRegular"] == "£1,896.20"


@pytest.mark.parametrize(
    "loan",
    [
        "{ loanAmount: 0, interestRatePercent: 6.5, loanTermYears: 30 }",
        "{ loanAmount: 300000, interestRatePercent: 0, loanTermYears: 30 }",
        "{ loanAmount: 300000, interestRatePercent: 6.5, loanTermYears: 0 }",
        "{ loanAmount: 300000, interestRatePercent: 1000, loanTermYears: 100 }",
        "{ loanAmount: 1e308, interestRatePercent: 6.5, loanTermYears: 30 }",
    ],
)
def test_compute_mortgage_insufficient_input_returns_null(loan):
    """Zero amount, rate, or term, or figures that overflow: no result and no error."""
    data = _query("query { computeMortgage(loan: %s) { monthlyPaymentRegular } }" % loan)
    assert "errors" not in data
    assert data["data"]["computeMortgage"] is None


def test_compute_mortgage_negative_input_returns_error():
    """Negative amounts are rejected with a validation error."""
    data = _query(
        """
        query {
          computeMortgage(
            loan: { loanAmount: -1, interestRatePercent: 6.5, loanTermYears: 30 }
          ) { monthlyPaymentRegular }
        }
        """
    )
    assert "errors" in data
    assert any("loan_amount" in e["message"] for e in data["errors"])


def test_compute_mortgage_from_form_matches_numeric():
    """Form text with grouping separators gives the same result as numeric input."""
    form = _query(
        """
        query {
          computeMortgageFromForm(
            form: {
              loanAmount: "300,000"
              interestRate: "6.5"
              loanTermYears: "30"
              extraPayment: "1,000"
              paymentType: MONTHLY
            }
          ) { totalInterestExtra paymentsWithExtra }
        }
        """
    )
    numeric = _query(
        """
        query {
          computeMortgage(
            loan: {
              loanAmount: 300000
              interestRatePercent: 6.5
              loanTermYears: 30
              extraPayment: 1000
              paymentType: MONTHLY
            }
          ) { totalInterestExtra paymentsWithExtra }
        }
        """
    )
    assert "errors" not in form
    assert form["data"]["computeMortgageFromForm"] == numeric["data"]["computeMortgage"]


def test_compute_mortgage_from_form_empty_extra_payment():
    """An empty extra-payment field counts as no extra payment."""
    data = _query(
        """
        query {
          computeMortgageFromForm(
            form: { loanAmount: "300,000", interestRate: "6.5", loanTermYears: "30", extraPayment: "" }
          ) { interestSavings paymentsWithExtra }
        }
        """
    )
    assert "errors" not in data
    result = data["data"]["computeMortgageFromForm"]
    assert result["interestSavings"] == 0
    assert result["paymentsWithExtra"] == 360


def test_compute_mortgage_from_form_invalid_fields():
    """Each invalid field is reported with its form message."""
    data = _query(
        """
        query {
          computeMortgageFromForm(
            form: { loanAmount: "abc", interestRate: "-2", loanTermYears: "30" }
          ) { monthlyPaymentRegular }
        }
        """
    )
    assert "errors" in data
    message = data["errors"][0]["message"]
    assert "Invalid amount" in message
    assert "Invalid rate" in message
    assert "Invalid term" not in message


def test_validate_numeric_input():
    data = _query(
        '{ ok: validateNumericInput(value: "300,000") bad: validateNumericInput(value: "-5") }'
    )
    assert data["data"] == {"ok": True, "bad": False}


def test_health_and_version():
    assert client.get("/health").json() == {"status": "ok"}
    data = _query("{ version }")
    assert data["data"]["version"] == "0.1.0"


class InterestShortfallStrategy:
    """Pays half the regular payment, which never covers the monthly interest."""

    def can_apply(self, inputs: LoanInputs) -> bool:
        return True

    def apply(self, inputs: LoanInputs, regular_payment: float) -> ExtraScenario:
        payment = regular_payment / 2
        sim = simulate_payoff(
            inputs.loan_amount, payment, inputs.monthly_rate, 0.0, inputs.scheduled_payments
        )
        return ExtraScenario(
            monthly_payment=payment,
            payments=sim.payments,
            total_interest=sim.total_interest,
            total_amount=payment * sim.payments,
            status=sim.status,
        )


def test_compute_mortgage_reports_non_amortizing_schedule(monkeypatch):
    """A schedule that does not amortize comes back flagged, not as an error."""
    engine = AmortizationEngine()
    engine.register(InterestShortfallStrategy())
    monkeypatch.setattr(services, "compute_mortgage", engine.compute)

    data = _query(
        """
        query {
          computeMortgage(
            loan: { loanAmount: 300000, interestRatePercent: 6.5, loanTermYears: 30, extraPayment: 100 }
          ) { payoffStatus amortizes paymentsWithExtra }
        }
        """
    )
    assert "errors" not in data
    result = data["data"]["computeMortgage"]
    assert result["payoffStatus"] == "NON_AMORTIZING"
    assert result["amortizes"] is False
    assert result["paymentsWithExtra"] == 0


def test_compute_mortgage_reports_paid_off_schedule():
    """The built-in strategies always amortize."""
    data = _query(
        """
        query {
          computeMortgage(
            loan: { loanAmount: 300000, interestRatePercent: 6.5, loanTermYears: 30, extraPayment: 100 }
          ) { payoffStatus amortizes }
        }
        """
    )
    assert data["data"]["computeMortgage"] == {"payoffStatus": "PAID_OFF", "amortizes": True}
