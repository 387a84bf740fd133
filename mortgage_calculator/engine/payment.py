"""Fixed-rate monthly payment calculation.

Pure functions: floats in, float out. No I/O.
"""

import logging
import math

from mortgage_calculator.config import settings
from mortgage_calculator.models.loan import LoanTerms

logger = logging.getLogger(__name__)


class InvalidLoanTermsError(ValueError):
    """Loan inputs outside the domain of the amortization formulas."""


def validate_loan_terms(
    principal: float,
    annual_interest_rate_percent: float,
    term_years: int,
) -> LoanTerms:
    """Check inputs and return them as a LoanTerms.

    Raises InvalidLoanTermsError instead of letting the payment formula
    produce NaN or infinity.
    """
    if isinstance(principal, bool) or not isinstance(principal, (int, float)):
        raise InvalidLoanTermsError(f"principal must be a number, got {principal!r}")
    if not math.isfinite(principal) or principal <= 0:
        raise InvalidLoanTermsError(f"principal must be positive, got {principal}")

    rate = annual_interest_rate_percent
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise InvalidLoanTermsError(f"annual interest rate must be a number, got {rate!r}")
    if not math.isfinite(rate) or rate < 0:
        raise InvalidLoanTermsError(f"annual interest rate must be non-negative, got {rate}")

    if isinstance(term_years, bool) or not isinstance(term_years, int):
        raise InvalidLoanTermsError(f"term must be a whole number of years, got {term_years!r}")
    if term_years <= 0:
        raise InvalidLoanTermsError(f"term must be at least one year, got {term_years}")
    if settings.max_term_years is not None and term_years > settings.max_term_years:
        raise InvalidLoanTermsError(
            f"term must be at most {settings.max_term_years} years, got {term_years}"
        )

    return LoanTerms(
        principal=float(principal),
        annual_interest_rate_percent=float(rate),
        term_years=term_years,
    )


def payment_for_terms(terms: LoanTerms) -> float:
    """Constant payment for already-validated terms.

    Raises InvalidLoanTermsError if the rate is so large that the payment
    does not fit in a float.
    """
    r = terms.monthly_rate
    n = terms.number_of_payments
    if r == 0:
        return terms.principal / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1] = P * r / (1 - (1+r)^-n)
    # log1p/expm1 keep tiny rates from cancelling and huge ones from overflowing
    payment = terms.principal * r / -math.expm1(-n * math.log1p(r))
    if not math.isfinite(payment):
        raise InvalidLoanTermsError(
            f"annual interest rate {terms.annual_interest_rate_percent} is too large"
        )
    return payment


def calculate_monthly_payment(
    principal: float,
    annual_interest_rate_percent: float,
    term_years: int,
) -> float:
    """Calculate the fixed monthly payment of a fully amortizing loan.

    Args:
        principal: Loan amount
        annual_interest_rate_percent: Annual rate as a percentage (5 for 5%)
        term_years: Loan term in years

    The result is not rounded to cents.
    """
    terms = validate_loan_terms(principal, annual_interest_rate_percent, term_years)
    payment = payment_for_terms(terms)
    logger.debug(
        "Monthly payment for %.2f at %s%% over %d years: %.5f",
        terms.principal, terms.annual_interest_rate_percent, terms.term_years, payment,
    )
    return payment
