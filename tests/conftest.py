"""Canonical loans used across the test suite.

Fixture: $200K, 5%, 30yr fixed (payment ~$1,073.64).
"""

import pytest

from mortgage_calculator.models.loan import LoanTerms


@pytest.fixture
def standard_loan() -> LoanTerms:
    """$200K at 5% over 30 years."""
    return LoanTerms(principal=200000.0, annual_interest_rate_percent=5.0, term_years=30)


@pytest.fixture
def short_loan() -> LoanTerms:
    """$100K at 4% over 5 years."""
    return LoanTerms(principal=100000.0, annual_interest_rate_percent=4.0, term_years=5)


@pytest.fixture
def zero_rate_loan() -> LoanTerms:
    """$120K interest-free over 10 years."""
    return LoanTerms(principal=120000.0, annual_interest_rate_percent=0.0, term_years=10)
