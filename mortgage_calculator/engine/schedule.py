"""Amortization schedule generation.

Pure functions: floats in, dataclasses out. No I/O.
"""

import logging

from mortgage_calculator.engine.payment import payment_for_terms, validate_loan_terms
from mortgage_calculator.models.loan import (
    MONTHS_PER_YEAR,
    LoanTerms,
    PaymentBreakdown,
    PaymentSchedule,
    YearlySummary,
)

logger = logging.getLogger(__name__)


def _amortize(terms: LoanTerms, payment: float) -> list[PaymentBreakdown]:
    r = terms.monthly_rate
    n = terms.number_of_payments

    payments: list[PaymentBreakdown] = []
    balance = terms.principal

    for period in range(1, n + 1):
        interest = balance * r
        # Payment never falls below interest; a negative result is float noise
        principal_paid = max(0.0, payment - interest)

        # Final payment (or float drift past the balance) pays off what remains
        if period == n or principal_paid > balance:
            principal_paid = balance

        balance -= principal_paid

        payments.append(PaymentBreakdown(
            period_number=period,
            principal_portion=principal_paid,
            interest_portion=interest,
            remaining_balance=max(0.0, balance),
        ))

        if balance <= 0:
            break

    if len(payments) < n:
        logger.debug("Balance reached zero after %d of %d periods", len(payments), n)
    return payments


def get_payment_schedule(
    principal: float,
    annual_interest_rate_percent: float,
    term_years: int,
) -> list[PaymentBreakdown]:
    """Generate the month-by-month amortization schedule.

    Args:
        principal: Loan amount
        annual_interest_rate_percent: Annual rate as a percentage (5 for 5%)
        term_years: Loan term in years

    Returns one PaymentBreakdown per month in chronological order. The last
    entry always leaves a zero balance.
    """
    terms = validate_loan_terms(principal, annual_interest_rate_percent, term_years)
    return _amortize(terms, payment_for_terms(terms))


def build_schedule(
    principal: float,
    annual_interest_rate_percent: float,
    term_years: int,
) -> PaymentSchedule:
    """Schedule together with its constant payment and totals."""
    terms = validate_loan_terms(principal, annual_interest_rate_percent, term_years)
    payment = payment_for_terms(terms)
    return PaymentSchedule(
        terms=terms,
        monthly_payment=payment,
        payments=_amortize(terms, payment),
    )


def yearly_summary(payments: list[PaymentBreakdown]) -> list[YearlySummary]:
    """Aggregate a monthly schedule by year.

    The last year may cover fewer than 12 periods if the schedule ended early.
    """
    yearly: list[YearlySummary] = []
    year_principal = 0.0
    year_interest = 0.0

    for p in payments:
        year_principal += p.principal_portion
        year_interest += p.interest_portion

        if p.period_number % MONTHS_PER_YEAR == 0 or p is payments[-1]:
            yearly.append(YearlySummary(
                year=(p.period_number - 1) // MONTHS_PER_YEAR + 1,
                principal=year_principal,
                interest=year_interest,
                ending_balance=p.remaining_balance,
            ))
            year_principal = 0.0
            year_interest = 0.0

    return yearly
