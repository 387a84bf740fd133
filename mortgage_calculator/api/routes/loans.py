"""Loan payment and schedule routes."""

import logging

from fastapi import APIRouter, HTTPException

from mortgage_calculator.api.schemas import (
    LoanRequest,
    ScheduleRequest,
    PaymentResponse,
    PaymentBreakdownResponse,
    ScheduleResponse,
    YearlySummaryResponse,
)
from mortgage_calculator.engine.payment import (
    InvalidLoanTermsError,
    payment_for_terms,
    validate_loan_terms,
)
from mortgage_calculator.engine.schedule import build_schedule, yearly_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["loans"])


@router.post("/payment", response_model=PaymentResponse)
def monthly_payment(req: LoanRequest):
    """Constant monthly payment for a fixed-rate loan."""
    try:
        terms = validate_loan_terms(req.principal, req.annual_interest_rate_percent, req.term_years)
        payment = payment_for_terms(terms)
    except InvalidLoanTermsError as e:
        logger.warning("Rejected payment request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return PaymentResponse(
        monthly_payment=payment,
        number_of_payments=terms.number_of_payments,
        monthly_rate=terms.monthly_rate,
    )


@router.post("/schedule", response_model=ScheduleResponse)
def payment_schedule(req: ScheduleRequest):
    """Full amortization schedule, optionally with yearly totals."""
    try:
        schedule = build_schedule(req.principal, req.annual_interest_rate_percent, req.term_years)
    except InvalidLoanTermsError as e:
        logger.warning("Rejected schedule request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    payments = [
        PaymentBreakdownResponse(
            period_number=p.period_number,
            principal_portion=p.principal_portion,
            interest_portion=p.interest_portion,
            total_payment=p.total_payment,
            remaining_balance=p.remaining_balance,
        )
        for p in schedule.payments
    ]

    yearly = None
    if req.include_yearly:
        yearly = [
            YearlySummaryResponse(
                year=y.year,
                principal=y.principal,
                interest=y.interest,
                total_payment=y.total_payment,
                ending_balance=y.ending_balance,
            )
            for y in yearly_summary(schedule.payments)
        ]

    return ScheduleResponse(
        monthly_payment=schedule.monthly_payment,
        total_principal=schedule.total_principal,
        total_interest=schedule.total_interest,
        total_paid=schedule.total_paid,
        payments=payments,
        yearly=yearly,
    )
