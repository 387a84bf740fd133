"""Pydantic schemas for API request/response models."""

from typing import Any

from pydantic import BaseModel, Field


# ---- Request schemas ----

class LoanRequest(BaseModel):
    principal: float = Field(..., description="Loan amount")
    annual_interest_rate_percent: float = Field(..., description="Annual rate as a percentage (5 = 5%)")
    term_years: int = Field(..., description="Loan term in years")


class ScheduleRequest(LoanRequest):
    include_yearly: bool = False


# ---- Response schemas ----

class PaymentResponse(BaseModel):
    monthly_payment: float
    number_of_payments: int
    monthly_rate: float


class PaymentBreakdownResponse(BaseModel):
    period_number: int
    principal_portion: float
    interest_portion: float
    total_payment: float
    remaining_balance: float


class YearlySummaryResponse(BaseModel):
    year: int
    principal: float
    interest: float
    total_payment: float
    ending_balance: float


class ScheduleResponse(BaseModel):
    monthly_payment: float
    total_principal: float
    total_interest: float
    total_paid: float
    payments: list[PaymentBreakdownResponse]
    yearly: list[YearlySummaryResponse] | None = None


class ToolResponse(BaseModel):
    name: str
    result: Any
