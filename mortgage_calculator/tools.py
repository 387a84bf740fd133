"""Named-tool registry for the two loan operations.

Lets an agent runtime (or any other transport) discover the operations,
see their typed parameters, and invoke them with a plain arguments dict.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, Field, ValidationError

from mortgage_calculator.engine.payment import InvalidLoanTermsError, calculate_monthly_payment
from mortgage_calculator.engine.schedule import get_payment_schedule

logger = logging.getLogger(__name__)


class UnknownToolError(KeyError):
    pass


class LoanArguments(BaseModel):
    principal: float = Field(..., description="Loan amount in currency units")
    annualInterestRate: float = Field(
        ..., description="Annual interest rate as a percentage, e.g. 5 for 5%"
    )
    loanTermYears: int = Field(..., description="Loan term in whole years")


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    handler: Callable[[LoanArguments], Any]


def _monthly_payment(args: LoanArguments) -> float:
    return calculate_monthly_payment(args.principal, args.annualInterestRate, args.loanTermYears)


def _payment_schedule(args: LoanArguments) -> list[dict[str, float]]:
    schedule = get_payment_schedule(args.principal, args.annualInterestRate, args.loanTermYears)
    return [
        {
            "paymentNumber": p.period_number,
            "principalPayment": p.principal_portion,
            "interestPayment": p.interest_portion,
            "totalPayment": p.total_payment,
            "remainingBalance": p.remaining_balance,
        }
        for p in schedule
    ]


TOOLS: dict[str, ToolSpec] = {
    "calculateMonthlyPayment": ToolSpec(
        name="calculateMonthlyPayment",
        description=(
            "Calculates the monthly mortgage payment based on principal, "
            "annual interest rate, and loan term in years."
        ),
        handler=_monthly_payment,
    ),
    "getPaymentSchedule": ToolSpec(
        name="getPaymentSchedule",
        description=(
            "Generates the month-by-month amortization schedule showing principal, "
            "interest, total payment and remaining balance for each payment."
        ),
        handler=_payment_schedule,
    ),
}


def list_tools() -> list[dict[str, Any]]:
    """Tool metadata with a JSON schema for the parameters."""
    parameters = LoanArguments.model_json_schema()
    return [
        {"name": spec.name, "description": spec.description, "parameters": parameters}
        for spec in TOOLS.values()
    ]


def call_tool(name: str, arguments: dict[str, Any]) -> Any:
    """Validate arguments and run the named tool."""
    spec = TOOLS.get(name)
    if spec is None:
        raise UnknownToolError(name)

    try:
        args = LoanArguments.model_validate(arguments)
    except ValidationError as e:
        logger.warning("Rejected arguments for %s: %s", name, e)
        raise InvalidLoanTermsError(str(e)) from e

    return spec.handler(args)
