from dataclasses import dataclass, field

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    annual_interest_rate_percent: float  # 5 means 5%, not 0.05
    term_years: int

    @property
    def monthly_rate(self) -> float:
        return self.annual_interest_rate_percent / 100 / MONTHS_PER_YEAR

    @property
    def number_of_payments(self) -> int:
        return self.term_years * MONTHS_PER_YEAR


@dataclass(frozen=True)
class PaymentBreakdown:
    """One month of an amortization schedule."""
    period_number: int
    principal_portion: float
    interest_portion: float
    remaining_balance: float

    @property
    def total_payment(self) -> float:
        return self.principal_portion + self.interest_portion

    def __str__(self) -> str:
        return (
            f"Payment {self.period_number}: Principal={self.principal_portion:.2f}, "
            f"Interest={self.interest_portion:.2f}, Total={self.total_payment:.2f}, "
            f"Balance={self.remaining_balance:.2f}"
        )


@dataclass(frozen=True)
class PaymentSchedule:
    terms: LoanTerms
    monthly_payment: float
    payments: list[PaymentBreakdown] = field(default_factory=list)

    @property
    def total_principal(self) -> float:
        return sum(p.principal_portion for p in self.payments)

    @property
    def total_interest(self) -> float:
        return sum(p.interest_portion for p in self.payments)

    @property
    def total_paid(self) -> float:
        return self.total_principal + self.total_interest


@dataclass(frozen=True)
class YearlySummary:
    year: int
    principal: float
    interest: float
    ending_balance: float

    @property
    def total_payment(self) -> float:
        return self.principal + self.interest
