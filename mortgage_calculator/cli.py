"""CLI for fixed-rate loan payments and amortization schedules.

Usage:
    python -m mortgage_calculator.cli 200000 5 30
    python -m mortgage_calculator.cli 200000 5 30 --schedule --limit 12
    python -m mortgage_calculator.cli 200000 5 30 --yearly
"""

import argparse
import logging

from mortgage_calculator.config import settings
from mortgage_calculator.engine.payment import InvalidLoanTermsError
from mortgage_calculator.engine.schedule import build_schedule, yearly_summary
from mortgage_calculator.models.loan import PaymentSchedule

logger = logging.getLogger(__name__)


def print_summary(schedule: PaymentSchedule) -> None:
    terms = schedule.terms
    print(f"\n{'=' * 60}")
    print(f"  Loan: ${terms.principal:,.2f} at {terms.annual_interest_rate_percent:g}% "
          f"for {terms.term_years} years")
    print(f"{'=' * 60}")
    print(f"  Monthly Payment:  ${schedule.monthly_payment:,.2f}")
    print(f"  Payments:         {len(schedule.payments)}")
    print(f"  Total Interest:   ${schedule.total_interest:,.2f}")
    print(f"  Total Paid:       ${schedule.total_paid:,.2f}")
    print()


def print_schedule(schedule: PaymentSchedule, limit: int | None = None) -> None:
    payments = schedule.payments if limit is None else schedule.payments[:limit]
    print(f"  {'#':>4}  {'Principal':>12}  {'Interest':>12}  {'Total':>12}  {'Balance':>14}")
    for p in payments:
        print(f"  {p.period_number:>4}  {p.principal_portion:>12,.2f}  {p.interest_portion:>12,.2f}"
              f"  {p.total_payment:>12,.2f}  {p.remaining_balance:>14,.2f}")
    if len(payments) < len(schedule.payments):
        print(f"  ... {len(schedule.payments) - len(payments)} more payments")
    print()


def print_yearly(schedule: PaymentSchedule) -> None:
    print(f"  {'Year':>4}  {'Principal':>12}  {'Interest':>12}  {'Total':>12}  {'End Balance':>14}")
    for y in yearly_summary(schedule.payments):
        print(f"  {y.year:>4}  {y.principal:>12,.2f}  {y.interest:>12,.2f}"
              f"  {y.total_payment:>12,.2f}  {y.ending_balance:>14,.2f}")
    print()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Fixed-rate mortgage calculator")
    parser.add_argument("principal", type=float, help="Loan amount")
    parser.add_argument("rate", type=float, help="Annual interest rate in percent (5 for 5%%)")
    parser.add_argument("years", type=int, help="Loan term in years")
    parser.add_argument("--schedule", action="store_true", help="Print the monthly schedule")
    parser.add_argument("--yearly", action="store_true", help="Print yearly totals")
    parser.add_argument("--limit", type=int, default=None, help="Show only the first N monthly payments")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        schedule = build_schedule(args.principal, args.rate, args.years)
    except InvalidLoanTermsError as e:
        logger.debug("Invalid loan terms: %s", e)
        parser.error(str(e))

    print_summary(schedule)
    if args.schedule:
        print_schedule(schedule, limit=args.limit)
    if args.yearly:
        print_yearly(schedule)


if __name__ == "__main__":
    main()
