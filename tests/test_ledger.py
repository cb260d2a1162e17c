"""Tests for the transaction ledger and loan amortization."""

import math

import pytest
from pydantic import ValidationError

from guildsim.catalog import LoanKind
from guildsim.ledger import Ledger, Loan, TransactionCategory


def test_ledger_aggregates_are_consistent():
    ledger = Ledger()
    ledger.record(week=1, amount=500, category=TransactionCategory.MISSION_REWARD, related_entity_id="m-1")
    ledger.record(week=1, amount=-120, category=TransactionCategory.AGENT_WAGES)
    ledger.record(week=2, amount=-80, category=TransactionCategory.AGENT_WAGES)
    ledger.record(week=2, amount=50, category=TransactionCategory.TAVERN_INCOME)

    assert ledger.total_income == 550
    assert ledger.total_expenses == 200
    assert ledger.net_balance == ledger.total_income - ledger.total_expenses == 350
    assert ledger.by_category() == {
        TransactionCategory.MISSION_REWARD: 500,
        TransactionCategory.AGENT_WAGES: -200,
        TransactionCategory.TAVERN_INCOME: 50,
    }
    assert [t.amount for t in ledger.for_week(2)] == [-80, 50]
    assert [t.transaction_id for t in ledger.for_entity("m-1")] == ["txn-000001"]


def test_zero_amounts_are_not_recorded():
    ledger = Ledger()
    assert ledger.record(week=0, amount=0, category=TransactionCategory.LOOT_SALES) is None
    assert len(ledger) == 0


def test_transactions_are_immutable():
    ledger = Ledger()
    transaction = ledger.record(week=0, amount=10, category=TransactionCategory.LOOT_SALES)
    with pytest.raises(ValidationError):
        transaction.amount = 20


def test_income_categories():
    assert TransactionCategory.LOAN_PROCEEDS.is_income
    assert not TransactionCategory.LOAN_REPAYMENT.is_income


@pytest.mark.parametrize("kind", list(LoanKind))
def test_loan_terminates_in_expected_number_of_payments(kind):
    loan = Loan.from_terms(loan_id="loan-000001", kind=kind, principal=1000, start_week=0)
    rate, duration, lender = kind.terms

    assert loan.lender_name == lender
    assert loan.remaining_balance == loan.total_owed == int(1000 * (1 + rate))
    assert loan.weekly_payment == loan.total_owed // duration

    payments = []
    while not loan.is_paid_off:
        payments.append(loan.amortize())

    assert len(payments) == math.ceil(loan.total_owed / loan.weekly_payment)
    assert sum(payments) == loan.total_owed
    assert loan.remaining_balance == 0
    assert loan.amortize() == 0


def test_tiny_loan_still_amortizes():
    loan = Loan.from_terms(loan_id="loan-000001", kind=LoanKind.MERCHANT, principal=5, start_week=3)
    assert loan.weekly_payment == 1
    while not loan.is_paid_off:
        loan.amortize()
    assert loan.remaining_balance == 0
