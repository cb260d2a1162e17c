"""
Economic ledger: append-only transactions, derived aggregates and loans.

Key responsibilities:
- Record signed transactions (positive = income, negative = expense)
- Derive totals and category groupings on demand from the transaction list
- Model loans and their fixed weekly amortization

Design rationale:
- Aggregates are computed properties, never stored fields, so they cannot
  drift from the underlying transactions
- Transactions are frozen models; the ledger only ever appends
- Transaction ids are sequence numbers, so recording never consumes randomness
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .catalog import LoanKind


class TransactionCategory(str, Enum):
    # Income
    MISSION_REWARD = "mission_reward"
    LOOT_SALES = "loot_sales"
    PATRON_CONTRACT = "patron_contract"
    TAVERN_INCOME = "tavern_income"
    LOAN_PROCEEDS = "loan_proceeds"

    # Expenses
    AGENT_WAGES = "agent_wages"
    RECRUITMENT_FEES = "recruitment_fees"
    STAFF_SALARIES = "staff_salaries"
    FACILITY_MAINTENANCE = "facility_maintenance"
    FACILITY_UPGRADE = "facility_upgrade"
    LOAN_REPAYMENT = "loan_repayment"

    @property
    def is_income(self) -> bool:
        return self in INCOME_CATEGORIES


INCOME_CATEGORIES = frozenset(
    {
        TransactionCategory.MISSION_REWARD,
        TransactionCategory.LOOT_SALES,
        TransactionCategory.PATRON_CONTRACT,
        TransactionCategory.TAVERN_INCOME,
        TransactionCategory.LOAN_PROCEEDS,
    }
)


class Transaction(BaseModel):
    """A single recorded cash flow. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    transaction_id: str = Field(..., description="Sequence-based identifier")
    week: int = Field(..., ge=0, description="Campaign week the flow was recorded in")
    amount: int = Field(..., description="Signed gold amount (positive = income)")
    category: TransactionCategory
    description: str = ""
    related_entity_id: Optional[str] = Field(
        None, description="Agent, mission, facility, staff or loan that caused the flow"
    )

    @property
    def is_income(self) -> bool:
        return self.amount > 0


class Ledger(BaseModel):
    """Append-only list of transactions with derived aggregates."""

    transactions: List[Transaction] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.transactions)

    def next_transaction_id(self) -> str:
        return f"txn-{len(self.transactions) + 1:06d}"

    def record(
        self,
        *,
        week: int,
        amount: int,
        category: TransactionCategory,
        description: str = "",
        related_entity_id: Optional[str] = None,
    ) -> Optional[Transaction]:
        """Append a transaction and return it. Zero amounts are not recorded."""
        if amount == 0:
            return None

        transaction = Transaction(
            transaction_id=self.next_transaction_id(),
            week=week,
            amount=amount,
            category=category,
            description=description,
            related_entity_id=related_entity_id,
        )
        self.transactions.append(transaction)
        return transaction

    @property
    def total_income(self) -> int:
        return sum(t.amount for t in self.transactions if t.amount > 0)

    @property
    def total_expenses(self) -> int:
        """Sum of expenses as a positive number."""
        return -sum(t.amount for t in self.transactions if t.amount < 0)

    @property
    def net_balance(self) -> int:
        return sum(t.amount for t in self.transactions)

    def by_category(self) -> Dict[TransactionCategory, int]:
        """Signed totals grouped by category, in first-seen order."""
        grouped: Dict[TransactionCategory, int] = {}
        for transaction in self.transactions:
            grouped[transaction.category] = grouped.get(transaction.category, 0) + transaction.amount
        return grouped

    def for_week(self, week: int) -> List[Transaction]:
        return [t for t in self.transactions if t.week == week]

    def for_entity(self, entity_id: str) -> List[Transaction]:
        return [t for t in self.transactions if t.related_entity_id == entity_id]


class Loan(BaseModel):
    """A fixed-payment loan amortized once per week."""

    loan_id: str
    kind: LoanKind
    lender_name: str
    principal: int = Field(..., gt=0)
    interest_rate: float = Field(..., ge=0.0)
    remaining_balance: int
    weekly_payment: int = Field(..., ge=0)
    start_week: int = Field(0, ge=0)
    duration_weeks: int = Field(..., gt=0)

    @classmethod
    def from_terms(cls, *, loan_id: str, kind: LoanKind, principal: int, start_week: int) -> "Loan":
        """Create a loan with the lender's standard terms."""
        rate, duration, lender = kind.terms
        total_owed = int(principal * (1 + rate))
        return cls(
            loan_id=loan_id,
            kind=kind,
            lender_name=lender,
            principal=principal,
            interest_rate=rate,
            remaining_balance=total_owed,
            weekly_payment=max(1, total_owed // duration),
            start_week=start_week,
            duration_weeks=duration,
        )

    @property
    def total_owed(self) -> int:
        return int(self.principal * (1 + self.interest_rate))

    @property
    def is_paid_off(self) -> bool:
        return self.remaining_balance <= 0

    def amortize(self) -> int:
        """Apply one week's payment and return the amount paid.

        The payment never exceeds the remaining balance, so the balance stops
        at exactly zero.
        """
        if self.is_paid_off or self.weekly_payment <= 0:
            return 0
        payment = min(self.weekly_payment, self.remaining_balance)
        self.remaining_balance -= payment
        return payment
