"""
Payout aggregate - accumulates same-currency transactions and tracks settlement.

State machine:
    PENDING → PROCESSED

Invariants:
- every transaction shares the payout currency
- total_amount equals the sum of transaction amounts
- processing happens exactly once
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from ..config.logging_config import get_logger
from .errors import InvalidCurrencyError, InvalidStatusError

logger = get_logger(__name__)


class PayoutStatus(str, Enum):
    """Payout lifecycle states."""
    PENDING = "pending"
    PROCESSED = "processed"


@dataclass(frozen=True)
class Transaction:
    """A single financial transaction."""
    transaction_id: str
    amount: float
    currency: str
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class Payout:
    """A payout grouping transactions of one currency."""
    payout_id: str
    currency: str
    created_at: datetime = field(default_factory=datetime.now)
    # State changes only through add_transaction and process
    transactions: list[Transaction] = field(default_factory=list, init=False)
    total_amount: float = field(default=0.0, init=False)
    status: PayoutStatus = field(default=PayoutStatus.PENDING, init=False)
    processed_at: Optional[datetime] = field(default=None, init=False)

    @classmethod
    def create(cls, payout_id: str, currency: str) -> 'Payout':
        """Start a new pending payout with no transactions."""
        payout = cls(payout_id=payout_id, currency=currency)
        logger.info("payout.created", payout_id=payout_id, currency=currency)
        return payout

    @property
    def is_processed(self) -> bool:
        return self.status == PayoutStatus.PROCESSED

    def add_transaction(self, transaction: Transaction) -> None:
        """
        Append a transaction and add its amount to the running total.

        Allowed after processing as well; the payout status is not checked.

        Raises:
            InvalidCurrencyError: transaction currency differs from the payout's
        """
        if transaction.currency != self.currency:
            logger.warning(
                "payout.invalid_currency",
                payout_id=self.payout_id,
                expected=self.currency,
                actual=transaction.currency,
                transaction_id=transaction.transaction_id,
            )
            raise InvalidCurrencyError(self.payout_id, self.currency, transaction.currency)

        if self.is_processed:
            logger.warning(
                "payout.transaction_after_processing",
                payout_id=self.payout_id,
                transaction_id=transaction.transaction_id,
            )

        self.transactions.append(transaction)
        self.total_amount += transaction.amount

        logger.info(
            "payout.transaction_added",
            payout_id=self.payout_id,
            transaction_id=transaction.transaction_id,
            amount=transaction.amount,
            total_amount=self.total_amount,
        )

    def process(self, now: Optional[datetime] = None) -> None:
        """
        Mark the payout processed.

        Raises:
            InvalidStatusError: payout is not pending
        """
        if self.status != PayoutStatus.PENDING:
            raise InvalidStatusError(self.payout_id, self.status.value)

        self.processed_at = now or datetime.now()
        self.status = PayoutStatus.PROCESSED

        logger.info(
            "payout.processed",
            payout_id=self.payout_id,
            total_amount=self.total_amount,
            transaction_count=len(self.transactions),
        )

    def get_total_amount(self) -> float:
        return self.total_amount

    def get_transaction_count(self) -> int:
        return len(self.transactions)

    def to_dict(self) -> dict:
        """Convert to a plain dict for JSON responses."""
        return {
            "payout_id": self.payout_id,
            "currency": self.currency,
            "status": self.status.value,
            "total_amount": self.total_amount,
            "transaction_count": self.get_transaction_count(),
            "transactions": [
                {
                    "transaction_id": t.transaction_id,
                    "amount": t.amount,
                    "currency": t.currency,
                    "created_at": t.created_at.isoformat(),
                }
                for t in self.transactions
            ],
            "created_at": self.created_at.isoformat(),
            "processed_at": self.processed_at.isoformat() if self.processed_at else None,
        }
