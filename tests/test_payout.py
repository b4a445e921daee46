import pytest
import sys
import os
from datetime import datetime

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from cart_pricing.payouts import (
    InvalidCurrencyError,
    InvalidStatusError,
    PayoutError,
    Payout,
    PayoutStatus,
    Transaction,
)


@pytest.fixture
def payout():
    return Payout.create("po-1", "RUB")


def test_new_payout_is_pending_and_empty(payout):
    assert payout.status == PayoutStatus.PENDING
    assert payout.get_total_amount() == 0
    assert payout.get_transaction_count() == 0
    assert payout.processed_at is None
    assert isinstance(payout.created_at, datetime)


def test_add_transaction_accumulates_total(payout):
    payout.add_transaction(Transaction("tx-1", 1500.0, "RUB"))
    payout.add_transaction(Transaction("tx-2", 250.5, "RUB"))
    payout.add_transaction(Transaction("tx-3", -50.5, "RUB"))

    assert payout.get_transaction_count() == 3
    assert abs(payout.get_total_amount() - 1700.0) < 0.01
    assert abs(payout.get_total_amount() - sum(t.amount for t in payout.transactions)) < 0.01
    assert [t.transaction_id for t in payout.transactions] == ["tx-1", "tx-2", "tx-3"]


def test_mismatched_currency_is_rejected(payout):
    payout.add_transaction(Transaction("tx-1", 100.0, "RUB"))

    with pytest.raises(InvalidCurrencyError) as exc_info:
        payout.add_transaction(Transaction("tx-2", 999.0, "USD"))

    assert exc_info.value.expected == "RUB"
    assert exc_info.value.actual == "USD"
    assert exc_info.value.payout_id == "po-1"
    assert "invalid currency" in str(exc_info.value)
    assert payout.get_total_amount() == 100.0
    assert payout.get_transaction_count() == 1


def test_process_sets_status_and_timestamp(payout):
    stamp = datetime(2026, 10, 19, 12, 0, 0)
    payout.process(now=stamp)

    assert payout.status == PayoutStatus.PROCESSED
    assert payout.is_processed
    assert payout.processed_at == stamp


def test_process_uses_wall_clock_by_default(payout):
    before = datetime.now()
    payout.process()
    after = datetime.now()
    assert before <= payout.processed_at <= after


def test_second_process_fails_without_mutation(payout):
    first = datetime(2026, 1, 1)
    payout.process(now=first)

    with pytest.raises(InvalidStatusError) as exc_info:
        payout.process(now=datetime(2026, 2, 1))

    assert exc_info.value.status == "processed"
    assert "invalid status" in str(exc_info.value)
    assert payout.processed_at == first
    assert payout.status == PayoutStatus.PROCESSED


def test_errors_share_base_class():
    assert issubclass(InvalidCurrencyError, PayoutError)
    assert issubclass(InvalidStatusError, PayoutError)


def test_transactions_still_accepted_after_processing(payout):
    """Status does not gate add_transaction."""
    payout.add_transaction(Transaction("tx-1", 10.0, "RUB"))
    payout.process()
    payout.add_transaction(Transaction("tx-2", 5.0, "RUB"))

    assert payout.get_transaction_count() == 2
    assert payout.get_total_amount() == 15.0
    assert payout.status == PayoutStatus.PROCESSED


def test_to_dict(payout):
    payout.add_transaction(Transaction("tx-1", 42.0, "RUB", created_at=datetime(2026, 3, 1)))
    data = payout.to_dict()

    assert data["payout_id"] == "po-1"
    assert data["status"] == "pending"
    assert data["total_amount"] == 42.0
    assert data["transaction_count"] == 1
    assert data["transactions"][0]["created_at"] == "2026-03-01T00:00:00"
    assert data["processed_at"] is None


@pytest.mark.parametrize("field_name,value", [
    ("status", "processed"),
    ("total_amount", 50.0),
    ("transactions", [Transaction("tx-1", 1.0, "RUB")]),
    ("processed_at", datetime(2026, 1, 1)),
])
def test_state_fields_not_settable_at_construction(field_name, value):
    """Status, totals and transactions change only through add_transaction/process."""
    with pytest.raises(TypeError):
        Payout("po-9", "RUB", **{field_name: value})


def test_constructed_payout_keeps_invariants():
    payout = Payout("po-9", "RUB")
    assert payout.status is PayoutStatus.PENDING
    assert payout.get_total_amount() == sum(t.amount for t in payout.transactions) == 0

    payout.process()
    with pytest.raises(InvalidStatusError):
        payout.process()
