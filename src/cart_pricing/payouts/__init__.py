"""Payouts subpackage - transaction aggregation and settlement status."""
from .errors import InvalidCurrencyError, InvalidStatusError, PayoutError
from .models import Payout, PayoutStatus, Transaction

__all__ = [
    'InvalidCurrencyError', 'InvalidStatusError', 'PayoutError',
    'Payout', 'PayoutStatus', 'Transaction',
]
