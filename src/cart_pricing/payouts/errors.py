"""Payout errors, one type per failing operation."""


class PayoutError(Exception):
    """Base class for payout failures."""

    def __init__(self, message: str, payout_id: str):
        super().__init__(message)
        self.payout_id = payout_id


class InvalidCurrencyError(PayoutError):
    """Raised by add_transaction when the transaction currency differs from the payout's."""

    def __init__(self, payout_id: str, expected: str, actual: str):
        super().__init__(
            f"invalid currency: payout {payout_id} is in {expected}, transaction is in {actual}",
            payout_id=payout_id,
        )
        self.expected = expected
        self.actual = actual


class InvalidStatusError(PayoutError):
    """Raised by process when the payout is no longer pending."""

    def __init__(self, payout_id: str, status: str):
        super().__init__(
            f"invalid status: payout {payout_id} is {status}, expected pending",
            payout_id=payout_id,
        )
        self.status = status
