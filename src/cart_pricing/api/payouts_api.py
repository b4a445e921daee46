"""
Payouts API - FastAPI router for payout aggregation.
"""
from datetime import datetime
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Optional

from ..payouts import InvalidCurrencyError, InvalidStatusError, Payout, Transaction
from .state import payouts

router = APIRouter(prefix="/payouts", tags=["payouts"])


# Pydantic models for API
class PayoutCreate(BaseModel):
    """Request model for opening a payout."""
    payout_id: str
    currency: str


class TransactionCreate(BaseModel):
    """Request model for adding a transaction."""
    transaction_id: str
    amount: float
    currency: str
    created_at: Optional[datetime] = None


def _get_payout(payout_id: str) -> Payout:
    payout = payouts.get(payout_id)
    if payout is None:
        raise HTTPException(status_code=404, detail=f"Payout not found: {payout_id}")
    return payout


@router.post("", status_code=201)
async def create_payout(req: PayoutCreate):
    if req.payout_id in payouts:
        raise HTTPException(status_code=409, detail=f"Payout already exists: {req.payout_id}")
    payout = Payout.create(req.payout_id, req.currency)
    payouts[payout.payout_id] = payout
    return payout.to_dict()


@router.get("/{payout_id}")
async def get_payout(payout_id: str):
    return _get_payout(payout_id).to_dict()


@router.post("/{payout_id}/transactions")
async def add_transaction(payout_id: str, req: TransactionCreate):
    payout = _get_payout(payout_id)
    if req.created_at is not None:
        transaction = Transaction(req.transaction_id, req.amount, req.currency, req.created_at)
    else:
        transaction = Transaction(req.transaction_id, req.amount, req.currency)
    try:
        payout.add_transaction(transaction)
    except InvalidCurrencyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return payout.to_dict()


@router.post("/{payout_id}/process")
async def process_payout(payout_id: str):
    payout = _get_payout(payout_id)
    try:
        payout.process()
    except InvalidStatusError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return payout.to_dict()
