"""Simulated payment and premium upgrade endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portal_berita.api.deps import get_current_user, get_db
from portal_berita.models.user import User
from portal_berita.schemas.membership import (
    TransactionRequest,
    TransactionResponse,
    TransactionToken,
    UpgradeData,
    UpgradeRequest,
    UpgradeResponse,
)
from portal_berita.services.membership_service import membership_service

router = APIRouter(tags=["Membership"])


@router.post(
    "/transaction",
    response_model=TransactionResponse,
    status_code=status.HTTP_200_OK,
    summary="Simulate a payment",
    responses={
        401: {"description": "Not authenticated"},
        422: {"description": "Amount below the minimum"},
    },
)
def create_transaction(
    transaction_in: TransactionRequest,
    current_user: User = Depends(get_current_user),
) -> TransactionResponse:
    """
    Simulated payment. No money moves; the returned token is what
    `/upgrade` expects.
    """
    token = membership_service.simulate_payment(user=current_user, amount=transaction_in.amount)
    return TransactionResponse(data=TransactionToken(token=token))


@router.post(
    "/upgrade",
    response_model=UpgradeResponse,
    status_code=status.HTTP_200_OK,
    summary="Upgrade membership to premium",
    responses={
        401: {"description": "Not authenticated"},
        422: {"description": "Malformed token or already premium"},
    },
)
def upgrade_membership(
    upgrade_in: UpgradeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UpgradeResponse:
    user = membership_service.redeem_upgrade(db, user=current_user, token=upgrade_in.token)
    return UpgradeResponse(data=UpgradeData(id_user=user.id_user, membership=user.membership))
