"""Membership upgrade via a simulated payment.

The flow is a stateless two-step handoff:

1. ``simulate_payment`` checks the amount and returns an upgrade token
   ``UPGRADE_{id_user}_{unix_seconds}_{4 digit nonce}``.
2. ``redeem_upgrade`` accepts any token with that shape and promotes the
   caller to premium.

Tokens are not persisted, so they are replayable and not bound to the user
who obtained them. A real gateway replaces ``PaymentSimulator`` without
touching the endpoints.
"""

import logging
import re
import secrets
import time
from typing import Optional

from sqlalchemy.orm import Session

from portal_berita.config import settings
from portal_berita.core.exceptions import ValidationError
from portal_berita.crud import crud_user
from portal_berita.models.enums import Membership
from portal_berita.models.user import User
from portal_berita.services.notification_service import notification_service

logger = logging.getLogger(__name__)


class PaymentSimulator:
    """Issues and checks upgrade tokens purely by their format."""

    TOKEN_PATTERN = re.compile(r"UPGRADE_[0-9]+_[0-9]{10}_[0-9]{4}")

    def issue_token(self, id_user: int) -> str:
        nonce = 1000 + secrets.randbelow(9000)
        return f"UPGRADE_{id_user}_{int(time.time())}_{nonce}"

    def is_valid_token(self, token: str) -> bool:
        return self.TOKEN_PATTERN.fullmatch(token) is not None


class MembershipService:
    def __init__(self, gateway: Optional[PaymentSimulator] = None):
        self.gateway = gateway or PaymentSimulator()

    def simulate_payment(self, *, user: User, amount: float) -> str:
        """
        Raises:
            ValidationError: amount below the configured minimum
        """
        if amount < settings.MIN_UPGRADE_AMOUNT:
            raise ValidationError({
                "amount": [f"Nominal pembayaran minimal {settings.MIN_UPGRADE_AMOUNT}"]
            })

        token = self.gateway.issue_token(user.id_user)
        logger.info(f"[MEMBERSHIP] Simulated payment of {amount} for user={user.id_user}")
        return token

    def redeem_upgrade(self, db: Session, *, user: User, token: str) -> User:
        """
        Raises:
            ValidationError: malformed token, or caller already premium
        """
        if not self.gateway.is_valid_token(token):
            raise ValidationError({
                "token": [
                    "Token upgrade tidak valid. Pastikan Anda telah melakukan transaksi "
                    "pembayaran terlebih dahulu di endpoint /transaction."
                ]
            })

        if user.membership == Membership.PREMIUM.value:
            raise ValidationError({"membership": ["User sudah memiliki membership premium"]})

        user = crud_user.set_membership(db, db_obj=user, membership=Membership.PREMIUM.value)
        notification_service.notify_membership_upgraded(db, user=user)
        logger.info(f"[MEMBERSHIP] User {user.id_user} upgraded to premium")
        return user


# Singleton instance
membership_service = MembershipService()
