"""CRUD operations for `User` model."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from portal_berita.core.security import get_password_hash, verify_password
from portal_berita.crud.base import CRUDBase
from portal_berita.models.user import User
from portal_berita.schemas.user import RegisterRequest, UserUpdate


class CRUDUser(CRUDBase[User, RegisterRequest, UserUpdate]):
    def get_by_email(self, db: Session, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        stmt = select(User).where(User.email == email.lower()).limit(1)
        return db.scalars(stmt).first()

    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        # Username case-sensitive: "Budi" dan "budi" adalah dua user berbeda
        stmt = select(User).where(User.username == username).limit(1)
        return db.scalars(stmt).first()

    def get_by_email_and_role(self, db: Session, *, email: str, role: str) -> Optional[User]:
        stmt = (
            select(User)
            .where(User.email == email.lower(), User.role == role)
            .limit(1)
        )
        return db.scalars(stmt).first()

    def create_user(self, db: Session, *, user_in: RegisterRequest, role: Optional[str] = None) -> User:
        """Create a user in a single transaction; nothing is persisted on failure."""
        user_data = user_in.model_dump(exclude={"password", "password_confirmation"})
        user_data["password_hash"] = get_password_hash(user_in.password)
        user_data["email"] = user_data["email"].lower()
        if role is not None:
            user_data["role"] = role

        db_obj = User(**user_data)
        try:
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        except Exception:
            db.rollback()
            raise
        return db_obj

    def authenticate(self, db: Session, *, email: str, password: str, role: str) -> Optional[User]:
        """Return the user matching (email, role) whose password verifies, else None."""
        user = self.get_by_email_and_role(db, email=email, role=role)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def set_password(self, db_obj: User, new_password: str) -> None:
        """Set a new password hash on the instance; caller commits."""
        db_obj.password_hash = get_password_hash(new_password)

    def set_membership(self, db: Session, *, db_obj: User, membership: str) -> User:
        db_obj.membership = membership
        try:
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        except Exception:
            db.rollback()
            raise
        return db_obj

    def get_by_role(self, db: Session, *, role: str) -> List[User]:
        stmt = select(User).where(User.role == role).order_by(User.id_user)
        return list(db.scalars(stmt).all())


# Singleton instance
crud_user = CRUDUser(User)
