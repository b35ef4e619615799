"""User profile management."""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portal_berita.core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from portal_berita.core.security import verify_password
from portal_berita.crud import crud_user
from portal_berita.models.user import User
from portal_berita.schemas.user import UserUpdate
from portal_berita.services.auth_service import uniqueness_errors

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "User tidak ditemukan"


class UserService:
    def list_users(self, db: Session) -> List[User]:
        return crud_user.get_multi(db)

    def get_user(self, db: Session, id_user: int) -> User:
        user = crud_user.get(db, id_user)
        if user is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return user

    def _ensure_self_or_admin(self, actor: User, id_user: int) -> None:
        if actor.id_user != id_user and not actor.is_admin:
            raise ForbiddenError("Anda tidak memiliki akses ke user ini")

    def update_user(self, db: Session, *, actor: User, id_user: int, user_in: UserUpdate) -> User:
        """
        Partial profile update. Changing the password requires the old one.

        Raises:
            ForbiddenError: actor is neither the user nor an admin
            NotFoundError: user does not exist
            ValidationError: username/email taken, or new_password without old_password
            ConflictError: old_password does not match
        """
        self._ensure_self_or_admin(actor, id_user)
        user = self.get_user(db, id_user)

        errors = uniqueness_errors(
            db, username=user_in.username, email=user_in.email, exclude_id=user.id_user
        )
        if user_in.new_password is not None and user_in.old_password is None:
            errors["old_password"] = ["Password lama wajib diisi untuk mengganti password"]
        if errors:
            raise ValidationError(errors)

        if user_in.new_password is not None:
            if not verify_password(user_in.old_password, user.password_hash):
                raise ConflictError("Password lama salah")
            crud_user.set_password(user, user_in.new_password)

        changes = user_in.model_dump(exclude_unset=True, exclude_none=True, include={"username", "name", "email"})
        try:
            user = crud_user.update(db, db_obj=user, obj_in=changes)
        except IntegrityError:
            logger.warning(f"[USER] Update of user={id_user} rejected by unique constraint")
            raise ValidationError({"email": ["Username atau email sudah terdaftar"]})

        logger.info(f"[USER] Updated user id={user.id_user} by actor={actor.id_user}")
        return user

    def delete_user(self, db: Session, *, actor: User, id_user: int) -> None:
        self._ensure_self_or_admin(actor, id_user)
        self.get_user(db, id_user)
        crud_user.delete(db, id=id_user)
        logger.info(f"[USER] Deleted user id={id_user} by actor={actor.id_user}")


# Singleton instance
user_service = UserService()
