# fittrack/services/account.py
"""Registration, login and profile maintenance."""
from __future__ import annotations
import logging
from typing import Any, Mapping

from sqlalchemy.orm import Session

from fittrack.db import transaction
from fittrack.errors import AccountDisabled, DuplicateIdentity, InvalidCredentials, NotFound
from fittrack.models import User
from fittrack.repositories.user_repo import UserRepository
from fittrack.security import hash_password, verify_password

log = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "profile_image")


class AccountService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def get_user(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if not user:
            raise NotFound("User not found")
        return user

    def register(
        self,
        *,
        username: str,
        email: str,
        password: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        if self.users.identity_taken(username=username, email=email):
            raise DuplicateIdentity()
        with transaction(self.db):
            user = self.users.create(
                username=username,
                email=email,
                password_hash=hash_password(password),
                first_name=first_name,
                last_name=last_name,
            )
        log.info("registered user id=%s username=%s", user.id, username)
        return user

    def authenticate(self, *, email: str, password: str) -> User:
        user = self.users.get_by_email(email)
        # Unknown email and wrong password are reported identically
        if not user or not verify_password(password, user.password_hash):
            log.info("failed login for email=%s", email)
            raise InvalidCredentials()
        if not user.is_active:
            raise AccountDisabled()
        with transaction(self.db):
            self.users.touch_last_login(user)
        self.db.refresh(user)
        return user

    def update_profile(self, user_id: int, fields: Mapping[str, Any]) -> User:
        """Overwrite all profile fields; anything not in `fields` becomes null."""
        with transaction(self.db):
            user = self.get_user(user_id)
            for name in PROFILE_FIELDS:
                setattr(user, name, fields.get(name))
        self.db.refresh(user)
        return user

    def change_password(self, user_id: int, *, current_password: str, new_password: str) -> None:
        with transaction(self.db):
            user = self.get_user(user_id)
            if not verify_password(current_password, user.password_hash):
                raise InvalidCredentials("Current password is incorrect")
            user.password_hash = hash_password(new_password)
        log.info("password changed for user id=%s", user_id)

    def deactivate(self, user_id: int) -> User:
        return self._set_active(user_id, False)

    def reactivate(self, user_id: int) -> User:
        return self._set_active(user_id, True)

    def _set_active(self, user_id: int, active: bool) -> User:
        with transaction(self.db):
            user = self.get_user(user_id)
            user.is_active = active
        log.info("user id=%s is_active=%s", user_id, active)
        self.db.refresh(user)
        return user
