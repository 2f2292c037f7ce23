# fittrack/repositories/user_repo.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError

from fittrack.errors import DuplicateIdentity
from fittrack.models import User
from fittrack.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get_by_email(self, email: str) -> Optional[User]:
        # Exact, case-sensitive match
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    def identity_taken(self, *, username: str, email: str) -> bool:
        stmt = select(User.id).where(or_(User.email == email, User.username == username)).limit(1)
        return self.db.execute(stmt).first() is not None

    # WRITES
    def create(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            is_active=True,
        )
        try:
            return self.add_and_refresh(user)
        except IntegrityError:
            # Lost a race against a concurrent registration
            self.db.rollback()
            raise DuplicateIdentity()

    def touch_last_login(self, user: User) -> User:
        user.last_login = datetime.now(timezone.utc)
        self.db.flush()
        return user
