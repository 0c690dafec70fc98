# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC

from sqlalchemy.exc import IntegrityError

from sessionauth.domain.users.entities import User as DomainUser
from sessionauth.domain.users.exceptions import EmailAlreadyInUseError
from sessionauth.domain.users.repositories import UserRepository
from sessionauth.infrastructure.db.models import User
from sessionauth.infrastructure.db.session import session_scope


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at
    # SQLite drops tzinfo on the way back
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        fullname=row.fullname,
        email=row.email,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.email == email).first()
            if not row:
                return None
            return _to_domain(row)

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    fullname=user.fullname,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            raise EmailAlreadyInUseError() from exc
