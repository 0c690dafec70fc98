# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sessionauth.domain.users.entities import AuthSession, User
from sessionauth.domain.users.exceptions import EmailAlreadyInUseError, PasswordMismatchError
from sessionauth.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository

from .issue_session import issue_session


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(
        self, fullname: str, email: str, password: str, confirm_password: str
    ) -> AuthSession:
        if password != confirm_password:
            raise PasswordMismatchError()
        if self._users.find_by_email(email) is not None:
            raise EmailAlreadyInUseError()
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            fullname=fullname,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        # the store's unique index still guards concurrent registrations
        persisted = self._users.add(user)
        return issue_session(persisted, self._tokens)
