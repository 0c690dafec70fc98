# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.domain.users.entities import AuthSession
from sessionauth.domain.users.exceptions import InvalidCredentialsError
from sessionauth.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository

from .issue_session import issue_session


class LoginUserUseCase:
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

    def execute(self, email: str, password: str) -> AuthSession:
        user = self._users.find_by_email(email)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()
        return issue_session(user, self._tokens)
