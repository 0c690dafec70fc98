# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Orchestrates the session lifecycle over injected collaborators.

Every operation returns a :class:`~sessionauth.shared.result.Result`:
``Ok`` with the value, or ``Err`` carrying a ``ValidationError``,
``ConflictError`` or ``AuthError``.
"""

from __future__ import annotations

from sessionauth.application.use_cases.users.current_user import ResolveCurrentUserUseCase
from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.logout_user import LogoutUserUseCase
from sessionauth.application.use_cases.users.refresh_token import RefreshAccessTokenUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.domain.users.entities import AuthSession, IssuedToken, User
from sessionauth.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from sessionauth.shared.logging import logger
from sessionauth.shared.result import Result, capture

HELLO_MESSAGE = "Hello"


class AuthFlow:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._register = RegisterUserUseCase(
            users=users, tokens=tokens, password_hasher=password_hasher
        )
        self._login = LoginUserUseCase(
            users=users, tokens=tokens, password_hasher=password_hasher
        )
        self._logout = LogoutUserUseCase()
        self._refresh = RefreshAccessTokenUseCase(users=users, tokens=tokens)
        self._current_user = ResolveCurrentUserUseCase(users=users, tokens=tokens)

    def register(
        self, fullname: str, email: str, password: str, confirm_password: str
    ) -> Result[AuthSession]:
        result = capture(self._register.execute, fullname, email, password, confirm_password)
        if not result.ok:
            logger.debug(f"auth_flow.register: rejected code={result.error.code}")
        return result

    def login(self, email: str, password: str) -> Result[AuthSession]:
        result = capture(self._login.execute, email, password)
        if not result.ok:
            logger.debug(f"auth_flow.login: rejected code={result.error.code}")
        return result

    def logout(self) -> Result[str]:
        return capture(self._logout.execute)

    def refresh_token(self, presented_refresh_token: str | None) -> Result[IssuedToken]:
        result = capture(self._refresh.execute, presented_refresh_token)
        if not result.ok:
            logger.debug(f"auth_flow.refresh: rejected code={result.error.code}")
        return result

    def current_user(self, access_token: str | None) -> Result[User]:
        return capture(self._current_user.execute, access_token)

    def hello(self) -> str:
        return HELLO_MESSAGE
