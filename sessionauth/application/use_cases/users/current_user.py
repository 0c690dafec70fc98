# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.domain.users.entities import User
from sessionauth.domain.users.exceptions import AccessTokenMissingError, InvalidTokenError
from sessionauth.domain.users.repositories import TokenIssuer, UserRepository


class ResolveCurrentUserUseCase:
    def __init__(self, *, users: UserRepository, tokens: TokenIssuer) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, access_token: str | None) -> User:
        if not access_token:
            raise AccessTokenMissingError()
        claims = self._tokens.verify_access(access_token)
        user = self._users.find_by_id(claims.sub)
        if user is None:
            raise InvalidTokenError("access")
        return user
