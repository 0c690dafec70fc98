# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.domain.users.entities import IssuedToken
from sessionauth.domain.users.exceptions import RefreshTokenMissingError, UserNoLongerExistsError
from sessionauth.domain.users.repositories import TokenIssuer, UserRepository


class RefreshAccessTokenUseCase:
    """Mint a new access token from a verified refresh token."""

    def __init__(self, *, users: UserRepository, tokens: TokenIssuer) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, refresh_token: str | None) -> IssuedToken:
        if not refresh_token:
            raise RefreshTokenMissingError()
        claims = self._tokens.verify_refresh(refresh_token)
        user = self._users.find_by_id(claims.sub)
        if user is None:
            raise UserNoLongerExistsError()
        return self._tokens.issue_access(claims.sub, claims.username)
