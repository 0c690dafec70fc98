# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed access/refresh tokens backed by PyJWT.

The two kinds share a payload shape (``sub``, ``username``, ``iat``, ``exp``)
and differ only in secret and lifetime, so a token of one kind never verifies
as the other.
"""

from __future__ import annotations

import time
from typing import Any

import jwt

from sessionauth.domain.users.entities import IssuedToken, TokenClaims
from sessionauth.domain.users.exceptions import InvalidTokenError
from sessionauth.domain.users.repositories import TokenIssuer
from sessionauth.shared.config import TokenConfig
from sessionauth.shared.logging import logger

ACCESS = "access"
REFRESH = "refresh"

_REQUIRED_CLAIMS = ["exp", "iat", "sub"]

# user ids are positive 64-bit integers in the store
_MAX_SUBJECT = 2**63 - 1


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        *,
        access_secret: str,
        refresh_secret: str,
        access_ttl: int,
        refresh_ttl: int,
        algorithm: str = "HS256",
    ) -> None:
        if access_secret == refresh_secret:
            raise ValueError("access and refresh secrets must differ")
        self._secrets = {ACCESS: access_secret, REFRESH: refresh_secret}
        self._ttls = {ACCESS: access_ttl, REFRESH: refresh_ttl}
        self._algorithm = algorithm

    @classmethod
    def from_config(cls, config: TokenConfig) -> "JwtTokenIssuer":
        return cls(
            access_secret=config.access_secret,
            refresh_secret=config.refresh_secret,
            access_ttl=config.access_ttl,
            refresh_ttl=config.refresh_ttl,
            algorithm=config.algorithm,
        )

    def issue_access(self, user_id: int, username: str) -> IssuedToken:
        return self._issue(ACCESS, user_id, username)

    def issue_refresh(self, user_id: int, username: str) -> IssuedToken:
        return self._issue(REFRESH, user_id, username)

    def verify_access(self, token: str) -> TokenClaims:
        return self._verify(ACCESS, token)

    def verify_refresh(self, token: str) -> TokenClaims:
        return self._verify(REFRESH, token)

    def _issue(self, kind: str, user_id: int, username: str) -> IssuedToken:
        issued_at = int(time.time())
        claims = TokenClaims(sub=user_id, username=username, exp=issued_at + self._ttls[kind])
        payload: dict[str, Any] = {
            "sub": str(claims.sub),
            "username": claims.username,
            "iat": issued_at,
            "exp": claims.exp,
        }
        token = jwt.encode(payload, self._secrets[kind], algorithm=self._algorithm)
        logger.debug(f"tokens.issue: kind={kind} user={user_id} exp={claims.exp}")
        return IssuedToken(token=token, claims=claims)

    def _verify(self, kind: str, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secrets[kind],
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError as exc:
            logger.info(f"tokens.verify: {kind} token rejected ({type(exc).__name__})")
            raise InvalidTokenError(kind) from exc

        username = payload.get("username")
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as exc:
            logger.info(f"tokens.verify: {kind} token has malformed subject")
            raise InvalidTokenError(kind) from exc
        if not 0 < user_id <= _MAX_SUBJECT:
            logger.info(f"tokens.verify: {kind} token subject out of range")
            raise InvalidTokenError(kind)
        if not isinstance(username, str):
            logger.info(f"tokens.verify: {kind} token has no username")
            raise InvalidTokenError(kind)

        return TokenClaims(sub=user_id, username=username, exp=int(payload["exp"]))


__all__ = ["ACCESS", "REFRESH", "JwtTokenIssuer"]
