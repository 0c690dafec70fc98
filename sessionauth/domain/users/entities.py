# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    fullname: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class TokenClaims:

    sub: int
    username: str
    exp: int


@dataclass(slots=True, frozen=True)
class IssuedToken:

    token: str
    claims: TokenClaims


@dataclass(slots=True, frozen=True)
class AuthSession:

    user: User
    access: IssuedToken
    refresh: IssuedToken
