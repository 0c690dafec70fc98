# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import IssuedToken, TokenClaims, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue_access(self, user_id: int, username: str) -> IssuedToken: ...
    def issue_refresh(self, user_id: int, username: str) -> IssuedToken: ...
    def verify_access(self, token: str) -> TokenClaims: ...
    def verify_refresh(self, token: str) -> TokenClaims: ...
