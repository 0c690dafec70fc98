# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.domain.users.entities import AuthSession, User
from sessionauth.domain.users.repositories import TokenIssuer


def issue_session(user: User, tokens: TokenIssuer) -> AuthSession:
    """Sign a fresh access/refresh pair for ``user``."""
    return AuthSession(
        user=user,
        access=tokens.issue_access(user.id, user.fullname),
        refresh=tokens.issue_refresh(user.id, user.fullname),
    )
