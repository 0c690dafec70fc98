# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import AuthSession, IssuedToken, TokenClaims, User

__all__ = ["AuthSession", "IssuedToken", "TokenClaims", "User"]
