# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .jwt_token_issuer import ACCESS, REFRESH, JwtTokenIssuer

__all__ = ["ACCESS", "REFRESH", "JwtTokenIssuer"]
