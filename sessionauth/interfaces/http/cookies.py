# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Request, Response

from sessionauth.domain.users.entities import AuthSession, IssuedToken
from sessionauth.shared.config import load_config

ACCESS_COOKIE = "access_token"
REFRESH_COOKIE = "refresh_token"


def set_token_cookie(response: Response, name: str, issued: IssuedToken) -> None:
    """Store ``issued`` in an HTTP-only cookie that lapses with the token."""
    security = load_config().security
    response.set_cookie(
        name,
        issued.token,
        httponly=True,
        samesite=security.cookie_samesite,
        secure=security.cookie_secure,
        max_age=max(0, issued.claims.exp - int(time.time())),
    )


def set_session_cookies(response: Response, session: AuthSession) -> None:
    set_token_cookie(response, ACCESS_COOKIE, session.access)
    set_token_cookie(response, REFRESH_COOKIE, session.refresh)


def clear_session_cookies(response: Response) -> None:
    security = load_config().security
    for name in (ACCESS_COOKIE, REFRESH_COOKIE):
        response.delete_cookie(
            name,
            httponly=True,
            samesite=security.cookie_samesite,
            secure=security.cookie_secure,
        )


def access_token_from(req: Request) -> str:
    auth_header = req.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[7:]
    return req.cookies.get(ACCESS_COOKIE, "")


def refresh_token_from(req: Request) -> str:
    return req.cookies.get(REFRESH_COOKIE, "")
