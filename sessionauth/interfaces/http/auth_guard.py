# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import g, request

from sessionauth.application.auth_flow import AuthFlow
from sessionauth.shared.logging import logger

from .cookies import access_token_from


def auth_required(flow: AuthFlow) -> Callable:
    """Reject the request with 401 unless it carries a valid access token.

    The resolved user is stored on ``g.user`` and its id on ``g.user_id``.
    """

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*args, **kwargs):
            result = flow.current_user(access_token_from(request))
            if not result.ok:
                logger.warning(
                    f"Auth failed ({result.error.code}) on {request.method} {request.path}"
                )
                result.unwrap()
            g.user = result.value
            g.user_id = result.value.id
            logger.debug(f"Auth OK: user={g.user_id} {request.method} {request.path}")
            return f(*args, **kwargs)

        return inner

    return decorator
