"""Use-case for ending a client-held session."""

from __future__ import annotations

LOGGED_OUT_MESSAGE = "User is logged out"


class LogoutUserUseCase:
    # Tokens are stateless; the transport drops both cookies.
    def execute(self) -> str:
        return LOGGED_OUT_MESSAGE
