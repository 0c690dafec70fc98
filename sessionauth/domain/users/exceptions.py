# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.shared.errors.base import AuthError, ConflictError, ValidationError


class PasswordMismatchError(ValidationError):
    code = "password_mismatch"
    message = "Password and confirmPassword does not match"

    def __init__(self) -> None:
        super().__init__(context={"confirmPassword": self.message})


class UserNoLongerExistsError(ValidationError):
    code = "user_not_found"
    message = "User does not exist"


class EmailAlreadyInUseError(ConflictError):
    code = "email_in_use"
    message = "The email is already in use, try another"


class InvalidCredentialsError(AuthError):
    code = "invalid_credentials"
    message = "Invalid credentials"


class RefreshTokenMissingError(AuthError):
    code = "refresh_token_missing"
    message = "Refresh token does not exist"


class AccessTokenMissingError(AuthError):
    code = "access_token_missing"
    message = "Access token does not exist"


class InvalidTokenError(AuthError):
    code = "invalid_token"

    def __init__(self, kind: str) -> None:
        super().__init__(
            message=f"Invalid or expired {kind} token",
            context={"token": kind},
        )
