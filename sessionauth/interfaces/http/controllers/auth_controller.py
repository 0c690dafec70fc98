# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from sessionauth.application.auth_flow import AuthFlow
from sessionauth.interfaces.http.auth_guard import auth_required
from sessionauth.interfaces.http.cookies import (
    ACCESS_COOKIE,
    clear_session_cookies,
    refresh_token_from,
    set_session_cookies,
    set_token_cookie,
)
from sessionauth.interfaces.http.dto.auth import (
    AuthUserResponseDTO,
    LoginRequestDTO,
    MessageDTO,
    RefreshResponseDTO,
    RegisterRequestDTO,
    UserDTO,
)
from sessionauth.shared.errors.validation import raise_validation_error
from sessionauth.shared.logging import logger


class AuthController:
    def __init__(self, *, auth_flow: AuthFlow) -> None:
        self._auth_flow = auth_flow

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        session = self._auth_flow.register(
            dto.fullname, dto.email, dto.password, dto.confirm_password
        ).unwrap()

        payload = AuthUserResponseDTO(user=UserDTO.from_entity(session.user)).model_dump()
        response = jsonify(payload)
        set_session_cookies(response, session)
        logger.info(f"auth.register: ok user_id={session.user.id}")
        return response, 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._auth_flow.login(dto.email, dto.password)
        if not result.ok:
            logger.info(f"auth.login: failed code={result.error.code}")
        session = result.unwrap()

        payload = AuthUserResponseDTO(user=UserDTO.from_entity(session.user)).model_dump()
        response = jsonify(payload)
        set_session_cookies(response, session)
        logger.info(f"auth.login: ok user_id={session.user.id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        message = self._auth_flow.logout().unwrap()
        response = jsonify(MessageDTO(message=message).model_dump())
        clear_session_cookies(response)
        logger.info("auth.logout: ok")
        return response, 200

    def refresh(self) -> tuple[Response, int]:
        access = self._auth_flow.refresh_token(refresh_token_from(request)).unwrap()

        response = jsonify(RefreshResponseDTO(access_token=access.token).model_dump())
        set_token_cookie(response, ACCESS_COOKIE, access)
        logger.info(f"auth.refresh: ok user_id={access.claims.sub}")
        return response, 200

    def me(self) -> tuple[Response, int]:
        payload = AuthUserResponseDTO(user=UserDTO.from_entity(g.user)).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/refresh", view_func=self.refresh, methods=["POST"])
        bp.add_url_rule(
            "/me",
            endpoint="me",
            view_func=auth_required(self._auth_flow)(self.me),
            methods=["GET"],
        )
        return bp
