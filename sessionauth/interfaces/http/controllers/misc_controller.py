# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from sessionauth.application.auth_flow import AuthFlow
from sessionauth.infrastructure.health import check_database
from sessionauth.interfaces.http.dto.auth import MessageDTO


class MiscController:
    def __init__(self, *, auth_flow: AuthFlow) -> None:
        self._auth_flow = auth_flow

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/api/hello", view_func=self.hello, methods=["GET"])
        return bp

    def hello(self):
        return jsonify(MessageDTO(message=self._auth_flow.hello()).model_dump())

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database()
            status["database"] = "ok"
        except Exception as exc:  # pragma: no cover
            status["ok"] = False
            status["database"] = f"error: {exc}"
        return jsonify(status)
