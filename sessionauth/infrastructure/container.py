# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sessionauth.application.auth_flow import AuthFlow
from sessionauth.application.services.password_hashing import WerkzeugPasswordHasher
from sessionauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from sessionauth.infrastructure.tokens import JwtTokenIssuer
from sessionauth.interfaces.http.controllers.auth_controller import AuthController
from sessionauth.interfaces.http.controllers.misc_controller import MiscController
from sessionauth.shared.config import load_config


class Container:
    def __init__(self) -> None:
        pass

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer.from_config(load_config().tokens)

    @cached_property
    def auth_flow(self) -> AuthFlow:
        return AuthFlow(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(auth_flow=self.auth_flow)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(auth_flow=self.auth_flow)


container = Container()
