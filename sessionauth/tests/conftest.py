from __future__ import annotations

import os
import tempfile
from datetime import UTC, datetime

import pytest

# Settings and the engine are read at import time; point them at a scratch dir first.
_SCRATCH = tempfile.mkdtemp(prefix="sessionauth-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_SCRATCH, 'test.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_SCRATCH, "test.log"))
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-secret-0123456789abcdef0123")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret-0123456789abcdef012")
os.environ.setdefault("APP_ENV", "test")

from sessionauth.domain.users.entities import User  # noqa: E402
from sessionauth.domain.users.exceptions import EmailAlreadyInUseError  # noqa: E402
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402
from sessionauth.infrastructure.tokens import JwtTokenIssuer  # noqa: E402


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._by_email: dict[str, User] = {}
        self._seq = 1
        self.writes = 0

    def find_by_email(self, email: str) -> User | None:
        return self._by_email.get(email)

    def find_by_id(self, user_id: int) -> User | None:
        for user in self._by_email.values():
            if user.id == user_id:
                return user
        return None

    def add(self, user: User) -> User:
        self.writes += 1
        if user.email in self._by_email:
            raise EmailAlreadyInUseError()
        new_user = User(
            id=self._seq,
            fullname=user.fullname,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._by_email[new_user.email] = new_user
        return new_user

    def delete(self, user_id: int) -> None:
        for email, user in list(self._by_email.items()):
            if user.id == user_id:
                self._by_email.pop(email)

    def seed(self, user_id: int, email: str) -> User:
        user = User(
            id=user_id,
            fullname="Seeded",
            email=email,
            password_hash="hashed:irrelevant",
            created_at=datetime.now(UTC),
        )
        self._by_email[email] = user
        return user


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


ACCESS_SECRET = "unit-access-secret-0123456789abcdef01234"
REFRESH_SECRET = "unit-refresh-secret-0123456789abcdef0123"


def make_issuer(*, access_ttl: int = 900, refresh_ttl: int = 3600) -> JwtTokenIssuer:
    return JwtTokenIssuer(
        access_secret=ACCESS_SECRET,
        refresh_secret=REFRESH_SECRET,
        access_ttl=access_ttl,
        refresh_ttl=refresh_ttl,
    )


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def issuer() -> JwtTokenIssuer:
    return make_issuer()
