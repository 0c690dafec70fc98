from __future__ import annotations

import pytest
from conftest import DeterministicHasher, InMemoryUserRepository, make_issuer

from sessionauth.application.use_cases.users.current_user import ResolveCurrentUserUseCase
from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.logout_user import LogoutUserUseCase
from sessionauth.application.use_cases.users.refresh_token import RefreshAccessTokenUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.domain.users.exceptions import (
    AccessTokenMissingError,
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordMismatchError,
    RefreshTokenMissingError,
    UserNoLongerExistsError,
)
from sessionauth.infrastructure.tokens import JwtTokenIssuer
from sessionauth.shared.errors import AuthError, ConflictError, ValidationError


def _register(
    users: InMemoryUserRepository, hasher: DeterministicHasher, issuer: JwtTokenIssuer
) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=issuer, password_hasher=hasher)


def test_register_user_success(users, hasher, issuer) -> None:
    session = _register(users, hasher, issuer).execute(
        "Alice Liddell", "alice@example.com", "secret123", "secret123"
    )

    assert session.user.email == "alice@example.com"
    assert session.user.password_hash == "hashed:secret123"
    assert users.find_by_email("alice@example.com") == session.user
    assert issuer.verify_access(session.access.token).sub == session.user.id
    assert issuer.verify_refresh(session.refresh.token).username == "Alice Liddell"


def test_register_password_mismatch_never_touches_store(users, hasher, issuer) -> None:
    with pytest.raises(PasswordMismatchError) as exc_info:
        _register(users, hasher, issuer).execute(
            "Alice", "alice@example.com", "secret123", "secret124"
        )

    assert isinstance(exc_info.value, ValidationError)
    assert exc_info.value.context == {
        "confirmPassword": "Password and confirmPassword does not match"
    }
    assert users.writes == 0
    assert users.find_by_email("alice@example.com") is None


def test_register_user_duplicate_raises(users, hasher, issuer) -> None:
    use_case = _register(users, hasher, issuer)
    use_case.execute("Alice", "alice@example.com", "secret123", "secret123")

    with pytest.raises(EmailAlreadyInUseError) as exc_info:
        use_case.execute("Other Alice", "alice@example.com", "other123", "other123")

    assert isinstance(exc_info.value, ConflictError)
    assert users.writes == 1


def test_register_duplicate_detected_by_store(hasher, issuer) -> None:
    class RacingRepository(InMemoryUserRepository):
        # The pre-check misses a concurrent insert; only the store sees it.
        def find_by_email(self, email):
            return None

    users = RacingRepository()
    use_case = _register(users, hasher, issuer)
    use_case.execute("Alice", "alice@example.com", "secret123", "secret123")

    with pytest.raises(ConflictError):
        use_case.execute("Alice", "alice@example.com", "secret123", "secret123")


def test_login_user_success(users, hasher, issuer) -> None:
    registered = _register(users, hasher, issuer).execute(
        "Alice", "alice@example.com", "secret123", "secret123"
    )

    login = LoginUserUseCase(users=users, tokens=issuer, password_hasher=hasher)
    session = login.execute("alice@example.com", "secret123")

    assert session.user.email == "alice@example.com"
    assert session.user.id == registered.user.id
    assert issuer.verify_access(session.access.token).sub == registered.user.id


def test_login_user_invalid_credentials(users, hasher, issuer) -> None:
    _register(users, hasher, issuer).execute(
        "Alice", "alice@example.com", "secret123", "secret123"
    )
    writes_before = users.writes

    login = LoginUserUseCase(users=users, tokens=issuer, password_hasher=hasher)
    with pytest.raises(InvalidCredentialsError) as exc_info:
        login.execute("alice@example.com", "wrong")

    assert isinstance(exc_info.value, AuthError)
    assert str(exc_info.value) == "Invalid credentials"
    assert users.writes == writes_before


def test_login_unknown_email_is_indistinguishable(users, hasher, issuer) -> None:
    login = LoginUserUseCase(users=users, tokens=issuer, password_hasher=hasher)

    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody@example.com", "secret123")


def test_logout_always_succeeds() -> None:
    assert LogoutUserUseCase().execute() == "User is logged out"


def test_refresh_issues_new_access_token(users, hasher, issuer) -> None:
    session = _register(users, hasher, issuer).execute(
        "Alice", "alice@example.com", "secret123", "secret123"
    )

    refresh = RefreshAccessTokenUseCase(users=users, tokens=issuer)
    access = refresh.execute(session.refresh.token)

    claims = issuer.verify_access(access.token)
    assert claims.sub == session.user.id
    assert claims.username == "Alice"


@pytest.mark.parametrize("presented", [None, ""])
def test_refresh_without_token_raises(users, issuer, presented) -> None:
    refresh = RefreshAccessTokenUseCase(users=users, tokens=issuer)

    with pytest.raises(RefreshTokenMissingError):
        refresh.execute(presented)


def test_refresh_with_tampered_token_raises(users, hasher, issuer) -> None:
    session = _register(users, hasher, issuer).execute(
        "Alice", "alice@example.com", "secret123", "secret123"
    )
    header, payload, signature = session.refresh.token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    refresh = RefreshAccessTokenUseCase(users=users, tokens=issuer)
    with pytest.raises(InvalidTokenError):
        refresh.execute(tampered)


def test_refresh_with_expired_token_raises(users) -> None:
    expired_issuer = make_issuer(refresh_ttl=-60)
    user = users.seed(7, "alice@example.com")
    token = expired_issuer.issue_refresh(user.id, user.fullname).token

    refresh = RefreshAccessTokenUseCase(users=users, tokens=expired_issuer)
    with pytest.raises(AuthError):
        refresh.execute(token)


def test_refresh_rejects_access_token(users, hasher, issuer) -> None:
    session = _register(users, hasher, issuer).execute(
        "Alice", "alice@example.com", "secret123", "secret123"
    )

    refresh = RefreshAccessTokenUseCase(users=users, tokens=issuer)
    with pytest.raises(InvalidTokenError):
        refresh.execute(session.access.token)


def test_refresh_for_deleted_user_raises_validation(users, hasher, issuer) -> None:
    session = _register(users, hasher, issuer).execute(
        "Alice", "alice@example.com", "secret123", "secret123"
    )
    users.delete(session.user.id)

    refresh = RefreshAccessTokenUseCase(users=users, tokens=issuer)
    with pytest.raises(UserNoLongerExistsError) as exc_info:
        refresh.execute(session.refresh.token)

    assert isinstance(exc_info.value, ValidationError)


def test_current_user_resolves_access_token(users, hasher, issuer) -> None:
    session = _register(users, hasher, issuer).execute(
        "Alice", "alice@example.com", "secret123", "secret123"
    )

    resolve = ResolveCurrentUserUseCase(users=users, tokens=issuer)

    assert resolve.execute(session.access.token) == session.user
    with pytest.raises(AccessTokenMissingError):
        resolve.execute("")
    with pytest.raises(InvalidTokenError):
        resolve.execute(session.refresh.token)
