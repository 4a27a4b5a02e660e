"""Unit tests for app.services.authentication: ordered checks, result kinds, last-login touch."""

import unittest
from unittest.mock import MagicMock

from app.core.security import hash_password
from app.models import UserAccount
from app.services.authentication import (
    ALLOWED_ROLES,
    AuthError,
    AuthenticationService,
    normalize_username,
)
from app.services.user_store import StoreUnavailableError

# Low bcrypt cost keeps the suite fast; verification reads the cost from the hash.
TEST_ROUNDS = 4
SECRET_HASH = hash_password("secret123", rounds=TEST_ROUNDS)


def _account(
    username: str = "JUANP",
    password_hash: str = SECRET_HASH,
    role: str = "Director",
    active: bool | None = True,
    id: int = 7,
) -> UserAccount:
    """Build a transient UserAccount for tests."""
    return UserAccount(
        id=id,
        username=username,
        password_hash=password_hash,
        role=role,
        active=active,
    )


def _service(account: UserAccount | None = None) -> tuple[AuthenticationService, MagicMock]:
    store = MagicMock()
    store.find_user_by_username.return_value = account
    return AuthenticationService(store), store


class TestNormalizeUsername(unittest.TestCase):
    """normalize_username upper-cases and trims."""

    def test_variants_share_one_key(self) -> None:
        for raw in ("director1", "DIRECTOR1", " director1 ", "\tDirector1\n"):
            self.assertEqual(normalize_username(raw), "DIRECTOR1")


class TestMissingCredentials(unittest.TestCase):
    """Absent or empty inputs fail before any store access."""

    def test_missing_fields(self) -> None:
        for username, password in (
            (None, "secret123"),
            ("juanp", None),
            ("", "secret123"),
            ("juanp", ""),
            (None, None),
        ):
            service, store = _service(_account())
            result = service.authenticate(username, password)
            self.assertFalse(result.ok)
            self.assertEqual(result.error, AuthError.MISSING_CREDENTIALS)
            store.find_user_by_username.assert_not_called()
            store.touch_last_login.assert_not_called()

    def test_repeated_call_gives_same_outcome(self) -> None:
        service, store = _service(_account())
        first = service.authenticate("juanp", "")
        second = service.authenticate("juanp", "")
        self.assertEqual(first, second)
        store.find_user_by_username.assert_not_called()


class TestLookup(unittest.TestCase):
    """Lookup uses the normalized username; unknown users look like bad passwords."""

    def test_lookup_key_is_normalized(self) -> None:
        for raw in ("director1", "DIRECTOR1", " director1 "):
            service, store = _service(None)
            service.authenticate(raw, "x")
            store.find_user_by_username.assert_called_once_with("DIRECTOR1")

    def test_unknown_user_is_invalid_credentials(self) -> None:
        service, store = _service(None)
        result = service.authenticate("ghost", "x")
        self.assertEqual(result.error, AuthError.INVALID_CREDENTIALS)
        self.assertIsNone(result.user)
        store.touch_last_login.assert_not_called()

    def test_unknown_user_matches_wrong_password(self) -> None:
        unknown, _ = _service(None)
        known, _ = _service(_account())
        self.assertEqual(
            unknown.authenticate("ghost", "x").error,
            known.authenticate("juanp", "wrong").error,
        )

    def test_repeated_invalid_credentials_give_same_outcome(self) -> None:
        for account, username, password in (
            (None, "ghost", "x"),
            (_account(), "juanp", "wrong"),
        ):
            service, store = _service(account)
            first = service.authenticate(username, password)
            second = service.authenticate(username, password)
            self.assertEqual(first, second)
            self.assertEqual(first.error, AuthError.INVALID_CREDENTIALS)
            self.assertEqual(store.find_user_by_username.call_count, 2)
            store.touch_last_login.assert_not_called()

    def test_store_failure_is_store_unavailable(self) -> None:
        service, store = _service()
        store.find_user_by_username.side_effect = StoreUnavailableError("User lookup failed.")
        with self.assertLogs("app.services.authentication", level="ERROR"):
            result = service.authenticate("juanp", "secret123")
        self.assertEqual(result.error, AuthError.STORE_UNAVAILABLE)
        store.touch_last_login.assert_not_called()


class TestInactiveAccount(unittest.TestCase):
    """Inactive accounts fail with INACTIVE_ACCOUNT whatever the password."""

    def test_correct_password(self) -> None:
        service, store = _service(_account(active=False))
        result = service.authenticate("juanp", "secret123")
        self.assertEqual(result.error, AuthError.INACTIVE_ACCOUNT)
        store.touch_last_login.assert_not_called()

    def test_wrong_password(self) -> None:
        service, _ = _service(_account(active=False))
        self.assertEqual(
            service.authenticate("juanp", "wrong").error, AuthError.INACTIVE_ACCOUNT
        )

    def test_null_active_flag_is_inactive(self) -> None:
        service, _ = _service(_account(active=None))
        self.assertEqual(
            service.authenticate("juanp", "secret123").error, AuthError.INACTIVE_ACCOUNT
        )


class TestPasswordCheck(unittest.TestCase):
    """Password verification against the trimmed stored hash."""

    def test_wrong_password(self) -> None:
        service, store = _service(_account())
        result = service.authenticate("juanp", "wrong")
        self.assertEqual(result.error, AuthError.INVALID_CREDENTIALS)
        store.touch_last_login.assert_not_called()

    def test_hash_with_surrounding_whitespace_verifies(self) -> None:
        service, _ = _service(_account(password_hash=f"  {SECRET_HASH} \n"))
        result = service.authenticate("juanp", "secret123")
        self.assertTrue(result.ok)

    def test_malformed_hash_is_invalid_credentials(self) -> None:
        service, _ = _service(_account(password_hash="not-a-bcrypt-hash"))
        self.assertEqual(
            service.authenticate("juanp", "secret123").error, AuthError.INVALID_CREDENTIALS
        )


class TestRoleCheck(unittest.TestCase):
    """Only the fixed role set may log in."""

    def test_unknown_role(self) -> None:
        service, store = _service(_account(role="Admin"))
        result = service.authenticate("juanp", "secret123")
        self.assertEqual(result.error, AuthError.UNAUTHORIZED_ROLE)
        store.touch_last_login.assert_not_called()

    def test_role_match_is_case_sensitive(self) -> None:
        service, _ = _service(_account(role="director"))
        self.assertEqual(
            service.authenticate("juanp", "secret123").error, AuthError.UNAUTHORIZED_ROLE
        )

    def test_every_allowed_role_succeeds_and_is_trimmed(self) -> None:
        for role in ALLOWED_ROLES:
            service, _ = _service(_account(role=f" {role} "))
            result = service.authenticate("juanp", "secret123")
            self.assertTrue(result.ok)
            self.assertEqual(result.user.role, role)


class TestSuccess(unittest.TestCase):
    """Successful login returns stored username and role and touches last login once."""

    def test_end_to_end_scenario(self) -> None:
        service, store = _service(_account())
        result = service.authenticate("juanp", "secret123")
        self.assertTrue(result.ok)
        self.assertIsNone(result.error)
        self.assertEqual(result.user.username, "JUANP")
        self.assertEqual(result.user.role, "Director")
        store.touch_last_login.assert_called_once_with(7)

    def test_returns_stored_casing(self) -> None:
        service, _ = _service(_account(username="JuanP"))
        result = service.authenticate("juanp", "secret123")
        self.assertEqual(result.user.username, "JuanP")

    def test_last_login_failure_does_not_fail_login(self) -> None:
        service, store = _service(_account())
        store.touch_last_login.side_effect = StoreUnavailableError("Last-login update failed.")
        with self.assertLogs("app.services.authentication", level="WARNING") as logs:
            result = service.authenticate("juanp", "secret123")
        self.assertTrue(result.ok)
        self.assertEqual(result.user.role, "Director")
        self.assertIn("Last-login update failed", logs.output[0])


if __name__ == "__main__":
    unittest.main()
