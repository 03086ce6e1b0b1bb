"""Unit tests for PasswordValidator."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from structlog.testing import capture_logs

from credkit.config import SecuritySettings
from credkit.kernel.errors import UnsupportedStrategyError
from credkit.passwords import (
    DEFAULT_STRATEGY,
    PasswordCheck,
    PasswordHasher,
    PasswordValidator,
    StrategyLimits,
    default_registry,
)
from credkit.testing.generators import password_strategy

SALT = "dg5ahoV589/FfUTOh1BmO6CJRWl5yY/HkPpjLC7KRyM="
HASH_12_G8 = "jLyCcDQoSCRAZGQ6epILRXydRYeg6kT+6GsGTuJQe9+iqkxl9cnLrMPtBig4ZuwmEhjP/uye0s0YIw6sS/xcJg=="
HASH_A_9 = "4xR4SWrsQI+InQ=="
HASH_1S_RS = (
    "bq49IfnqhTqO0Lqf9s1FAR8GxnG53Ra+IYGdHa6ghu/F8H1zH4qSVTPlP2Nlh1ixkoLaYvvcyhYm"
    "bABg+h8Cw+3XIOk1No45h9MAlNs+24YMpk9aTa+F+tNE"
)

STORED_DEFAULT = f"pbkdf2/hmacsha256/12/G8.{SALT}.{HASH_12_G8}"
STORED_LEGACY = f"pbkdf2/hmacsha256/A/9.{SALT}.{HASH_A_9}"
STORED_1S_RS = f"pbkdf2/hmacsha256/1S/RS.{SALT}.{HASH_1S_RS}"

CHEAP_STRATEGY = "pbkdf2/hmacsha256/A/9"


@pytest.fixture
def validator() -> PasswordValidator:
    return PasswordValidator()


# ---------------------------------------------------------------------------
# Matching and upgrade signal
# ---------------------------------------------------------------------------


class TestValidatePassword:
    def test_current_strategy(self, validator: PasswordValidator, reference_password: str) -> None:
        assert validator.validate_password(reference_password, STORED_DEFAULT) == (True, False)

    def test_legacy_strategy_needs_upgrade(self, validator: PasswordValidator, reference_password: str) -> None:
        result = validator.validate_password(reference_password, STORED_LEGACY)
        assert result == PasswordCheck(matches=True, needs_upgrade=True)

    def test_other_strategy_needs_upgrade(self, validator: PasswordValidator, reference_password: str) -> None:
        assert validator.validate_password(reference_password, STORED_1S_RS) == (True, True)

    def test_wrong_password(self, validator: PasswordValidator) -> None:
        assert validator.validate_password("wrong-PassWord", STORED_DEFAULT) == (False, False)

    def test_wrong_password_never_needs_upgrade(self, validator: PasswordValidator) -> None:
        assert validator.validate_password("wrong-PassWord", STORED_LEGACY) == (False, False)

    def test_hash_from_another_strategy_does_not_match(
        self, validator: PasswordValidator, reference_password: str
    ) -> None:
        stored = f"pbkdf2/hmacsha256/1S/RS.{SALT}.{HASH_12_G8}"
        assert validator.validate_password(reference_password, stored) == (False, False)
        assert validator.validate_password("wrong-PassWord", stored) == (False, False)

    def test_upgrade_relative_to_configured_default(self, reference_password: str) -> None:
        validator = PasswordValidator(CHEAP_STRATEGY)
        assert validator.validate_password(reference_password, STORED_LEGACY) == (True, False)
        assert validator.validate_password(reference_password, STORED_DEFAULT) == (True, True)

    def test_result_fields(self, validator: PasswordValidator, reference_password: str) -> None:
        result = validator.validate_password(reference_password, STORED_LEGACY)
        assert result.matches is True
        assert result.needs_upgrade is True

    def test_case_sensitive(self, validator: PasswordValidator, reference_password: str) -> None:
        assert validator.validate_password(reference_password.lower(), STORED_DEFAULT) == (False, False)


# ---------------------------------------------------------------------------
# Bad input never raises
# ---------------------------------------------------------------------------


class TestUnverifiable:
    @pytest.mark.parametrize(
        "stored",
        [
            "",
            "garbage",
            f"{SALT}.{HASH_12_G8}",
            f"bcrypt/12.{SALT}.{HASH_12_G8}",
            f"pbkdf2/hmacsha256/12.{SALT}.{HASH_12_G8}",
            f"pbkdf2/hmacsha256/012/G8.{SALT}.{HASH_12_G8}",
            f"pbkdf2/hmacsha256/12/G8.not base64.{HASH_12_G8}",
            f"pbkdf2/hmacsha256/12/G8.{SALT}.!!",
            f"pbkdf2/hmacsha256/12/G8.{SALT}.{HASH_12_G8}.extra",
            f"pbkdf2/hmacsha256/12/zzzzzzzzzz.{SALT}.{HASH_12_G8}",
        ],
    )
    def test_malformed_stored_hash(self, validator: PasswordValidator, reference_password: str, stored: str) -> None:
        assert validator.validate_password(reference_password, stored) == (False, False)

    def test_empty_password(self, validator: PasswordValidator) -> None:
        assert validator.validate_password("", STORED_DEFAULT) == (False, False)

    def test_unencodable_password(self, validator: PasswordValidator) -> None:
        assert validator.validate_password("\ud800", STORED_DEFAULT) == (False, False)

    def test_iteration_limit_applies_to_stored_hashes(self, reference_password: str) -> None:
        registry = default_registry(StrategyLimits(max_iterations=100))
        validator = PasswordValidator(CHEAP_STRATEGY, registry=registry)
        assert validator.validate_password(reference_password, STORED_LEGACY) == (True, False)
        assert validator.validate_password(reference_password, STORED_DEFAULT) == (False, False)

    def test_empty_hash_part(self, validator: PasswordValidator, reference_password: str) -> None:
        assert validator.validate_password(reference_password, f"{CHEAP_STRATEGY}.{SALT}.") == (False, False)


# ---------------------------------------------------------------------------
# Hasher / validator integration
# ---------------------------------------------------------------------------


class TestWithHasher:
    def test_round_trip(self) -> None:
        stored = PasswordHasher(CHEAP_STRATEGY).compute_hash("s3cr3t!")
        assert PasswordValidator(CHEAP_STRATEGY).validate_password("s3cr3t!", stored) == (True, False)

    @settings(max_examples=25, deadline=None)
    @given(password=password_strategy())
    def test_round_trip_property(self, password: str) -> None:
        stored = PasswordHasher(CHEAP_STRATEGY).compute_hash(password)
        assert PasswordValidator(CHEAP_STRATEGY).validate_password(password, stored) == (True, False)

    def test_upgrade_flow(self, reference_password: str) -> None:
        validator = PasswordValidator()
        check = validator.validate_password(reference_password, STORED_LEGACY)
        assert check.needs_upgrade
        upgraded = PasswordHasher(validator.default_strategy).compute_hash(reference_password)
        assert validator.validate_password(reference_password, upgraded) == (True, False)


# ---------------------------------------------------------------------------
# Construction and logging
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_default_strategy(self, validator: PasswordValidator) -> None:
        assert validator.default_strategy == DEFAULT_STRATEGY

    def test_unsupported_default_fails_fast(self) -> None:
        with pytest.raises(UnsupportedStrategyError):
            PasswordValidator("md5")

    def test_from_settings(self, encryption_key: bytes, signing_key: bytes, reference_password: str) -> None:
        config = SecuritySettings(
            token_encryption_key=encryption_key.hex(),
            token_signing_key=signing_key.hex(),
            password_strategy=CHEAP_STRATEGY,
        )
        validator = PasswordValidator.from_settings(config)
        assert validator.default_strategy == CHEAP_STRATEGY
        assert validator.validate_password(reference_password, STORED_DEFAULT) == (True, True)


class TestLogging:
    def test_upgrade_is_logged_without_secrets(self, validator: PasswordValidator, reference_password: str) -> None:
        with capture_logs() as logs:
            validator.validate_password(reference_password, STORED_LEGACY)
        events = [entry for entry in logs if entry["event"] == "password.needs_upgrade"]
        assert len(events) == 1
        assert events[0]["stored_strategy"] == CHEAP_STRATEGY
        assert events[0]["log_level"] == "info"
        assert reference_password not in repr(logs)
        assert SALT not in repr(logs)

    def test_unverifiable_is_logged_at_debug(self, validator: PasswordValidator) -> None:
        with capture_logs() as logs:
            validator.validate_password("pw", "garbage")
        assert [entry["event"] for entry in logs] == ["password.unverifiable"]
        assert logs[0]["log_level"] == "debug"
