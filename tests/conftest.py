"""Shared fixtures for credkit unit tests."""

from __future__ import annotations

import pytest

from credkit.testing.fakes import FakeClock, FrozenClock

# Reference key material shared with the known-answer vectors in the token tests.
ENCRYPTION_KEY = bytes(
    [
        253, 150, 41, 236, 229, 202, 10, 148,
        19, 143, 142, 173, 2, 221, 195, 68,
        196, 180, 143, 219, 86, 140, 248, 46,
        94, 222, 169, 200, 175, 219, 104, 138,
    ]
)
SIGNING_KEY = b"some-stupid-secret-key"

# Salt and password behind the known-answer vectors in the password tests.
REFERENCE_SALT = bytes(
    [
        118, 14, 90, 134, 133, 121, 243, 223,
        197, 125, 68, 206, 135, 80, 102, 59,
        160, 137, 69, 105, 121, 201, 143, 199,
        144, 250, 99, 44, 46, 202, 71, 35,
    ]
)
REFERENCE_PASSWORD = "Just4Now!2019"


@pytest.fixture
def fake_clock() -> FrozenClock:
    """A FrozenClock pinned to 2026-01-01 12:00 UTC."""
    return FakeClock()


@pytest.fixture
def encryption_key() -> bytes:
    return ENCRYPTION_KEY


@pytest.fixture
def signing_key() -> bytes:
    return SIGNING_KEY


@pytest.fixture
def known_token() -> str:
    """Token for kind "session", payload b"bla bla FOO!BAR", IV 00..0f, issued by ``fake_clock`` with a 30 minute TTL.

    Computed independently with the openssl CLI from the record
    ``session.YmxhIGJsYSBGT08hQkFS.2026-01-01T12:30:00Z``.
    """
    return (
        "uu3rTKq8_B1VVjmhcGGf74N1B_gqLuxaSL4oVhwyo80."
        "AAECAwQFBgcICQoLDA0OD5s0Heo190sjEaO2fLI7iaCzrZ6KmPJCe3NvxCcidk6GCgl85ybngV6elMqu45msJHqZrdCWAFWyMtImtGDBJ_w"
    )


@pytest.fixture
def reference_salt() -> bytes:
    return REFERENCE_SALT


@pytest.fixture
def reference_password() -> str:
    return REFERENCE_PASSWORD
