"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── CryptoError              (crypto.py)
    │   ├── EncryptionError
    │   │   └── InvalidKeyLengthError
    │   ├── DecryptionError
    │   ├── PaddingError
    │   └── RandomSourceError
    ├── TokenError               (tokens.py)
    │   ├── InvalidTokenError
    │   ├── TokenExpiryError
    │   └── TokenKindError
    ├── PasswordError            (passwords.py)
    │   ├── UnsupportedStrategyError
    │   └── InvalidPasswordHashError
    └── ConfigError              (credkit.config.validation)
"""

from credkit.kernel.errors.base import BaseError
from credkit.kernel.errors.crypto import (
    CryptoError,
    DecryptionError,
    EncryptionError,
    InvalidKeyLengthError,
    PaddingError,
    RandomSourceError,
)
from credkit.kernel.errors.passwords import (
    InvalidPasswordHashError,
    PasswordError,
    UnsupportedStrategyError,
)
from credkit.kernel.errors.tokens import (
    InvalidTokenError,
    InvalidTokenReason,
    TokenError,
    TokenExpiryError,
    TokenKindError,
)

__all__ = [
    "BaseError",
    "CryptoError",
    "DecryptionError",
    "EncryptionError",
    "InvalidKeyLengthError",
    "InvalidPasswordHashError",
    "InvalidTokenError",
    "InvalidTokenReason",
    "PaddingError",
    "PasswordError",
    "RandomSourceError",
    "TokenError",
    "TokenExpiryError",
    "TokenKindError",
    "UnsupportedStrategyError",
]
