"""
credkit – signed, encrypted, expiring tokens and versioned password hashes.

Import path convention::

    from credkit.tokens import TokenGenerator, TokenValidator
    from credkit.passwords import PasswordHasher, PasswordValidator
    from credkit.kernel.errors import InvalidTokenError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
