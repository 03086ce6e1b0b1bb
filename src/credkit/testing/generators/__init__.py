"""Testing generators – Hypothesis strategies for tokens and passwords."""
from credkit.testing.generators.strategies import (
    password_strategy,
    payload_strategy,
    token_kind_strategy,
    ttl_strategy,
)

__all__ = ["password_strategy", "payload_strategy", "token_kind_strategy", "ttl_strategy"]
