"""Kernel time – Clock port + implementations."""
from credkit.kernel.time.clock import Clock, FrozenClock, SystemClock, to_utc

__all__ = ["Clock", "FrozenClock", "SystemClock", "to_utc"]
