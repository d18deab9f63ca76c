"""Time operations abstraction for testing."""

from devstrap.core.time.abc import Time
from devstrap.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
