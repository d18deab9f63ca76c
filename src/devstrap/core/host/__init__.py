"""Host inspection abstraction (privilege level)."""

from devstrap.core.host.abc import Host
from devstrap.core.host.real import RealHost

__all__ = ["Host", "RealHost"]
