"""Production Host implementation."""

import ctypes
import os
import sys

from devstrap.core.host.abc import Host


class RealHost(Host):
    """Inspects the running process and platform."""

    def is_elevated(self) -> bool:
        """Check for administrator (Windows) or root (POSIX) privileges."""
        if sys.platform == "win32":
            return bool(ctypes.windll.shell32.IsUserAnAdmin())  # type: ignore[attr-defined]
        return os.geteuid() == 0

    def platform_name(self) -> str:
        if sys.platform == "win32":
            return "windows"
        if sys.platform == "darwin":
            return "darwin"
        return "linux"
