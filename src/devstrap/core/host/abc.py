"""Host operations interface.

Queries about the machine devstrap runs on that are not external commands.
"""

from abc import ABC, abstractmethod


class Host(ABC):
    """Abstract interface for host inspection."""

    @abstractmethod
    def is_elevated(self) -> bool:
        """Return True when running with administrator/root privileges."""
        ...

    @abstractmethod
    def platform_name(self) -> str:
        """Return a short platform name ("windows", "darwin", "linux")."""
        ...
