from __future__ import annotations

from abc import ABC, abstractmethod


class UserDirectory(ABC):
    """Port resolving whether a user exists.

    Contract:
    - exists() returns False for unknown users (no exception)
    - Any exception raised (directory unavailable, timeout) is an internal
      failure and propagates to the caller unmodified
    """

    @abstractmethod
    def exists(self, user_id: int) -> bool:
        """Return True if the user is known to the directory."""
