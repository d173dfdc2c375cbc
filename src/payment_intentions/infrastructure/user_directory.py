from __future__ import annotations

from typing import TYPE_CHECKING

from payment_intentions.application.ports import UserDirectory

if TYPE_CHECKING:
    from collections.abc import Iterable


class InMemoryUserDirectory(UserDirectory):
    """In-memory user directory for testing and local wiring."""

    def __init__(self, user_ids: Iterable[int] = ()) -> None:
        self._user_ids: set[int] = set(user_ids)

    def add(self, user_id: int) -> None:
        self._user_ids.add(user_id)

    def exists(self, user_id: int) -> bool:
        return user_id in self._user_ids
