"""Store interfaces consumed by the services.

Stores are swappable and return domain models.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from eventmerge.domain.models import Event, EventDraft, User


class UserStore(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    def create(self, name: str) -> User:
        """Persist a new user and return it with its assigned id."""
        ...

    @abstractmethod
    def find_all(self) -> list[User]:
        ...

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """Return a user by id, or None if not found."""
        ...

    @abstractmethod
    def find_by_ids(self, user_ids: Iterable[int]) -> list[User]:
        """Return the users that exist among *user_ids*; unknown ids are skipped."""
        ...


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def create(self, draft: EventDraft) -> Event:
        """Persist *draft*, assigning id and timestamps."""
        ...

    @abstractmethod
    def find_by_id(self, event_id: int) -> Event | None:
        ...

    @abstractmethod
    def delete_by_ids(self, event_ids: Iterable[int]) -> int:
        """Delete the given events and return how many were actually removed.

        Unknown ids are ignored, so repeating a delete is harmless.
        """
        ...

    @abstractmethod
    def find_all_for_user(self, user_id: int, with_invitees: bool = True) -> list[Event]:
        """Return events the user is invited to, in creation order."""
        ...
