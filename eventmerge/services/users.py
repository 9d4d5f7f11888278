"""Service for creating and looking up users."""

from __future__ import annotations

from eventmerge.domain.errors import NotFoundError
from eventmerge.domain.models import Event, User, UserWithEvents
from eventmerge.repos.base import EventStore, UserStore


class UserService:
    def __init__(self, user_repo: UserStore, event_repo: EventStore) -> None:
        self.user_repo = user_repo
        self.event_repo = event_repo

    def create_user(self, name: str) -> User:
        return self.user_repo.create(name)

    def list_users(self) -> list[User]:
        return self.user_repo.find_all()

    def get_user(self, user_id: int) -> UserWithEvents:
        user = self._require(user_id)
        events = self.event_repo.find_all_for_user(user_id, with_invitees=False)
        return UserWithEvents(id=user.id, name=user.name, events=events)

    def get_user_events(self, user_id: int) -> list[Event]:
        """Return the user's events with invitees populated.

        Raises NotFoundError for an unknown user; a known user with no events
        gets an empty list.
        """
        self._require(user_id)
        return self.event_repo.find_all_for_user(user_id, with_invitees=True)

    def _require(self, user_id: int) -> User:
        user = self.user_repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
