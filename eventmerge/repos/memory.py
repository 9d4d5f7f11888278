"""In-memory repositories for users and events."""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone
from typing import Iterable

from eventmerge.domain.models import Event, EventDraft, EventStatus, User
from eventmerge.repos.base import EventStore, UserStore

_DRAFT_FIELDS = set(EventDraft.model_fields) - {"invitees"}


class UserRepository(UserStore):
    """Dict-backed store for User instances, keyed by an auto-increment id."""

    def __init__(self) -> None:
        self._store: dict[int, User] = {}
        self._ids = itertools.count(1)

    def create(self, name: str) -> User:
        user = User(id=next(self._ids), name=name)
        self._store[user.id] = user
        return user

    def find_all(self) -> list[User]:
        return list(self._store.values())

    def find_by_id(self, user_id: int) -> User | None:
        return self._store.get(user_id)

    def find_by_ids(self, user_ids: Iterable[int]) -> list[User]:
        return [
            self._store[uid]
            for uid in dict.fromkeys(user_ids)
            if uid in self._store
        ]


class EventRepository(EventStore):
    """Dict-backed store for Event instances, keyed by an auto-increment id."""

    def __init__(self) -> None:
        self._store: dict[int, Event] = {}
        self._ids = itertools.count(1)

    def create(self, draft: EventDraft) -> Event:
        now = datetime.now(timezone.utc)
        event = Event(
            id=next(self._ids),
            created_at=now,
            updated_at=now,
            **draft.model_dump(include=_DRAFT_FIELDS),
            invitees=list(draft.invitees),
        )
        self._store[event.id] = event
        return event

    def find_by_id(self, event_id: int) -> Event | None:
        return self._store.get(event_id)

    def delete_by_ids(self, event_ids: Iterable[int]) -> int:
        removed = 0
        for eid in set(event_ids):
            if self._store.pop(eid, None) is not None:
                removed += 1
        return removed

    def find_all_for_user(self, user_id: int, with_invitees: bool = True) -> list[Event]:
        events = [e for e in self._store.values() if user_id in e.invitee_ids]
        if with_invitees:
            return events
        return [e.model_copy(update={"invitees": []}) for e in events]


# ---------------------------------------------------------------------------
# Seed data – a user with overlapping events, useful for trying out a merge
# ---------------------------------------------------------------------------


def seed_sample_data(user_repo: UserStore, event_repo: EventStore) -> None:
    alice = user_repo.create("Alice")
    bob = user_repo.create("Bob")
    day = datetime.now(timezone.utc).replace(hour=9, minute=0, second=0, microsecond=0)

    event_repo.create(
        EventDraft(
            title="Standup",
            description="Daily sync",
            status=EventStatus.TODO,
            start_time=day,
            end_time=day + timedelta(hours=1),
            invitees=[alice, bob],
        )
    )
    event_repo.create(
        EventDraft(
            title="Design review",
            status=EventStatus.IN_PROGRESS,
            start_time=day + timedelta(minutes=30),
            end_time=day + timedelta(hours=2),
            invitees=[alice],
        )
    )
    event_repo.create(
        EventDraft(
            title="Lunch",
            status=EventStatus.COMPLETED,
            start_time=day + timedelta(hours=3),
            end_time=day + timedelta(hours=4),
            invitees=[alice, bob],
        )
    )
