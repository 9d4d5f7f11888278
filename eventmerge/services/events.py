"""Service for event CRUD and for merging a user's overlapping events."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from eventmerge.domain.errors import NotFoundError
from eventmerge.domain.models import CreateEventRequest, Event, EventDraft
from eventmerge.repos.base import EventStore, UserStore
from eventmerge.services.grouping import group_overlapping
from eventmerge.services.merging import merge_group
from eventmerge.services.users import UserService

logger = logging.getLogger(__name__)


class EventService:
    """Event operations backed by injected user and event stores."""

    def __init__(
        self,
        event_repo: EventStore,
        user_repo: UserStore,
        user_service: UserService,
    ) -> None:
        self.event_repo = event_repo
        self.user_repo = user_repo
        self.user_service = user_service
        # user id -> (lock, number of merge calls holding or waiting on it)
        self._merge_locks: dict[int, tuple[threading.Lock, int]] = {}
        self._locks_guard = threading.Lock()

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create_event(self, payload: CreateEventRequest) -> Event:
        """Persist a new event; invitee ids that match no user are dropped."""
        invitees = self.user_repo.find_by_ids(payload.invitees) if payload.invitees else []
        return self.event_repo.create(
            EventDraft(
                title=payload.title,
                description=payload.description,
                status=payload.status,
                start_time=payload.start_time,
                end_time=payload.end_time,
                invitees=invitees,
            )
        )

    def get_event(self, event_id: int) -> Event:
        event = self.event_repo.find_by_id(event_id)
        if event is None:
            raise NotFoundError("Event not found")
        return event

    def delete_event(self, event_id: int) -> None:
        if self.event_repo.delete_by_ids([event_id]) == 0:
            raise NotFoundError("Event not found")

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def merge_all_events(self, user_id: int) -> list[Event]:
        """Replace each cluster of the user's overlapping events with one event.

        Returns one event per cluster in ascending start order: the original
        for clusters of one, the newly created event otherwise. Each
        replacement is created before its originals are deleted, and the
        first failure aborts the pass and propagates.

        Raises NotFoundError if the user does not exist.
        """
        if self.user_repo.find_by_id(user_id) is None:
            raise NotFoundError("User not found")

        with self._user_lock(user_id):
            events = self.user_service.get_user_events(user_id)
            if not events:
                return []

            results: list[Event] = []
            for group in group_overlapping(events):
                merged = merge_group(group, self.user_repo.find_by_ids)
                if isinstance(merged, Event):
                    results.append(merged)
                    continue

                created = self.event_repo.create(merged)
                source_ids = [e.id for e in group.events]
                self.event_repo.delete_by_ids(source_ids)
                logger.info(
                    "Merged events %s into event %s for user %s",
                    source_ids,
                    created.id,
                    user_id,
                )
                results.append(created)

            logger.info(
                "Merge for user %s: %d events -> %d events",
                user_id,
                len(events),
                len(results),
            )
            return results

    @contextmanager
    def _user_lock(self, user_id: int) -> Iterator[None]:
        """Hold the user's merge lock; the entry is dropped when nobody uses it."""
        with self._locks_guard:
            lock, users = self._merge_locks.get(user_id) or (threading.Lock(), 0)
            self._merge_locks[user_id] = (lock, users + 1)
        try:
            with lock:
                yield
        finally:
            with self._locks_guard:
                lock, users = self._merge_locks[user_id]
                if users == 1:
                    del self._merge_locks[user_id]
                else:
                    self._merge_locks[user_id] = (lock, users - 1)
