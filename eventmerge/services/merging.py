"""Service for collapsing one group of overlapping events into a single event."""

from __future__ import annotations

from typing import Callable, Iterable

from eventmerge.domain.models import (
    STATUS_MERGE_RANK,
    Event,
    EventDraft,
    EventStatus,
    User,
)
from eventmerge.services.grouping import EventGroup

SEPARATOR = " | "

InviteeResolver = Callable[[list[int]], list[User]]


def merge_status(statuses: Iterable[EventStatus]) -> EventStatus:
    """Pick the highest-ranked status: IN_PROGRESS > TODO > COMPLETED."""
    return max(statuses, key=STATUS_MERGE_RANK.__getitem__, default=EventStatus.COMPLETED)


def merge_titles(titles: Iterable[str]) -> str:
    return SEPARATOR.join(titles)


def merge_descriptions(descriptions: Iterable[str | None]) -> str | None:
    """Join the non-blank descriptions, or return None when none are left."""
    kept = [d for d in descriptions if d and d.strip()]
    return SEPARATOR.join(kept) if kept else None


def unique_invitee_ids(events: Iterable[Event]) -> list[int]:
    """Return every invitee id across *events*, first occurrence order."""
    return list(dict.fromkeys(uid for event in events for uid in event.invitee_ids))


def merge_group(group: EventGroup, resolve_invitees: InviteeResolver) -> Event | EventDraft:
    """Build the replacement for *group*.

    A singleton group yields its own event untouched. Larger groups yield an
    unsaved EventDraft spanning the group; persisting it and removing the
    originals is the caller's job.
    """
    if group.is_singleton:
        return group.events[0]

    events = group.events
    return EventDraft(
        title=merge_titles(e.title for e in events),
        description=merge_descriptions(e.description for e in events),
        status=merge_status(e.status for e in events),
        start_time=group.span.start,
        end_time=group.span.end,
        invitees=resolve_invitees(unique_invitee_ids(events)),
    )
