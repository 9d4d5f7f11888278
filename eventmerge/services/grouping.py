"""Service for partitioning events into clusters of overlapping time ranges."""

from __future__ import annotations

from pydantic import BaseModel

from eventmerge.domain.intervals import TimeSpan, overlaps
from eventmerge.domain.models import Event


class EventGroup(BaseModel):
    """A run of start-sorted events linked by overlap, plus its aggregate span."""

    events: list[Event]
    span: TimeSpan

    @property
    def is_singleton(self) -> bool:
        return len(self.events) == 1


def group_overlapping(events: list[Event]) -> list[EventGroup]:
    """Split *events* into maximal clusters of chained overlaps.

    Events are sorted by start time (stable, so ties keep input order) and
    swept once. An event joins the open group when it starts at or before
    the group's running end; the running end only ever grows. Groups come
    back in ascending start order and every event lands in exactly one.
    """
    if not events:
        return []

    ordered = sorted(events, key=lambda e: e.start_time)

    groups: list[EventGroup] = []
    current = [ordered[0]]
    span = TimeSpan(ordered[0].start_time, ordered[0].end_time)

    for event in ordered[1:]:
        if overlaps(span.start, span.end, event.start_time, event.end_time):
            current.append(event)
            span = span.extend(event.end_time)
        else:
            groups.append(EventGroup(events=current, span=span))
            current = [event]
            span = TimeSpan(event.start_time, event.end_time)

    groups.append(EventGroup(events=current, span=span))
    return groups
