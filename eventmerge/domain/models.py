"""Domain models for users, events and their invitees."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EventStatus(StrEnum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


# Higher rank wins when several statuses are merged into one.
STATUS_MERGE_RANK: dict[EventStatus, int] = {
    EventStatus.IN_PROGRESS: 2,
    EventStatus.TODO: 1,
    EventStatus.COMPLETED: 0,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts both camelCase and snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class User(_CamelModel):
    id: int
    name: str


class EventDraft(_CamelModel):
    """Everything an Event carries except the fields the store assigns."""

    title: str
    description: str | None = None
    status: EventStatus = EventStatus.TODO
    start_time: datetime
    end_time: datetime
    invitees: list[User] = Field(default_factory=list)


class Event(EventDraft):
    id: int
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @property
    def invitee_ids(self) -> list[int]:
        return [user.id for user in self.invitees]


class UserWithEvents(User):
    events: list[Event] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Request DTOs
# ---------------------------------------------------------------------------


class CreateUserRequest(_CamelModel):
    name: str = Field(min_length=1)


class CreateEventRequest(_CamelModel):
    title: str = Field(min_length=1)
    description: str | None = None
    status: EventStatus
    # Offsets are required so every stored time is absolute and comparable
    start_time: AwareDatetime
    end_time: AwareDatetime
    invitees: list[int] | None = None
