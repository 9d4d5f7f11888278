"""FastAPI application — entry point for the event merge service."""

from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from eventmerge.config import settings
from eventmerge.domain.errors import NotFoundError
from eventmerge.domain.models import (
    CreateEventRequest,
    CreateUserRequest,
    Event,
    User,
    UserWithEvents,
)
from eventmerge.log import configure_logging
from eventmerge.repos.memory import EventRepository, UserRepository, seed_sample_data
from eventmerge.services.events import EventService
from eventmerge.services.users import UserService

configure_logging(settings.log_level)

app = FastAPI(title=settings.app_title)

# ── Singletons (created at import time for simplicity) ────────────────
user_repo = UserRepository()
event_repo = EventRepository()

user_service = UserService(user_repo=user_repo, event_repo=event_repo)
event_service = EventService(
    event_repo=event_repo,
    user_repo=user_repo,
    user_service=user_service,
)

if settings.seed_sample_data:
    seed_sample_data(user_repo, event_repo)


@app.exception_handler(NotFoundError)
async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.detail})


# ── Routes ────────────────────────────────────────────────────────────


@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}


@app.post("/users", response_model=User, status_code=201)
def create_user(payload: CreateUserRequest) -> User:
    return user_service.create_user(payload.name)


@app.get("/users", response_model=list[User])
def list_users() -> list[User]:
    return user_service.list_users()


@app.get("/users/{user_id}", response_model=UserWithEvents)
def get_user(user_id: int) -> UserWithEvents:
    """Return a user together with the events they are invited to."""
    return user_service.get_user(user_id)


@app.get("/users/{user_id}/events", response_model=list[Event])
def get_user_events(user_id: int) -> list[Event]:
    return user_service.get_user_events(user_id)


@app.post("/events", response_model=Event, status_code=201)
def create_event(payload: CreateEventRequest) -> Event:
    """Create an event; unknown invitee ids are ignored."""
    return event_service.create_event(payload)


@app.get("/events/{event_id}", response_model=Event)
def get_event(event_id: int) -> Event:
    return event_service.get_event(event_id)


@app.delete("/events/{event_id}", status_code=204)
def delete_event(event_id: int) -> Response:
    event_service.delete_event(event_id)
    return Response(status_code=204)


@app.post("/events/merge/{user_id}", response_model=list[Event])
def merge_events(user_id: int) -> list[Event]:
    """Merge every cluster of the user's overlapping events.

    Returns one event per cluster, ordered by start time.
    """
    return event_service.merge_all_events(user_id)
