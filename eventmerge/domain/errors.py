"""Exceptions raised by the service layer."""

from __future__ import annotations


class NotFoundError(LookupError):
    """A user or event id did not resolve to a stored record."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
