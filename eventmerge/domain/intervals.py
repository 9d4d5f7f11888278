"""Time-range value type and the overlap rule used by the grouping sweep."""

from __future__ import annotations

from datetime import datetime
from typing import NamedTuple


class TimeSpan(NamedTuple):
    start: datetime
    end: datetime

    def extend(self, end: datetime) -> TimeSpan:
        """Return a span with the same start and an end of max(self.end, end)."""
        return TimeSpan(self.start, max(self.end, end))


def overlaps(
    a_start: datetime,
    a_end: datetime,
    b_start: datetime,
    b_end: datetime,
) -> bool:
    """Return True when range *b* begins at or before range *a* ends.

    Only *b*'s start is compared against *a*'s end, so this is a full overlap
    test only when *b* does not start before *a*. Callers must sort by start
    time first. Touching endpoints (b_start == a_end) count as overlapping.
    """
    return b_start <= a_end
