"""
System Clock
============

Wall-clock implementation of the IClock interface.
"""

from datetime import datetime, timezone

from support_triage.triage.application import IClock


class SystemClock(IClock):
    """Reads the current UTC time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
