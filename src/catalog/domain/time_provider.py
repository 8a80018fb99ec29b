"""Time source injected into every mutating domain operation.

Entities never read the system clock themselves; they ask the provider
they were handed.  Tests pass a controllable fake instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class TimeProvider(ABC):

    @abstractmethod
    def get_utc_now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""


class SystemTimeProvider(TimeProvider):

    def get_utc_now(self) -> datetime:
        return datetime.now(timezone.utc)
