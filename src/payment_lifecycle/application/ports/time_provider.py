from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for the clock used to stamp payments and events.

    Contract:
    - now() MUST return a datetime with tzinfo=datetime.UTC
    - created_at, updated_at and occurred_at all come from this port,
      so a fixed provider makes every timestamp deterministic in tests
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current UTC datetime (tzinfo=datetime.UTC)."""
        ...
