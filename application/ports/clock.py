"""
Clock Interface (Port).

Exercise dates default to "now" when the client omits them. The current
instant comes from this port so tests can pin it.
"""
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        """
        Get the current instant.

        Returns:
            Timezone-aware datetime
        """
        ...
