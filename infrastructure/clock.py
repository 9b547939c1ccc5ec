"""
System clock implementation of the Clock port.
"""
from datetime import datetime, timezone


class SystemClock:
    """Clock backed by the host's wall-clock time, in UTC."""

    def now(self) -> datetime:
        """Get the current UTC instant."""
        return datetime.now(timezone.utc)
