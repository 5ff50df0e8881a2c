"""Clock provider client - the only source of wall-clock time."""

from datetime import datetime


class ClockClient:
    """Reads the local wall clock."""

    def now(self) -> datetime:
        """Current local time, timezone aware."""
        return datetime.now().astimezone()

    def now_rfc3339(self) -> str:
        """Current local time as RFC3339 with second precision."""
        return self.now().isoformat(timespec="seconds")


# Singleton client instance
_client: ClockClient | None = None


def get_client() -> ClockClient:
    """Get the clock client instance."""
    global _client
    if _client is None:
        _client = ClockClient()
    return _client
