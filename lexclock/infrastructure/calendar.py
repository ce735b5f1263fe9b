"""Local calendar arithmetic: where today's midnight falls for a timestamp."""

from datetime import datetime, time, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class TimezoneUnavailable(RuntimeError):
    """Raised at startup when the configured time zone cannot be loaded."""


def resolve_timezone(name: str) -> Optional[tzinfo]:
    """Return the zone for ``name``, or None for the system local zone."""

    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise TimezoneUnavailable(f"Time zone data for {name!r} is not available") from exc


class LocalCalendar:
    """Calendar bound to one zone; ``None`` means the host's local zone."""

    def __init__(self, zone: Optional[tzinfo] = None) -> None:
        self.zone = zone

    def local_datetime(self, timestamp: float) -> datetime:
        if self.zone is None:
            return datetime.fromtimestamp(timestamp).astimezone()
        return datetime.fromtimestamp(timestamp, tz=self.zone)

    def midnight(self, timestamp: float) -> float:
        """Return the timestamp of local midnight on ``timestamp``'s calendar day."""

        if self.zone is None:
            day = datetime.fromtimestamp(timestamp).date()
            # naive datetimes are resolved through the host's local zone
            return datetime.combine(day, time()).timestamp()
        day = datetime.fromtimestamp(timestamp, tz=self.zone).date()
        return datetime.combine(day, time(), tzinfo=self.zone).timestamp()

    def current_elapsed_seconds(self, now: float) -> float:
        """Seconds since local midnight of ``now``'s day."""

        return max(0.0, now - self.midnight(now))
