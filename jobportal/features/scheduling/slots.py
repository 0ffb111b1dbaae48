"""Interview date, time and duration options."""
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo

LOOKAHEAD_DAYS = 14
FIRST_SLOT_HOUR = 9
LAST_SLOT_HOUR = 17
SLOT_MINUTES = 30
DURATIONS = (15, 30, 45, 60)
DEFAULT_DURATION = 30


def zone_for(time_zone: str = "UTC") -> tzinfo:
    return timezone.utc if time_zone == "UTC" else ZoneInfo(time_zone)


def today_in(time_zone: str = "UTC") -> date:
    """The current date where interview slots are picked."""
    return datetime.now(zone_for(time_zone)).date()


def generate_date_options(today: Optional[date] = None) -> List[date]:
    """Weekdays among the next ``LOOKAHEAD_DAYS`` days, today excluded."""
    today = today or today_in()
    days = (today + timedelta(days=offset) for offset in range(1, LOOKAHEAD_DAYS + 1))
    return [day for day in days if day.weekday() < 5]


def generate_time_slots() -> List[str]:
    """Slot start times from 09:00 to 16:30 as ``HH:MM`` strings."""
    return [
        f"{hour:02d}:{minute:02d}"
        for hour in range(FIRST_SLOT_HOUR, LAST_SLOT_HOUR)
        for minute in range(0, 60, SLOT_MINUTES)
    ]


def combine_slot(day: date, slot: str, time_zone: str = "UTC") -> datetime:
    """Combine a picked day and slot into an aware UTC timestamp.

    Args:
        day: Interview day
        slot: Start time as ``HH:MM``
        time_zone: Zone the user picked the slot in

    Returns:
        The start of the interview in UTC
    """
    zone = zone_for(time_zone)
    local = datetime.combine(day, time.fromisoformat(slot), tzinfo=zone)
    return local.astimezone(timezone.utc)
