from datetime import date, datetime, tzinfo
from typing import Optional


def local_midnight_millis(day: date, tz: Optional[tzinfo] = None) -> int:
    """
    Milliseconds since the epoch (UTC) of 00:00:00 on `day` in the given zone.
    `tz=None` means the system local time zone.
    """
    midnight = datetime(day.year, day.month, day.day, tzinfo=tz)
    return int(midnight.timestamp()) * 1000


def millis_to_local_date(millis: int, tz: Optional[tzinfo] = None) -> date:
    """
    Calendar date, in the given zone, of an epoch millisecond count.
    Example: 1705257000000 in Asia/Kolkata -> date(2024, 1, 15)
    """
    return datetime.fromtimestamp(millis // 1000, tz).date()
