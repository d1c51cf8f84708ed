import math
from datetime import datetime
from email.utils import format_datetime

from youcast.utils.exceptions import DateFormatError, ProbeError

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 60 * SECONDS_IN_MINUTE

# YouTube publishes ISO-8601 timestamps with a numeric offset, e.g. 2024-03-01T17:00:06+00:00
_FEED_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def format_rss_date(moment: datetime) -> str:
    """Format a datetime as an RFC 822 date, as expected by RSS readers."""
    return format_datetime(moment)


def to_rss_date(timestamp: str) -> str:
    """Convert a channel feed timestamp to an RSS date, keeping its UTC offset.

    Raises:
        DateFormatError: If the timestamp is not ISO-8601 with an offset.
    """
    try:
        moment = datetime.strptime(timestamp.strip(), _FEED_DATE_FORMAT)
    except (ValueError, AttributeError) as e:
        raise DateFormatError(f"Unable to parse timestamp: {timestamp!r}") from e

    return format_rss_date(moment)


def duration_to_seconds(duration: float) -> int:
    """Convert a probed duration to whole seconds.

    A partial second counts as a full one, so 3661.4 becomes 3662.
    """
    if math.isnan(duration) or math.isinf(duration) or duration < 0:
        raise ProbeError(f"Invalid duration: {duration}")

    return math.ceil(duration)


def format_duration(seconds: int) -> str:
    """Format a whole number of seconds as HH:MM:SS.

    Hours are not wrapped at a day, so 90000 becomes 25:00:00.
    """
    hours = seconds // SECONDS_IN_HOUR
    minutes = seconds % SECONDS_IN_HOUR // SECONDS_IN_MINUTE
    seconds = seconds % SECONDS_IN_MINUTE

    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
