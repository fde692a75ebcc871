"""Conversion of local calendar dates into the UTC instants Mews expects.

Day-based Mews services start every time unit at local midnight of the
enterprise time zone. Availability requests address the first and the last
night of a stay (check-out is exclusive) and use millisecond timestamps;
reservation requests use a plain start/end interval without milliseconds.
"""

from datetime import UTC, date, datetime, time, timedelta
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from structlog import get_logger

from src.clients.mews_client import ConnectorError
from src.config import MewsSettings, settings

logger = get_logger(__name__)

AVAILABILITY_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"
RESERVATIONS_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class InvalidDateRangeError(ConnectorError):
    """Raised when stay dates are unparsable or check-out is not after check-in."""

    error_code = "invalid_date_range"

    def __init__(
        self,
        check_in: object,
        check_out: object,
        message: str = "Invalid date range provided",
    ):
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(message, 422)


def parse_date(value: date | str, check_in: object, check_out: object) -> date:
    """Parse a calendar date given as date or ISO string (YYYY-MM-DD).

    Args:
        value: Date to parse
        check_in: Requested check-in, for the error payload
        check_out: Requested check-out, for the error payload

    Returns:
        Parsed calendar date

    Raises:
        InvalidDateRangeError: If the value is not a calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        if len(text) > 10:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateRangeError(
            check_in, check_out, f"Invalid date: {value!r}"
        ) from e


def add_years(value: date, years: int) -> date:
    """Add calendar years; 29 February overflows to 1 March."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return date(value.year + years, 3, 1)


class TimeZoneService:
    """Converts stay dates to UTC boundaries in the configured Mews time zone."""

    def __init__(self, mews_settings: Optional[MewsSettings] = None):
        config = mews_settings or settings.mews
        self.timezone_name = config.timezone_override or "UTC"

    def get_timezone(self, timezone_name: Optional[str] = None) -> ZoneInfo:
        """Resolve a time zone, falling back to UTC when it is unknown.

        Args:
            timezone_name: IANA zone name; the configured zone when omitted

        Returns:
            Resolved time zone
        """
        name = timezone_name or self.timezone_name
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown time zone, using UTC", timezone=name)
            return ZoneInfo("UTC")

    @staticmethod
    def _local_midnight_utc(day: date, tz: ZoneInfo) -> datetime:
        return datetime.combine(day, time.min, tzinfo=tz).astimezone(UTC)

    def convert_dates_for_availability(
        self,
        check_in: date | str,
        check_out: date | str,
        timezone_name: Optional[str] = None,
    ) -> dict[str, str]:
        """Convert a stay to the first/last time unit starts of services/getAvailability.

        Check-out is exclusive, so the last time unit is the night before it.

        Args:
            check_in: Arrival date
            check_out: Departure date
            timezone_name: Optional zone overriding the configured one

        Returns:
            Dict with firstTimeUnitStartUtc and lastTimeUnitStartUtc,
            e.g. "2024-05-31T22:00:00.000Z"
        """
        tz = self.get_timezone(timezone_name)
        first_night = parse_date(check_in, check_in, check_out)
        last_night = parse_date(check_out, check_in, check_out) - timedelta(days=1)

        return {
            "firstTimeUnitStartUtc": self._local_midnight_utc(first_night, tz).strftime(
                AVAILABILITY_FORMAT
            ),
            "lastTimeUnitStartUtc": self._local_midnight_utc(last_night, tz).strftime(
                AVAILABILITY_FORMAT
            ),
        }

    def convert_dates_for_reservations(
        self,
        check_in: date | str,
        check_out: Optional[date | str] = None,
        timezone_name: Optional[str] = None,
    ) -> dict[str, str]:
        """Convert a date interval to the StartUtc/EndUtc of reservations/getAll.

        Without check-out the interval spans one year from check-in.

        Args:
            check_in: Interval start date
            check_out: Optional interval end date
            timezone_name: Optional zone overriding the configured one

        Returns:
            Dict with startUtc and endUtc, e.g. "2024-05-31T22:00:00Z"
        """
        tz = self.get_timezone(timezone_name)
        start = parse_date(check_in, check_in, check_out)
        if check_out:
            end = parse_date(check_out, check_in, check_out)
        else:
            end = add_years(start, 1)

        return {
            "startUtc": self._local_midnight_utc(start, tz).strftime(RESERVATIONS_FORMAT),
            "endUtc": self._local_midnight_utc(end, tz).strftime(RESERVATIONS_FORMAT),
        }
