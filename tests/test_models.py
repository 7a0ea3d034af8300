"""Tests for the time value models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from datekit.exceptions import ConfigurationError, InvalidArgumentError, NullReferenceError
from datekit.models import CalendarView, Instant, TimeUnit

NEW_YEAR_2013 = 1356998400000  # 2013-01-01T00:00:00Z


class TestInstant:
    """Tests for Instant."""

    def test_create_instant(self):
        instant = Instant(millis=NEW_YEAR_2013)
        assert instant.millis == NEW_YEAR_2013

    def test_instant_is_immutable(self):
        instant = Instant(millis=0)
        with pytest.raises(ValidationError):
            instant.millis = 1

    def test_rejects_non_integer_millis(self):
        with pytest.raises(ValidationError):
            Instant(millis="1000")
        with pytest.raises(ValidationError):
            Instant(millis=True)

    def test_equality_and_hash(self):
        assert Instant(millis=5) == Instant(millis=5)
        assert len({Instant(millis=5), Instant(millis=5)}) == 1

    def test_ordering(self):
        assert Instant(millis=1) < Instant(millis=2)
        assert Instant(millis=2) >= Instant(millis=2)
        assert max(Instant(millis=3), Instant(millis=9)).millis == 9

    def test_from_aware_datetime(self):
        dt = datetime(2013, 1, 1, tzinfo=UTC)
        assert Instant.from_datetime(dt).millis == NEW_YEAR_2013

    def test_from_naive_datetime_uses_default_timezone(self):
        """Naive datetimes are read in the configured zone (UTC in tests)."""
        assert Instant.from_datetime(datetime(2013, 1, 1)).millis == NEW_YEAR_2013

    def test_millisecond_precision(self):
        dt = datetime(2013, 1, 1, 0, 0, 0, 123456, tzinfo=UTC)
        assert Instant.from_datetime(dt).millis == NEW_YEAR_2013 + 123

    def test_to_datetime(self):
        dt = Instant(millis=NEW_YEAR_2013 + 1).to_datetime()
        assert dt == datetime(2013, 1, 1, 0, 0, 0, 1000, tzinfo=UTC)
        assert dt.utcoffset().total_seconds() == 0

    def test_before_epoch(self):
        dt = datetime(1969, 12, 31, 23, 59, 59, tzinfo=UTC)
        assert Instant.from_datetime(dt).millis == -1000

    def test_now_is_recent(self):
        now = Instant.now()
        assert abs(now.millis - int(datetime.now(UTC).timestamp() * 1000)) < 5000


class TestCalendarView:
    """Tests for CalendarView."""

    def test_from_instant_attaches_default_timezone(self):
        view = CalendarView.from_instant(Instant(millis=NEW_YEAR_2013))
        assert view.timezone == "UTC"
        assert view.millis == NEW_YEAR_2013

    def test_round_trip_is_lossless(self):
        instant = Instant(millis=NEW_YEAR_2013 + 987)
        assert CalendarView.from_instant(instant).to_instant() == instant

    def test_calendar_fields(self):
        millis = NEW_YEAR_2013 + ((9 * 60 + 30) * 60 + 15) * 1000 + 250
        view = CalendarView(millis=millis)
        assert (view.year, view.month, view.day) == (2013, 1, 1)
        assert (view.hour, view.minute, view.second) == (9, 30, 15)
        assert view.millisecond == 250
        assert view.weekday == 1  # Tuesday

    def test_millis_is_writable(self):
        view = CalendarView(millis=0)
        view.millis = NEW_YEAR_2013
        assert view.year == 2013

    def test_assignment_is_validated(self):
        view = CalendarView(millis=0)
        with pytest.raises(ValidationError):
            view.millis = "soon"

    def test_set_instant(self):
        view = CalendarView(millis=0)
        view.set_instant(Instant(millis=NEW_YEAR_2013))
        assert view.millis == NEW_YEAR_2013

    def test_from_datetime(self):
        view = CalendarView.from_datetime(datetime(2013, 1, 1, 9, 0))
        assert view.millis == NEW_YEAR_2013 + 9 * 3_600_000
        assert view.hour == 9

    def test_unknown_timezone(self):
        with pytest.raises(ConfigurationError):
            CalendarView(millis=0, timezone="Not/AZone")

    def test_explicit_utc_timezone(self):
        view = CalendarView.from_instant(Instant(millis=0), timezone="utc")
        assert view.to_datetime() == datetime(1970, 1, 1, tzinfo=UTC)


class TestTimeUnit:
    """Tests for TimeUnit."""

    def test_ratios(self):
        assert TimeUnit.MILLIS.millis == 1
        assert TimeUnit.SECS.millis == 1_000
        assert TimeUnit.MINS.millis == 60_000
        assert TimeUnit.HOURS.millis == 3_600_000
        assert TimeUnit.DAYS.millis == 86_400_000

    def test_every_unit_has_a_ratio(self):
        for unit in TimeUnit:
            assert unit.millis > 0

    def test_to_millis(self):
        assert TimeUnit.MINS.to_millis(90) == 5_400_000
        assert TimeUnit.DAYS.to_millis(-2) == -172_800_000

    def test_from_millis_truncates_toward_zero(self):
        assert TimeUnit.SECS.from_millis(1_500) == 1
        assert TimeUnit.SECS.from_millis(-1_500) == -1
        assert TimeUnit.DAYS.from_millis(86_399_999) == 0
        assert TimeUnit.DAYS.from_millis(-86_399_999) == 0

    def test_coerce(self):
        assert TimeUnit.coerce(TimeUnit.HOURS) is TimeUnit.HOURS
        assert TimeUnit.coerce("days") is TimeUnit.DAYS
        assert TimeUnit.coerce("DAYS") is TimeUnit.DAYS
        assert TimeUnit.coerce(" secs ") is TimeUnit.SECS

    def test_coerce_unknown(self):
        with pytest.raises(InvalidArgumentError):
            TimeUnit.coerce("fortnights")
        with pytest.raises(InvalidArgumentError):
            TimeUnit.coerce(3)

    def test_coerce_none(self):
        with pytest.raises(NullReferenceError):
            TimeUnit.coerce(None)
