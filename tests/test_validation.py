from datetime import datetime, timedelta, timezone

import pytest

from solarazel.models import Site
from solarazel.validation import QueryError, parse_when, validate_site

UTC = timezone.utc


# parse_when -------------------------------------------------------------------
@pytest.mark.parametrize(
    "text, expected",
    [
        ("2020-06-21 12:00", datetime(2020, 6, 21, 12, 0, tzinfo=UTC)),
        ("2020-06-21 12:00:30", datetime(2020, 6, 21, 12, 0, 30, tzinfo=UTC)),
        ("  2020-06-21 12:00  ", datetime(2020, 6, 21, 12, 0, tzinfo=UTC)),
        ("2020-06-21T12:00:00", datetime(2020, 6, 21, 12, 0, tzinfo=UTC)),
        ("2020-06-21T21:00:00+09:00", datetime(2020, 6, 21, 12, 0, tzinfo=UTC)),
    ],
)
def test_parse_when_accepted_forms(text, expected):
    got = parse_when(text)
    assert got == expected
    assert got.utcoffset() == timedelta(0)


def test_parse_when_now_is_utc_whole_seconds():
    before = datetime.now(UTC).replace(microsecond=0)
    got = parse_when("NOW")
    after = datetime.now(UTC)
    assert before <= got <= after
    assert got.microsecond == 0


@pytest.mark.parametrize("text", ["", "tomorrow", "2020-13-01 00:00", "21/06/2020 12:00"])
def test_parse_when_rejects_garbage(text):
    with pytest.raises(QueryError):
        parse_when(text)


# validate_site ----------------------------------------------------------------
def test_validate_site_ok_and_edges():
    assert validate_site(52.975, -6.0494, 0.0) == Site(52.975, -6.0494, 0.0)
    assert validate_site(-90, 180, -0.43) == Site(-90.0, 180.0, -0.43)
    assert validate_site(90, -180) == Site(90.0, -180.0, 0.0)


@pytest.mark.parametrize(
    "lat, lng, alt",
    [
        (90.0001, 0.0, 0.0),
        (-91.0, 0.0, 0.0),
        (0.0, 180.5, 0.0),
        (0.0, -200.0, 0.0),
        (0.0, 0.0, -12.0),
        (float("nan"), 0.0, 0.0),
        (0.0, float("inf"), 0.0),
        (0.0, 0.0, float("nan")),
    ],
)
def test_validate_site_rejects(lat, lng, alt):
    with pytest.raises(QueryError):
        validate_site(lat, lng, alt)


def test_query_error_is_value_error():
    assert issubclass(QueryError, ValueError)
