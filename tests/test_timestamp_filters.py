"""TimestampFilter / TimestampFilterList tests."""

from datetime import datetime, timedelta, timezone

from cfclient.domain.filters import (
    FilterModifier,
    TimestampFilter,
    TimestampFilterList,
    format_rfc3339,
)
from cfclient.domain.query_values import QueryValues

T1 = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
T2 = datetime(2024, 6, 7, 8, 9, 10, tzinfo=timezone.utc)


def _serialize(f, tag: str = "created_ats") -> QueryValues:
    query = QueryValues()
    f.serialize(query, tag)
    return query


class TestFormatRfc3339:
    """Second precision, Z for UTC, numeric offset otherwise."""

    def test_utc_uses_z(self):
        assert format_rfc3339(T1) == "2024-01-02T03:04:05Z"

    def test_microseconds_dropped(self):
        ts = T1.replace(microsecond=987654)
        assert format_rfc3339(ts) == "2024-01-02T03:04:05Z"

    def test_positive_offset(self):
        tz = timezone(timedelta(hours=5, minutes=30))
        ts = datetime(2024, 1, 2, 3, 4, 5, 123, tzinfo=tz)
        assert format_rfc3339(ts) == "2024-01-02T03:04:05+05:30"

    def test_negative_offset(self):
        tz = timezone(timedelta(hours=-7))
        ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=tz)
        assert format_rfc3339(ts) == "2024-01-02T03:04:05-07:00"

    def test_naive_is_taken_as_utc(self):
        assert format_rfc3339(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05Z"

    def test_early_year_is_zero_padded(self):
        ts = datetime(999, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert format_rfc3339(ts) == "0999-01-02T03:04:05Z"

    def test_early_year_with_offset_is_zero_padded(self):
        ts = datetime(999, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_rfc3339(ts) == "0999-01-02T03:04:05+02:00"

    def test_offset_seconds_are_truncated(self):
        tz = timezone(timedelta(hours=1, seconds=30))
        ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=tz)
        assert format_rfc3339(ts) == "2024-01-02T03:04:05+01:00"

    def test_negative_offset_seconds_are_truncated(self):
        tz = timezone(-timedelta(hours=1, minutes=15, seconds=40))
        ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=tz)
        assert format_rfc3339(ts) == "2024-01-02T03:04:05-01:15"


class TestTimestampHelpers:
    """Each helper appends exactly one predicate."""

    def test_equal_to_many_instants(self):
        tl = TimestampFilterList().equal_to(T1, T2)
        assert len(tl) == 1
        assert tl.filters[0].modifier is FilterModifier.NONE
        assert tl.filters[0].timestamps == [T1, T2]

    def test_bound_helpers_set_modifier(self):
        tl = (
            TimestampFilterList()
            .before(T1)
            .before_or_equal_to(T1)
            .after(T1)
            .after_or_equal_to(T1)
        )
        assert [f.modifier for f in tl.filters] == [
            FilterModifier.LESS_THAN,
            FilterModifier.LESS_THAN_OR_EQUAL,
            FilterModifier.GREATER_THAN,
            FilterModifier.GREATER_THAN_OR_EQUAL,
        ]
        assert all(f.timestamps == [T1] for f in tl.filters)


class TestTimestampSerialization:
    """Wire format: tag or tag[mod], comma-joined RFC 3339 instants."""

    def test_equal_to_has_no_suffix(self):
        query = _serialize(TimestampFilterList().equal_to(T1, T2))
        assert query.to_params() == [("created_ats", "2024-01-02T03:04:05Z,2024-06-07T08:09:10Z")]

    def test_before_is_lt(self):
        query = _serialize(TimestampFilterList().before(T1))
        assert query.to_params() == [("created_ats[lt]", "2024-01-02T03:04:05Z")]

    def test_before_or_equal_to_is_lte(self):
        query = _serialize(TimestampFilterList().before_or_equal_to(T1))
        assert query.to_params() == [("created_ats[lte]", "2024-01-02T03:04:05Z")]

    def test_after_is_gt(self):
        query = _serialize(TimestampFilterList().after(T1))
        assert query.to_params() == [("created_ats[gt]", "2024-01-02T03:04:05Z")]

    def test_after_or_equal_to_is_gte(self):
        query = _serialize(TimestampFilterList().after_or_equal_to(T1))
        assert query.to_params() == [("created_ats[gte]", "2024-01-02T03:04:05Z")]

    def test_range_yields_two_entries_in_order(self):
        query = _serialize(TimestampFilterList().after(T1).before(T2), "updated_ats")
        assert query.to_params() == [
            ("updated_ats[gt]", "2024-01-02T03:04:05Z"),
            ("updated_ats[lt]", "2024-06-07T08:09:10Z"),
        ]

    def test_mixed_modifier_and_equality(self):
        query = _serialize(TimestampFilterList().after(T1).equal_to(T2))
        assert query.get("created_ats[gt]") == "2024-01-02T03:04:05Z"
        assert query.get("created_ats") == "2024-06-07T08:09:10Z"

    def test_same_modifier_twice_is_repeated_not_overwritten(self):
        query = _serialize(TimestampFilterList().after(T1).after(T2))
        assert query.get_all("created_ats[gt]") == [
            "2024-01-02T03:04:05Z",
            "2024-06-07T08:09:10Z",
        ]

    def test_empty_list_writes_nothing(self):
        assert len(_serialize(TimestampFilterList())) == 0

    def test_predicate_without_instants_is_inert(self):
        tl = TimestampFilterList(filters=[TimestampFilter(modifier=FilterModifier.GREATER_THAN)])
        assert len(_serialize(tl)) == 0

    def test_equal_to_without_instants_is_inert(self):
        assert len(_serialize(TimestampFilterList().equal_to())) == 0
