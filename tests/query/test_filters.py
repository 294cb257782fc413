# tests/query/test_filters.py
"""Tests for blogdash/query/filters.py module."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from blogdash.query import (
    AtLeast,
    AtMost,
    Between,
    BlogCriteria,
    BlogPredicate,
    BlogScope,
    InvalidInstant,
    KeywordMatch,
    Unbounded,
    build_predicate,
    parse_instant,
)

OWNER = uuid4()
CATEGORY = uuid4()
SCOPE = BlogScope(owner_id=OWNER, category_id=CATEGORY)


class TestParseInstant:
    """Tests for parse_instant."""

    def test_date_only_is_midnight_utc(self) -> None:
        assert parse_instant("2024-05-01") == datetime(2024, 5, 1, tzinfo=UTC)

    def test_naive_datetime_taken_as_utc(self) -> None:
        assert parse_instant("2024-05-01T10:30:00") == datetime(2024, 5, 1, 10, 30, tzinfo=UTC)

    def test_offset_converted_to_utc(self) -> None:
        parsed = parse_instant("2024-05-01T10:30:00+02:00")
        assert parsed == datetime(2024, 5, 1, 8, 30, tzinfo=UTC)
        assert isinstance(parsed, datetime)
        assert parsed.utcoffset() == timedelta(0)

    @pytest.mark.parametrize(
        "raw",
        [
            "not-a-date",
            "2024-13-45",
            "yesterday",
            "9999-12-31T23:59:59-01:00",
            "0001-01-01T00:00:00+01:00",
        ],
    )
    def test_unparseable_becomes_invalid_instant(self, raw: str) -> None:
        assert parse_instant(raw) == InvalidInstant(raw)


class TestBuildPredicate:
    """Tests for build_predicate."""

    def test_scope_only(self) -> None:
        """No criteria yields the owner and category equality only."""
        predicate = build_predicate(SCOPE, BlogCriteria())
        assert predicate == BlogPredicate(owner_id=OWNER, category_id=CATEGORY)
        assert predicate.keyword is None
        assert predicate.created == Unbounded()

    def test_empty_keyword_ignored(self) -> None:
        assert build_predicate(SCOPE, BlogCriteria(keyword="")).keyword is None

    def test_keyword_term(self) -> None:
        predicate = build_predicate(SCOPE, BlogCriteria(keyword="react"))
        assert predicate.keyword == KeywordMatch("react")
        assert predicate.keyword.fields == ("title", "description")

    def test_start_only(self) -> None:
        predicate = build_predicate(SCOPE, BlogCriteria(start_date="2024-05-01"))
        assert predicate.created == AtLeast(datetime(2024, 5, 1, tzinfo=UTC))

    def test_end_only(self) -> None:
        predicate = build_predicate(SCOPE, BlogCriteria(end_date="2024-05-01"))
        assert predicate.created == AtMost(datetime(2024, 5, 1, tzinfo=UTC))

    def test_both_bounds(self) -> None:
        criteria = BlogCriteria(start_date="2024-05-01", end_date="2024-05-31")
        predicate = build_predicate(SCOPE, criteria)
        assert predicate.created == Between(
            datetime(2024, 5, 1, tzinfo=UTC),
            datetime(2024, 5, 31, tzinfo=UTC),
        )

    def test_all_criteria_combined(self) -> None:
        criteria = BlogCriteria(keyword="vue", start_date="2024-01-01", end_date="bogus")
        predicate = build_predicate(SCOPE, criteria)
        assert predicate.keyword == KeywordMatch("vue")
        assert predicate.created == Between(datetime(2024, 1, 1, tzinfo=UTC), InvalidInstant("bogus"))

    def test_inputs_not_mutated(self) -> None:
        criteria = BlogCriteria(keyword="react", start_date="2024-05-01")
        build_predicate(SCOPE, criteria)
        assert criteria == BlogCriteria(keyword="react", start_date="2024-05-01")
        assert SCOPE == BlogScope(owner_id=OWNER, category_id=CATEGORY)
