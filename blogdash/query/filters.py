"""
Blog listing predicate construction.

A listing is always bounded by a scope (owner + category). On top of that the
caller may narrow it with a keyword and a creation date range. Each optional
criterion turns into at most one term, and `build_predicate` folds those terms
into a frozen `BlogPredicate`:

    owner = U AND category = C
        [AND (title ~* k OR description ~* k)]
        [AND created_at within range]

The predicate knows nothing about SQL; `BlogRepository` translates it into a
statement.
"""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from functools import reduce
from uuid import UUID


@dataclass(frozen=True, slots=True)
class InvalidInstant:
    """A date string that could not be parsed. No record is ever created at it."""

    raw: str


type Instant = datetime | InvalidInstant


def parse_instant(raw: str) -> Instant:
    """
    Parse an ISO-8601 date or date-time into an aware UTC datetime.

    Naive values are taken as UTC, so "2024-05-01" is midnight UTC of that day.
    Anything unparseable comes back as `InvalidInstant` instead of raising,
    including offsets that push the UTC value outside the datetime range.
    """
    try:
        parsed = datetime.fromisoformat(raw.strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        return InvalidInstant(raw)


@dataclass(frozen=True, slots=True)
class Unbounded:
    """No creation date constraint."""


@dataclass(frozen=True, slots=True)
class AtLeast:
    """created_at >= start"""

    start: Instant


@dataclass(frozen=True, slots=True)
class AtMost:
    """created_at <= end"""

    end: Instant


@dataclass(frozen=True, slots=True)
class Between:
    """start <= created_at <= end"""

    start: Instant
    end: Instant


type DateRange = Unbounded | AtLeast | AtMost | Between


@dataclass(frozen=True, slots=True)
class KeywordMatch:
    """Case-insensitive, unanchored substring match on title OR description."""

    keyword: str
    fields: tuple[str, ...] = ("title", "description")


type Term = KeywordMatch | DateRange


@dataclass(frozen=True, slots=True)
class BlogScope:
    owner_id: UUID
    category_id: UUID


@dataclass(frozen=True, slots=True)
class BlogCriteria:
    """Optional listing criteria exactly as received (raw date strings)."""

    keyword: str | None = None
    start_date: str | None = None
    end_date: str | None = None


@dataclass(frozen=True, slots=True)
class BlogPredicate:
    """Normalized, store-agnostic description of which blogs to select."""

    owner_id: UUID
    category_id: UUID
    keyword: KeywordMatch | None = None
    created: DateRange = Unbounded()


def keyword_term(keyword: str | None) -> KeywordMatch | None:
    """Return the keyword term, or None for a missing or empty keyword."""
    return KeywordMatch(keyword) if keyword else None


def date_range_term(start_date: str | None, end_date: str | None) -> DateRange:
    """Pick the date range variant from which bounds are present."""
    match (start_date or None, end_date or None):
        case (None, None):
            return Unbounded()
        case (str() as start, None):
            return AtLeast(parse_instant(start))
        case (None, str() as end):
            return AtMost(parse_instant(end))
        case (start, end):
            return Between(parse_instant(start), parse_instant(end))


def _apply(predicate: BlogPredicate, term: Term | None) -> BlogPredicate:
    match term:
        case None | Unbounded():
            return predicate
        case KeywordMatch():
            return replace(predicate, keyword=term)
        case AtLeast() | AtMost() | Between():
            return replace(predicate, created=term)


def build_predicate(scope: BlogScope, criteria: BlogCriteria) -> BlogPredicate:
    """
    Compose the listing predicate from a scope and optional criteria.

    Args:
        scope: Owner and category every listed blog must belong to
        criteria: Optional keyword and raw start/end date strings

    Returns:
        BlogPredicate: Scope equality plus one term per present criterion
    """
    terms: list[Term | None] = [
        keyword_term(criteria.keyword),
        date_range_term(criteria.start_date, criteria.end_date),
    ]
    base = BlogPredicate(owner_id=scope.owner_id, category_id=scope.category_id)
    return reduce(_apply, terms, base)
