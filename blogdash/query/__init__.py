"""Blog listing query construction: predicate and page window."""

from blogdash.query.filters import (
    AtLeast,
    AtMost,
    Between,
    BlogCriteria,
    BlogPredicate,
    BlogScope,
    DateRange,
    InvalidInstant,
    KeywordMatch,
    Unbounded,
    build_predicate,
    parse_instant,
)
from blogdash.query.pagination import CREATED_AT_ASC, PageWindow, Sort, window

__all__ = [
    "CREATED_AT_ASC",
    "AtLeast",
    "AtMost",
    "Between",
    "BlogCriteria",
    "BlogPredicate",
    "BlogScope",
    "DateRange",
    "InvalidInstant",
    "KeywordMatch",
    "PageWindow",
    "Sort",
    "Unbounded",
    "build_predicate",
    "parse_instant",
    "window",
]
