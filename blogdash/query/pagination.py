"""Offset pagination over the blog listing."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Sort:
    """Ascending sort on a single field."""

    field: str


# No tie-break: blogs sharing a created_at may swap places between queries.
CREATED_AT_ASC = Sort("created_at")


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Slice of the sorted result set: skip `skip` rows, return at most `take`."""

    skip: int
    take: int
    sort: Sort = CREATED_AT_ASC

    @classmethod
    def from_page(cls, page: int, limit: int) -> "PageWindow":
        """
        Compute the window for a 1-based page.

        Inputs are expected to be positive already; no clamping happens here
        and `limit` has no upper bound.

        Example: page 3 with limit 10 skips the first 20 blogs and returns
        blogs 21 to 30.
        """
        return cls(skip=(page - 1) * limit, take=limit)


def window(page: int, limit: int) -> PageWindow:
    return PageWindow.from_page(page, limit)
