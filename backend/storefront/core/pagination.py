"""Cursor Pagination — one page of a fully materialised array.

Invariants:
    - The cursor is the decimal start offset; None or "" means offset 0
    - data == array[offset:offset + limit]
    - has_more iff offset + limit < len(array); next_cursor is set iff has_more
    - total == len(array) on every page, whatever the cursor
    - Offsets past the end give an empty page with has_more False

Design Decisions:
    - Malformed cursors (non-decimal, negative, signed) raise InvalidCursorError
      instead of slicing from an undefined offset
    - Offset cursors are replayable but not stable under mutation of the source;
      callers refetch the full source array on every request
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from storefront.core.domain_types import DEFAULT_PAGE_SIZE
from storefront.core.errors import InvalidCursorError, InvalidPageSizeError

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of results plus the cursor for the next one."""
    data: list[T] = field(default_factory=list)
    has_more: bool = False
    next_cursor: str | None = None
    total: int = 0

    def to_response(self) -> dict:
        """camelCase envelope; nextCursor omitted on the last page."""
        body: dict = {
            "data": self.data,
            "hasMore": self.has_more,
            "total": self.total,
        }
        if self.next_cursor is not None:
            body["nextCursor"] = self.next_cursor
        return body


def decode_cursor(cursor: str | None) -> int:
    """Parse a cursor into a start offset. Pure, raises InvalidCursorError."""
    if not cursor:
        return 0
    if not (cursor.isascii() and cursor.isdigit()):
        raise InvalidCursorError(cursor)
    return int(cursor)


def paginate_array(
    array: list[T], cursor: str | None = None, limit: int = DEFAULT_PAGE_SIZE,
) -> Page[T]:
    """Slice one page out of array starting at the cursor offset."""
    if limit < 1:
        raise InvalidPageSizeError(limit)
    start = decode_cursor(cursor)
    end = start + limit
    has_more = end < len(array)
    return Page(
        data=list(array[start:end]),
        has_more=has_more,
        next_cursor=str(end) if has_more else None,
        total=len(array),
    )
