"""Project listing requests.

Callers pick between a category-filtered, cursor-paginated listing and an
unfiltered first page of fixed size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from showcase_api.exceptions import ValidationError

DEFAULT_PAGE_SIZE = 4


@dataclass(frozen=True)
class FilteredListing:
    category: str
    end_cursor: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.category:
            raise ValidationError("Filtered listing requires a category", {"category": self.category})

    def variables(self) -> Dict[str, Any]:
        return {"category": self.category, "endCursor": self.end_cursor}


@dataclass(frozen=True)
class UnfilteredListing:
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValidationError("Page size must be positive", {"page_size": self.page_size})

    def variables(self) -> Dict[str, Any]:
        return {"first": self.page_size}


ProjectListing = Union[FilteredListing, UnfilteredListing]


def listing_request(category: Optional[str] = None, end_cursor: Optional[str] = None) -> ProjectListing:
    """Map optional arguments onto a listing request.

    A falsy category selects the unfiltered listing and ``end_cursor`` is then
    ignored.
    """
    if category:
        return FilteredListing(category=category, end_cursor=end_cursor)
    return UnfilteredListing()
