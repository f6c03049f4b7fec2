from __future__ import annotations

import math
import os
from dataclasses import dataclass


PAGE_SIZE = int(os.getenv("BLOGSITE_PAGE_SIZE", "10"))


@dataclass(frozen=True, slots=True)
class PageRequest:
    """A zero-based page index and the number of items per page."""

    page: int
    size: int

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page index must not be negative.")
        if self.size < 1:
            raise ValueError("Page size must be at least one.")

    @property
    def offset(self) -> int:
        return self.page * self.size


def blog_posts_page_request(page: int) -> PageRequest:
    return PageRequest(page=page, size=PAGE_SIZE)


@dataclass(frozen=True, slots=True)
class PaginationInfo:
    current_page: int
    total_pages: int

    @classmethod
    def for_page(cls, page_request: PageRequest, total_count: int) -> "PaginationInfo":
        total_pages = max(1, math.ceil(total_count / page_request.size))
        return cls(current_page=page_request.page + 1, total_pages=total_pages)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
