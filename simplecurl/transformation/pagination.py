"""
Pagination

Page object built from paginated API responses, plus the resolvers that
supply the current page number and base path from the caller's request
context. The transformer never works these out itself.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, urlencode, urlsplit

from pydantic import BaseModel, Field

DEFAULT_PAGE_NAME = "page"


def normalize_page(value: Any, default: int = 1) -> int:
    """Positive page number from request input, or the default"""
    try:
        page = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return page if page >= 1 else default


class PaginationResolver(ABC):
    """Resolves current page and base path from the ambient request"""

    @abstractmethod
    def resolve_current_page(self, page_name: str = DEFAULT_PAGE_NAME) -> int:
        pass

    @abstractmethod
    def resolve_current_path(self) -> str:
        pass


class StaticPaginationResolver(PaginationResolver):
    """Fixed page and path, for hosts without request context"""

    def __init__(self, page: Any = 1, path: str = "/"):
        self.page = normalize_page(page)
        self.path = path

    def resolve_current_page(self, page_name: str = DEFAULT_PAGE_NAME) -> int:
        return self.page

    def resolve_current_path(self) -> str:
        return self.path


class UrlPaginationResolver(PaginationResolver):
    """Reads the page from the query string and the path from a request URL"""

    def __init__(self, url: str):
        self.url = url
        self._parts = urlsplit(url)

    def resolve_current_page(self, page_name: str = DEFAULT_PAGE_NAME) -> int:
        values = parse_qs(self._parts.query).get(page_name)
        return normalize_page(values[0]) if values else 1

    def resolve_current_path(self) -> str:
        path = self._parts.path or "/"
        if self._parts.scheme and self._parts.netloc:
            return f"{self._parts.scheme}://{self._parts.netloc}{path}"
        return path


class LengthAwarePage(BaseModel):
    """One page of a paginated response"""

    items: List[Any] = Field(default_factory=list, description="Page data")
    total: int = Field(..., ge=0, description="Total items across all pages")
    per_page: int = Field(..., ge=0, description="Items per page")
    current_page: int = Field(1, ge=1, description="Resolved current page")
    path: str = Field("/", description="Base path for page links")
    page_name: str = Field(DEFAULT_PAGE_NAME, description="Query parameter name")
    query: Dict[str, Any] = Field(
        default_factory=dict, description="Extra query parameters kept in links"
    )

    @property
    def last_page(self) -> int:
        if self.per_page <= 0:
            return 1
        return max(math.ceil(self.total / self.per_page), 1)

    @property
    def first_item(self) -> Optional[int]:
        if not self.items:
            return None
        return (self.current_page - 1) * self.per_page + 1

    @property
    def last_item(self) -> Optional[int]:
        if not self.items:
            return None
        return self.first_item + len(self.items) - 1

    def has_more_pages(self) -> bool:
        return self.current_page < self.last_page

    def on_first_page(self) -> bool:
        return self.current_page <= 1

    def url(self, page: int) -> str:
        """Link to the given page, keeping extra query parameters"""
        page = max(page, 1)
        parameters = {**self.query, self.page_name: page}
        separator = "&" if "?" in self.path else "?"
        return f"{self.path}{separator}{urlencode(parameters)}"

    def next_page_url(self) -> Optional[str]:
        if self.has_more_pages():
            return self.url(self.current_page + 1)
        return None

    def previous_page_url(self) -> Optional[str]:
        if self.current_page > 1:
            return self.url(self.current_page - 1)
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Page payload in the shape paginated APIs return"""
        return {
            "current_page": self.current_page,
            "data": list(self.items),
            "first_page_url": self.url(1),
            "from": self.first_item,
            "last_page": self.last_page,
            "last_page_url": self.url(self.last_page),
            "next_page_url": self.next_page_url(),
            "path": self.path,
            "per_page": self.per_page,
            "prev_page_url": self.previous_page_url(),
            "to": self.last_item,
            "total": self.total,
        }

    def __len__(self) -> int:
        return len(self.items)
