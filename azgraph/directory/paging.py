"""Paged result traversal for list endpoints.

List responses carry their entries in ``value`` and, when more data remains,
a continuation URL in ``@odata.nextLink``. Pages are fetched one at a time, in
order, because each continuation link comes from the previous page.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Iterator, List, Optional

NEXT_LINK_FIELDS = ("@odata.nextLink", "odata.nextLink")


def next_link(page: Dict[str, Any]) -> Optional[str]:
    """Return the continuation link of a page, or None on the last page."""
    for field in NEXT_LINK_FIELDS:
        link = page.get(field)
        if link:
            return link
    return None


class PagedResult:
    """Lazy iterable over the entries of a paged response.
    
    Iteration always starts again from the first page; there is no way to
    resume from an intermediate page.
    
    Usage:
        pages = PagedResult(first_page, fetch_next=lambda link: client.call("GET", link, token))
        for entry in pages:
            ...
    """
    
    def __init__(self, first_page: Optional[Dict[str, Any]], fetch_next: Callable[[str], Dict[str, Any]]):
        self.first_page = first_page
        self.fetch_next = fetch_next
    
    def __iter__(self) -> Iterator[Any]:
        page = self.first_page
        while page:
            yield from page.get("value") or []
            link = next_link(page)
            if not link:
                return
            page = self.fetch_next(link)
    
    def to_list(self) -> List[Any]:
        return list(self)


def get_paged_list(first_page: Optional[Dict[str, Any]], fetch_next: Callable[[str], Dict[str, Any]]) -> List[Any]:
    """Drain every page into a single list, preserving server order."""
    return PagedResult(first_page, fetch_next).to_list()
