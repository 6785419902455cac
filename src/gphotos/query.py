"""
Query modifiers for list endpoints and a helper that follows page tokens.

Modifiers are applied in the order given and each appends one
``(key, value)`` pair, so passing two ``page_size`` modifiers sends both.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

logger = logging.getLogger(__name__)

Params = list[tuple[str, str]]
ListQuery = Callable[[Params], None]


def page_size(size: int) -> ListQuery:
    """Maximum number of items per page."""

    def apply(params: Params) -> None:
        params.append(("pageSize", str(size)))

    return apply


def page_token(token: str) -> ListQuery:
    """Continuation token from a previous page's ``nextPageToken``."""

    def apply(params: Params) -> None:
        params.append(("pageToken", token))

    return apply


def exclude_non_app_created_data(flag: bool = True) -> ListQuery:
    """Only return items created by this application."""

    def apply(params: Params) -> None:
        params.append(("excludeNonAppCreatedData", "true" if flag else "false"))

    return apply


def build_params(queries: tuple[ListQuery, ...] | list[ListQuery]) -> Params:
    params: Params = []
    for query in queries:
        query(params)
    return params


def paginate(fetch: Callable[..., Any], field: str, *queries: ListQuery) -> Iterator[Any]:
    """
    Yield every item of a paged list endpoint in server order.

    Args:
        fetch: A client ``list`` method accepting query modifiers
        field: Attribute of the response holding the page's items
        queries: Modifiers sent with every page (besides the page token)

    Paging stops when ``next_page_token`` is empty or absent.
    """
    token = None
    pages = 0
    while True:
        page_queries = list(queries)
        if token:
            page_queries.append(page_token(token))
        response = fetch(*page_queries)
        pages += 1
        yield from getattr(response, field) or []
        token = response.next_page_token
        if not token:
            logger.debug(f"{field}: reached last page after {pages} request(s)")
            return
