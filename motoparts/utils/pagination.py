"""
Pagination helpers shared by every list screen.

Page numbers are 1-based. ``total_pages`` is never below 1 so that an empty
list still renders as "page 1 of 1".
"""
from typing import Any, List

from motoparts.constants import MAX_VISIBLE_PAGES

# Placeholder rendered as an ellipsis in the page-number bar
ELLIPSIS = 0


def count_pages(total_items: int, per_page: int) -> int:
    if per_page <= 0:
        return 1
    total_items = max(int(total_items or 0), 0)
    return max((total_items + per_page - 1) // per_page, 1)


def clamp_page(page: int, total_pages: int) -> int:
    """Clamps a requested page into ``[1, total_pages]``."""
    total_pages = max(int(total_pages or 1), 1)
    try:
        page = int(page)
    except (TypeError, ValueError):
        page = 1
    return max(1, min(page, total_pages))


def page_numbers(current_page: int, total_pages: int, max_visible: int = MAX_VISIBLE_PAGES) -> List[int]:
    """
    Page numbers for the pagination bar.

    Shows every page when they fit; otherwise the first and last page are
    always present, with a window around the current page and ``ELLIPSIS``
    markers where pages are skipped.

    Example: page 6 of 10 -> ``[1, 0, 5, 6, 7, 0, 10]``
    """
    total_pages = max(int(total_pages or 1), 1)
    current_page = clamp_page(current_page, total_pages)
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)
    if current_page <= 3:
        end = 4
    if current_page >= total_pages - 2:
        start = total_pages - 3

    pages = [1]
    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(ELLIPSIS)
    pages.append(total_pages)
    return pages


def page_after_delete(current_page: int, items_on_page: int) -> int:
    """
    Page to show after deleting one row from the current page.

    Removing the last row of a page beyond the first moves back one page.
    """
    if items_on_page <= 1 and current_page > 1:
        return current_page - 1
    return current_page


def slice_page(items: List[Any], page: int, per_page: int) -> List[Any]:
    """Returns one page of a list that is filtered on the client."""
    page = clamp_page(page, count_pages(len(items), per_page))
    start = (page - 1) * per_page
    return items[start:start + per_page]
