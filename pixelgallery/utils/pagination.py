

from typing import Optional


def next_link(
    base_path: str,
    limit: int,
    offset: int,
    total: int,
    base_url: str = "",
) -> Optional[str]:
    """
    Build the link to the page following [offset, offset + limit).

    Args:
        base_path: Collection path starting with "/", e.g. "/arts".
        limit: Page size (positive, validated by the caller).
        offset: Index of the first item on the current page (non-negative).
        total: Total number of items in the collection.
        base_url: Public API base URL prepended to the path.

    Returns:
        Optional[str]: The next page URL, or None at the end of the collection.
    """
    next_offset = offset + limit
    if next_offset >= total:
        return None

    return f"{base_url.rstrip('/')}{base_path}?limit={limit}&offset={next_offset}"
