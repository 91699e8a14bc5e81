"""Static app category catalog."""

from catalog.constants import CATEGORIES, CATEGORIES_BY_ID
from catalog.exceptions import CategoryNotFoundError


def list_categories() -> list[dict[str, str]]:
    """All categories in display order."""
    return [dict(category) for category in CATEGORIES]


def get_category(category_id: str) -> dict[str, str]:
    """One category by id.

    Raises:
        CategoryNotFoundError: If the id is unknown
    """
    category = CATEGORIES_BY_ID.get(category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    return dict(category)
