"""Static lookup catalogs for work categories and project codes."""

from __future__ import annotations

from models import WorkCategory


CATEGORIES = [
    WorkCategory(1, "Skotare"),
    WorkCategory(2, "Skördare"),
    WorkCategory(3, "Service"),
    WorkCategory(4, "Utbildning"),
]

PROJECTS = ["LG123", "LG456", "LG789", "INTERN"]


def list_categories() -> list[WorkCategory]:
    return list(CATEGORIES)


def list_projects() -> list[str]:
    return list(PROJECTS)


def category_name(category_id: int) -> str:
    """Display name for a category id, empty if unknown."""
    for category in CATEGORIES:
        if category.id == category_id:
            return category.name
    return ""
