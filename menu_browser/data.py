"""Static seed menu."""

from __future__ import annotations

from menu_browser.constant import DEFAULT_MAX_PRICE, HOME_COURSES, SEED_MENU_ROWS
from menu_browser.models import BundledAsset, Course, FilterSnapshot, MenuItem


def _item_from_row(row: dict[str, str | int | bool]) -> MenuItem:
    return MenuItem(
        item_id=str(row["item_id"]),
        name=str(row["name"]),
        description=str(row["description"]),
        price=int(row["price"]),
        vegetarian=bool(row["vegetarian"]),
        vegan=bool(row["vegan"]),
        course=Course(row["course"]),
        picture=BundledAsset(str(row["asset"])),
    )


SEED_MENU: list[MenuItem] = [_item_from_row(row) for row in SEED_MENU_ROWS]

HOME_COURSE_TOGGLES: list[Course] = [Course(value) for value in HOME_COURSES]

# What the filter editor shows when no filter is active. Never stored as the active snapshot.
DEFAULT_FILTER_SNAPSHOT = FilterSnapshot(vegetarian_only=False, vegan_only=False, max_price=DEFAULT_MAX_PRICE)
