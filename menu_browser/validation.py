"""Form input validation, applied before an intent is issued."""

from __future__ import annotations

import re

from menu_browser.errors import ValidationError
from menu_browser.models import Course, FilterSnapshot, MenuItemDraft, UserPhoto

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_price(price_text: str) -> int:
    """
    Parse whole-Rand price text.

    Leading digits are taken the way a lenient integer parse reads them, so
    "95" and "95.50" both give 95. Text must start with a digit or sign, so
    a currency prefix such as "R95" is rejected.
    """
    raw = price_text.strip()
    if not raw:
        raise ValidationError("price", "Missing Info", "Please fill in the name, description, and price.")
    match = _LEADING_INT.match(raw)
    if match is None or int(match.group(1)) <= 0:
        raise ValidationError("price", "Invalid Price", "Price must be a valid number greater than zero.")
    return int(match.group(1))


def parse_course(course_text: str) -> Course:
    try:
        return Course(course_text)
    except ValueError:
        raise ValidationError("course", "Invalid Course", f"Unknown course {course_text!r}.") from None


def build_draft(
    name: str,
    description: str,
    price_text: str,
    vegetarian: bool,
    vegan: bool,
    course: Course | str,
    photo_uri: str = "",
) -> MenuItemDraft:
    """Validate raw form values and return a draft ready for AddItem/ReplaceItem."""
    if not name.strip() or not description.strip() or not price_text.strip():
        missing = "name" if not name.strip() else "description" if not description.strip() else "price"
        raise ValidationError(missing, "Missing Info", "Please fill in the name, description, and price.")

    price = parse_price(price_text)

    if vegan and not vegetarian:
        raise ValidationError("vegan", "Invalid Diet", "A vegan dish must also be vegetarian.")

    if not isinstance(course, Course):
        course = parse_course(course)

    photo = UserPhoto(photo_uri.strip()) if photo_uri.strip() else None
    return MenuItemDraft(
        name=name.strip(),
        description=description.strip(),
        price=price,
        vegetarian=vegetarian,
        vegan=vegan,
        course=course,
        photo=photo,
    )


def build_filter_snapshot(vegetarian_only: bool, vegan_only: bool, max_price: int) -> FilterSnapshot:
    if vegan_only and not vegetarian_only:
        raise ValidationError("vegan", "Invalid Filter", "Vegan filter requires the vegetarian filter.")
    if max_price <= 0:
        raise ValidationError("max_price", "Invalid Price", "Max price must be greater than zero.")
    return FilterSnapshot(vegetarian_only=vegetarian_only, vegan_only=vegan_only, max_price=max_price)
