"""Rendering helpers for menu rows, tags and filter summaries."""

from __future__ import annotations

from rich.text import Text

from menu_browser.constant import CURRENCY_PREFIX
from menu_browser.models import BundledAsset, Course, FilterSnapshot, MenuItem, Picture

_COURSE_STYLES: dict[Course, str] = {
    Course.STARTER: "bold #0b1f0f on #5fbf72",
    Course.MAIN_COURSE: "bold #ffffff on #8800c7",
    Course.DESSERT: "bold #ffffff on #b23a48",
    Course.DRINK: "bold #ffffff on #2f6db5",
    Course.SIDE: "bold #1f1f1f on #d9c36a",
}


def badge_style(course: Course) -> str:
    """Return a consistent badge style for course tags."""
    return _COURSE_STYLES.get(course, "bold #ffffff on #555555")


def format_price(price: int) -> str:
    return f"{CURRENCY_PREFIX}{price}"


def picture_label(picture: Picture) -> str:
    if isinstance(picture, BundledAsset):
        return f"[img {picture.name}]"
    return f"[photo {picture.uri}]"


def format_diet_tags(item: MenuItem) -> Text:
    text = Text()
    if item.vegetarian:
        text.append(" Veg ", style="bold #ffffff on #00c788")
    if item.vegan:
        if item.vegetarian:
            text.append(" ")
        text.append(" Vgn ", style="bold #ffffff on #00c788")
    return text


def format_item_row(item: MenuItem, selected: bool = False, description_width: int = 60) -> Text:
    """Render one list entry: name, course badge, price, diet tags, then description and picture."""
    text = Text()
    pointer = "➤ " if selected else "  "
    text.append(pointer)
    text.append(item.name, style="bold")
    text.append(" ")
    text.append(f" {item.course.value} ", style=badge_style(item.course))
    text.append(f" {format_price(item.price)}", style="bold #b48ee0")
    tags = format_diet_tags(item)
    if tags.plain:
        text.append(" ")
        text.append_text(tags)

    description = item.description
    if len(description) > description_width:
        description = description[: max(0, description_width - 1)] + "…"
    text.append(f"\n    {description}", style="dim")
    text.append(f"\n    {picture_label(item.picture)}", style="italic dim")
    return text


def format_course_toggles(courses: list[Course], selected: Course | None) -> Text:
    text = Text()
    for idx, course in enumerate(courses):
        if idx > 0:
            text.append("  ")
        label = f" {idx + 1} {course.value} "
        if course == selected:
            text.append(label, style=badge_style(course))
        else:
            text.append(label, style="#aaaaaa on #2a2a2a")
    return text


def format_filter_summary(filters: FilterSnapshot | None) -> str:
    if filters is None:
        return "No filters"
    parts: list[str] = []
    if filters.vegetarian_only:
        parts.append("Vegetarian")
    if filters.vegan_only:
        parts.append("Vegan")
    parts.append(f"≤ {format_price(filters.max_price)}")
    return "Filters: " + ", ".join(parts)
