"""Exceptions raised by menu-browser."""

from __future__ import annotations


class MenuBrowserError(Exception):
    """Base class for menu-browser errors."""


class ValidationError(MenuBrowserError):
    """User input rejected before an intent is issued."""

    def __init__(self, field: str, title: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.title = title
        self.message = message


class NotFoundError(MenuBrowserError):
    """A replace was requested for an item id the catalog does not hold."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"No menu item with id {item_id!r}")
        self.item_id = item_id


class InboxError(MenuBrowserError):
    """A one-shot intent was posted into a slot that still holds an undrained intent."""
