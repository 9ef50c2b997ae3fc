"""In-memory catalog of menu items."""

from __future__ import annotations

import itertools
import time
from typing import Iterable, Iterator

from menu_browser.constant import PLACEHOLDER_ASSET
from menu_browser.errors import NotFoundError
from menu_browser.logging_setup import get_logger
from menu_browser.models import BundledAsset, MenuItem, MenuItemDraft, Picture

logger = get_logger(__name__)


class IdGenerator:
    """
    Hand out item ids that are unique for the lifetime of the process.

    An id is a millisecond wall-clock stamp plus a monotonic counter, so two
    items created within the same millisecond still differ.
    """

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._counter = itertools.count(1)
        self._issued: set[str] = set(reserved)

    def reserve(self, item_id: str) -> None:
        self._issued.add(item_id)

    def next_id(self) -> str:
        while True:
            candidate = f"{time.time_ns() // 1_000_000}-{next(self._counter)}"
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate


def resolve_picture(draft: MenuItemDraft, previous: Picture | None = None) -> Picture:
    """Pick the picture for a saved draft: new photo, else the previous picture, else the placeholder."""
    if draft.photo is not None:
        return draft.photo
    if previous is not None:
        return previous
    return BundledAsset(PLACEHOLDER_ASSET)


def _item_from_draft(item_id: str, draft: MenuItemDraft, picture: Picture) -> MenuItem:
    return MenuItem(
        item_id=item_id,
        name=draft.name,
        description=draft.description,
        price=draft.price,
        vegetarian=draft.vegetarian,
        vegan=draft.vegan,
        course=draft.course,
        picture=picture,
    )


class CatalogStore:
    """Own the ordered item collection, most recently added first."""

    def __init__(self, items: Iterable[MenuItem] = (), id_generator: IdGenerator | None = None) -> None:
        self._items: list[MenuItem] = []
        self._ids = id_generator or IdGenerator()
        for item in items:
            if any(existing.item_id == item.item_id for existing in self._items):
                raise ValueError(f"Duplicate menu item id {item.item_id!r}")
            self._ids.reserve(item.item_id)
            self._items.append(item)

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(tuple(self._items))

    def __contains__(self, item_id: object) -> bool:
        return any(item.item_id == item_id for item in self._items)

    def get(self, item_id: str) -> MenuItem:
        return self._items[self._index_of(item_id)]

    def add_item(self, draft: MenuItemDraft) -> tuple[MenuItem, ...]:
        """Prepend a new item built from the draft and return the updated collection."""
        item = _item_from_draft(self._ids.next_id(), draft, resolve_picture(draft))
        self._items.insert(0, item)
        logger.debug("catalog_add item_id=%s name=%r size=%d", item.item_id, item.name, len(self._items))
        return self.items

    def replace_item(self, item_id: str, draft: MenuItemDraft) -> tuple[MenuItem, ...]:
        """Replace the item in place, keeping its id, position and (absent a new photo) its picture."""
        idx = self._index_of(item_id)
        previous = self._items[idx]
        self._items[idx] = _item_from_draft(item_id, draft, resolve_picture(draft, previous.picture))
        logger.debug("catalog_replace item_id=%s index=%d", item_id, idx)
        return self.items

    def _index_of(self, item_id: str) -> int:
        for idx, item in enumerate(self._items):
            if item.item_id == item_id:
                return idx
        logger.warning("catalog_lookup_failed item_id=%s", item_id)
        raise NotFoundError(item_id)
