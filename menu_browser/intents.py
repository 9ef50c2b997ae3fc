"""Intents exchanged between screens and the menu session."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from menu_browser.errors import InboxError
from menu_browser.models import Course, FilterSnapshot, MenuItemDraft

ITEM_CHANNEL = "item"
FILTERS_CHANNEL = "filters"
COURSE_CHANNEL = "course"
SEARCH_CHANNEL = "search"

# One-shot channels, in the order they are drained.
INBOX_CHANNELS: tuple[str, ...] = (ITEM_CHANNEL, FILTERS_CHANNEL, COURSE_CHANNEL)

_sequence = itertools.count(1)


def _next_seq() -> int:
    return next(_sequence)


@dataclass(frozen=True)
class AddItem:
    draft: MenuItemDraft
    seq: int = field(default_factory=_next_seq, compare=False)
    channel = ITEM_CHANNEL


@dataclass(frozen=True)
class ReplaceItem:
    item_id: str
    draft: MenuItemDraft
    seq: int = field(default_factory=_next_seq, compare=False)
    channel = ITEM_CHANNEL


@dataclass(frozen=True)
class ApplyFilters:
    """Set the filter snapshot; None clears it."""

    snapshot: FilterSnapshot | None
    seq: int = field(default_factory=_next_seq, compare=False)
    channel = FILTERS_CHANNEL


@dataclass(frozen=True)
class ClearFilters:
    seq: int = field(default_factory=_next_seq, compare=False)
    channel = FILTERS_CHANNEL


@dataclass(frozen=True)
class SelectCourse:
    """Select a course; the currently selected course or None deselects."""

    course: Course | None
    seq: int = field(default_factory=_next_seq, compare=False)
    channel = COURSE_CHANNEL


@dataclass(frozen=True)
class SetSearchTerm:
    text: str
    seq: int = field(default_factory=_next_seq, compare=False)
    channel = SEARCH_CHANNEL


ItemIntent = AddItem | ReplaceItem
FilterIntent = ApplyFilters | ClearFilters
Intent = AddItem | ReplaceItem | ApplyFilters | ClearFilters | SelectCourse | SetSearchTerm


@dataclass(frozen=True)
class NavigationPayload:
    """One-shot instructions a dismissed screen hands back, at most one per channel."""

    item: ItemIntent | None = None
    filters: FilterIntent | None = None
    course: SelectCourse | None = None

    def intents(self) -> list[Intent]:
        return [intent for intent in (self.item, self.filters, self.course) if intent is not None]

    def is_empty(self) -> bool:
        return not self.intents()


class IntentInbox:
    """Single-slot mailbox per one-shot channel."""

    def __init__(self) -> None:
        self._slots: dict[str, Intent | None] = {channel: None for channel in INBOX_CHANNELS}

    def post(self, intent: Intent) -> None:
        if intent.channel not in self._slots:
            raise InboxError(f"{type(intent).__name__} is not a one-shot intent")
        pending = self._slots[intent.channel]
        if pending is not None:
            raise InboxError(
                f"{intent.channel} slot still holds {type(pending).__name__} seq={pending.seq}"
            )
        self._slots[intent.channel] = intent

    def post_payload(self, payload: NavigationPayload) -> None:
        intents = payload.intents()
        busy = [intent.channel for intent in intents if self._slots.get(intent.channel) is not None]
        if busy:
            raise InboxError(f"Undrained slots: {', '.join(busy)}")
        for intent in intents:
            self.post(intent)

    def take(self, channel: str) -> Intent | None:
        """Return the pending intent for a channel and clear the slot."""
        intent = self._slots[channel]
        self._slots[channel] = None
        return intent

    def pending(self, channel: str) -> Intent | None:
        return self._slots[channel]

    def __bool__(self) -> bool:
        return any(intent is not None for intent in self._slots.values())
