"""Visible-list derivation from the catalog and the active filters."""

from __future__ import annotations

from typing import Callable, Iterable

from menu_browser.catalog import CatalogStore
from menu_browser.intents import (
    COURSE_CHANNEL,
    FILTERS_CHANNEL,
    ApplyFilters,
    ClearFilters,
    SelectCourse,
    SetSearchTerm,
)
from menu_browser.logging_setup import get_logger
from menu_browser.models import Course, FilterSnapshot, MenuItem, ViewState

logger = get_logger(__name__)

Predicate = Callable[[MenuItem], bool]


def search_predicate(search_term: str) -> Predicate | None:
    term = search_term.lower()
    if not term:
        return None
    return lambda item: term in item.name.lower() or term in item.description.lower()


def filter_predicates(filters: FilterSnapshot | None) -> list[Predicate]:
    """Dietary flags apply when set; the price ceiling applies whenever a snapshot is present."""
    if filters is None:
        return []
    predicates: list[Predicate] = []
    if filters.vegetarian_only:
        predicates.append(lambda item: item.vegetarian)
    if filters.vegan_only:
        predicates.append(lambda item: item.vegan)
    max_price = filters.max_price
    predicates.append(lambda item: item.price <= max_price)
    return predicates


def course_predicate(course: Course | None) -> Predicate | None:
    if course is None:
        return None
    return lambda item: item.course == course


def compose_predicates(predicates: Iterable[Predicate | None]) -> Predicate:
    active = [predicate for predicate in predicates if predicate is not None]
    return lambda item: all(predicate(item) for predicate in active)


def compute_visible(
    items: Iterable[MenuItem],
    filters: FilterSnapshot | None,
    course: Course | None,
    search_term: str,
) -> tuple[MenuItem, ...]:
    """Return the items that pass search, dietary/price and course filters, in catalog order."""
    keep = compose_predicates(
        [search_predicate(search_term), *filter_predicates(filters), course_predicate(course)]
    )
    return tuple(item for item in items if keep(item))


class ViewFilterEngine:
    """
    Own the filter snapshot, course selection and search term.

    Filter and course intents are one-shot: each is applied at most once. The
    engine keeps the highest sequence number consumed on each channel and
    ignores any intent at or below it: a redelivered payload, or one older
    than what the channel already holds. Recomputing after an unrelated change
    (a search keystroke, a catalog edit) therefore never reapplies an old payload.
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog
        self.filters: FilterSnapshot | None = None
        self.course: Course | None = None
        self.search_term = ""
        self._last_seq: dict[str, int] = {}
        self._visible: tuple[MenuItem, ...] = ()
        self.recompute()

    @property
    def visible(self) -> tuple[MenuItem, ...]:
        return self._visible

    def state(self) -> ViewState:
        return ViewState(
            visible=self._visible,
            filters=self.filters,
            course=self.course,
            search_term=self.search_term,
        )

    def recompute(self) -> tuple[MenuItem, ...]:
        self._visible = compute_visible(self._catalog.items, self.filters, self.course, self.search_term)
        return self._visible

    def apply_filters(self, intent: ApplyFilters | ClearFilters) -> bool:
        """Store the snapshot carried by the intent. Returns False for an already consumed intent."""
        if not self._acknowledge(FILTERS_CHANNEL, intent.seq):
            return False
        self.filters = intent.snapshot if isinstance(intent, ApplyFilters) else None
        logger.debug("filters_applied seq=%d filters=%r", intent.seq, self.filters)
        self.recompute()
        return True

    def select_course(self, intent: SelectCourse) -> bool:
        """Select, switch or deselect a course. Returns False for an already consumed intent."""
        if not self._acknowledge(COURSE_CHANNEL, intent.seq):
            return False
        if intent.course is None or intent.course == self.course:
            self.course = None
        else:
            self.course = intent.course
        logger.debug("course_selected seq=%d course=%s", intent.seq, self.course.value if self.course else None)
        self.recompute()
        return True

    def set_search_term(self, intent: SetSearchTerm) -> None:
        self.search_term = intent.text
        self.recompute()

    def is_consumed(self, channel: str, seq: int) -> bool:
        return seq <= self._last_seq.get(channel, 0)

    def _acknowledge(self, channel: str, seq: int) -> bool:
        if self.is_consumed(channel, seq):
            logger.info("intent_ignored channel=%s seq=%d reason=already_consumed last_seq=%d", channel, seq, self._last_seq[channel])
            return False
        self._last_seq[channel] = seq
        return True
