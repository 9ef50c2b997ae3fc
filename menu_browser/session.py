"""Single entry point through which every intent flows."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from menu_browser.catalog import CatalogStore
from menu_browser.data import DEFAULT_FILTER_SNAPSHOT, SEED_MENU
from menu_browser.errors import MenuBrowserError
from menu_browser.filter_engine import ViewFilterEngine
from menu_browser.intents import (
    INBOX_CHANNELS,
    ITEM_CHANNEL,
    AddItem,
    ApplyFilters,
    ClearFilters,
    Intent,
    IntentInbox,
    NavigationPayload,
    ReplaceItem,
    SelectCourse,
    SetSearchTerm,
)
from menu_browser.logging_setup import get_logger
from menu_browser.models import Course, FilterSnapshot, MenuItem, ViewState

logger = get_logger(__name__)


class MenuSession:
    """
    Own the catalog and the view filter engine for one app session.

    Intents are handled one at a time, to completion. An intent dispatched
    while another is still being handled is queued and handled after it.
    """

    def __init__(self, items: Iterable[MenuItem] | None = None) -> None:
        self.catalog = CatalogStore(SEED_MENU if items is None else items)
        self.engine = ViewFilterEngine(self.catalog)
        self.inbox = IntentInbox()
        self._queue: deque[Intent] = deque()
        self._dispatching = False
        self._last_item_seq = 0

    @property
    def state(self) -> ViewState:
        return self.engine.state()

    @property
    def visible(self) -> tuple[MenuItem, ...]:
        return self.engine.visible

    @property
    def filters(self) -> FilterSnapshot | None:
        return self.engine.filters

    @property
    def course(self) -> Course | None:
        return self.engine.course

    @property
    def search_term(self) -> str:
        return self.engine.search_term

    def filter_editor_seed(self) -> tuple[FilterSnapshot, Course | None]:
        """Values to pre-populate the filter editor with; defaults when no filter is active."""
        return (self.engine.filters or DEFAULT_FILTER_SNAPSHOT, self.engine.course)

    def dispatch(self, intent: Intent) -> ViewState:
        self._queue.append(intent)
        if self._dispatching:
            logger.debug("intent_queued type=%s seq=%d depth=%d", type(intent).__name__, intent.seq, len(self._queue))
            return self.state

        # Every queued intent is handled before returning, even after a failure;
        # the first failure is re-raised once the queue is empty.
        first_error: MenuBrowserError | None = None
        self._dispatching = True
        try:
            while self._queue:
                queued = self._queue.popleft()
                try:
                    self._handle(queued)
                except MenuBrowserError as exc:
                    logger.error("dispatch_failed type=%s seq=%d error=%r", type(queued).__name__, queued.seq, exc)
                    if first_error is None:
                        first_error = exc
        finally:
            self._dispatching = False
            if self._queue:
                # Only reached when a non-domain error escaped _handle.
                logger.error("dispatch_aborted dropped=%d", len(self._queue))
                self._queue.clear()
        if first_error is not None:
            raise first_error
        return self.state

    def deliver(self, payload: NavigationPayload) -> ViewState:
        """
        Apply the one-shot intents carried by a navigation transition.

        Every channel is drained even when one of its intents fails; the first
        failure is re-raised once all channels have been handled.
        """
        self.inbox.post_payload(payload)
        drained: list[Intent] = []
        for channel in INBOX_CHANNELS:
            intent = self.inbox.take(channel)
            if intent is not None:
                drained.append(intent)

        first_error: MenuBrowserError | None = None
        for intent in drained:
            try:
                self.dispatch(intent)
            except MenuBrowserError as exc:
                logger.error("deliver_failed type=%s seq=%d error=%r", type(intent).__name__, intent.seq, exc)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
        return self.state

    def add_item(self, intent: AddItem) -> ViewState:
        return self.dispatch(intent)

    def replace_item(self, intent: ReplaceItem) -> ViewState:
        return self.dispatch(intent)

    def apply_filters(self, intent: ApplyFilters | ClearFilters) -> ViewState:
        return self.dispatch(intent)

    def select_course(self, intent: SelectCourse) -> ViewState:
        return self.dispatch(intent)

    def set_search_term(self, text: str) -> ViewState:
        return self.dispatch(SetSearchTerm(text))

    def _handle(self, intent: Intent) -> None:
        logger.debug("intent_handle type=%s seq=%d", type(intent).__name__, intent.seq)
        if isinstance(intent, (AddItem, ReplaceItem)):
            self._handle_item(intent)
        elif isinstance(intent, (ApplyFilters, ClearFilters)):
            self.engine.apply_filters(intent)
        elif isinstance(intent, SelectCourse):
            self.engine.select_course(intent)
        elif isinstance(intent, SetSearchTerm):
            self.engine.set_search_term(intent)
        else:
            raise TypeError(f"Unsupported intent {intent!r}")

    def _handle_item(self, intent: AddItem | ReplaceItem) -> None:
        if intent.seq <= self._last_item_seq:
            logger.info(
                "intent_ignored channel=%s seq=%d reason=already_consumed last_seq=%d",
                ITEM_CHANNEL,
                intent.seq,
                self._last_item_seq,
            )
            return
        if isinstance(intent, AddItem):
            self.catalog.add_item(intent.draft)
        else:
            # Raises NotFoundError with the catalog untouched.
            self.catalog.replace_item(intent.item_id, intent.draft)
        self._last_item_seq = intent.seq
        self.engine.recompute()
