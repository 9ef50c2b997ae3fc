"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from menu_browser.data import HOME_COURSE_TOGGLES
from menu_browser.errors import MenuBrowserError
from menu_browser.filter_modal import FilterModal
from menu_browser.intents import AddItem, NavigationPayload, SelectCourse
from menu_browser.item_form_modal import ItemFormModal
from menu_browser.logging_setup import get_logger
from menu_browser.models import MenuItem
from menu_browser.rendering import format_course_toggles, format_filter_summary, format_item_row
from menu_browser.session import MenuSession

logger = get_logger(__name__)


class MenuBrowserApp(App):
    """A Textual app for browsing, searching, filtering and editing a restaurant menu."""

    TITLE = "BigOne Kitchen"
    SUB_TITLE = "Menu"

    CSS = """
    Screen {
        layout: vertical;
    }

    #menu-pane {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    #course-row {
        height: 1;
        margin: 1 0;
    }

    #filter-summary {
        height: 1;
        color: $text-muted;
        margin-bottom: 1;
    }

    #items-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        color: $text-muted;
    }
    """

    input_state = reactive("normal")
    selected_index = reactive(None)

    BINDINGS = [
        ("backspace", "backspace_search", "Delete search char"),
        ("enter", "leave_search", "Done searching"),
        ("ctrl+c", "cancel_search", "Clear search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: MenuSession | None = None) -> None:
        super().__init__()
        self.session = session or MenuSession()
        self.system_status = ""
        logger.debug("app_init items=%d", len(self.session.catalog))

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="menu-pane"):
            yield Static(id="search-bar")
            yield Static(id="course-row")
            yield Static(id="filter-summary")
            yield Static(id="items-list")
            yield Static(id="status-line")

    def on_mount(self) -> None:
        self.selected_index = 0 if self.session.visible else None
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        # While a modal is active, let the modal own keyboard handling.
        if isinstance(self.screen, ModalScreen):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        if self.input_state == "search":
            self._set_search(self.session.search_term + event.character)
            event.stop()
            return

        key = event.character.lower()
        logger.debug("on_key key=%r state=%r", event.key, self.input_state)
        if key == "s":
            self.input_state = "search"
            self._refresh_search_bar()
        elif key == "j":
            self._move_selection(1)
        elif key == "k":
            self._move_selection(-1)
        elif key == "a":
            self.push_screen(ItemFormModal(), self._on_navigation_result)
        elif key == "e":
            self._open_edit_for_selected()
        elif key == "f":
            seed, course = self.session.filter_editor_seed()
            self.push_screen(FilterModal(seed, course), self._on_navigation_result)
        elif key.isdigit():
            self._toggle_course(int(key))
        else:
            return
        event.stop()

    def action_backspace_search(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "search" or not self.session.search_term:
            return
        self._set_search(self.session.search_term[:-1])

    def action_leave_search(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "search":
            return
        self.input_state = "normal"
        self._refresh_search_bar()

    def action_cancel_search(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "normal" and not self.session.search_term:
            return
        self.input_state = "normal"
        self._set_search("")

    def selected_item(self) -> MenuItem | None:
        visible = self.session.visible
        if self.selected_index is None or not (0 <= self.selected_index < len(visible)):
            return None
        return visible[self.selected_index]

    def _set_search(self, text: str) -> None:
        self.session.set_search_term(text)
        self.selected_index = 0 if self.session.visible else None
        self._refresh_all()

    def _toggle_course(self, number: int) -> None:
        if not (1 <= number <= len(HOME_COURSE_TOGGLES)):
            return
        self.session.select_course(SelectCourse(HOME_COURSE_TOGGLES[number - 1]))
        self.selected_index = 0 if self.session.visible else None
        self._refresh_all()

    def _open_edit_for_selected(self) -> None:
        item = self.selected_item()
        if item is None:
            return
        self.push_screen(ItemFormModal(item), self._on_navigation_result)

    def _on_navigation_result(self, payload: NavigationPayload | None) -> None:
        if payload is None or payload.is_empty():
            logger.debug("navigation_result empty")
            return

        logger.debug("navigation_result intents=%s", [type(intent).__name__ for intent in payload.intents()])
        try:
            self.session.deliver(payload)
        except MenuBrowserError as exc:
            logger.error("navigation_result_failed error=%r", exc)
            self.system_status = f"Not applied: {exc}"
        else:
            self.system_status = self._status_for(payload)

        # Added items land at the front; edited items keep their place.
        if isinstance(payload.item, AddItem) and self.session.visible:
            self.selected_index = 0
        if self.selected_index is None and self.session.visible:
            self.selected_index = 0
        self._refresh_all()

    def _status_for(self, payload: NavigationPayload) -> str:
        parts: list[str] = []
        if payload.item is not None:
            parts.append("Saved " + payload.item.draft.name)
        if payload.filters is not None:
            parts.append(format_filter_summary(self.session.filters))
        if payload.course is not None:
            course = self.session.course
            parts.append(f"Course: {course.value if course else 'Any'}")
        return " · ".join(parts)

    def _move_selection(self, delta: int) -> None:
        visible = self.session.visible
        if not visible:
            return

        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else len(visible) - 1
        else:
            self.selected_index = (self.selected_index + delta) % len(visible)
        self._refresh_items()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_all(self) -> None:
        self._refresh_search_bar()
        self._refresh_courses()
        self._refresh_items()

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
            status = self.query_one("#status-line", Static)
        except NoMatches:
            return

        term = self.session.search_term
        if self.input_state == "search":
            bar.update(Text(f"Search: {term}|"))
        elif term:
            bar.update(Text(f"Search: {term}   (S edit, Ctrl+C clear)"))
        else:
            bar.update("Search menu items... (press S)")

        status.update(self.system_status or "A add · E edit · F filter · J/K move · Ctrl+Q quit")

    def _refresh_courses(self) -> None:
        try:
            row = self.query_one("#course-row", Static)
            summary = self.query_one("#filter-summary", Static)
        except NoMatches:
            return
        row.update(format_course_toggles(HOME_COURSE_TOGGLES, self.session.course))
        summary.update(format_filter_summary(self.session.filters))

    def _refresh_items(self) -> None:
        try:
            items_widget = self.query_one("#items-list", Static)
        except NoMatches:
            return

        visible = self.session.visible
        if not visible:
            self.selected_index = None
            items_widget.update("No items found matching your criteria.")
            return

        if self.selected_index is not None and self.selected_index >= len(visible):
            self.selected_index = len(visible) - 1

        # Each entry renders on three lines.
        rows_per_item = 3
        visible_rows = max(1, self._visible_rows(items_widget) // rows_per_item)
        start, end = self._window_bounds(len(visible), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append_text(format_item_row(visible[idx], selected=idx == self.selected_index))

        if end < len(visible):
            lines.append("\n⋮", style="dim")

        items_widget.update(lines)
