"""Filter editor modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from menu_browser.constant import PRICE_SLIDER_MAX, PRICE_SLIDER_MIN, PRICE_SLIDER_STEP
from menu_browser.errors import ValidationError
from menu_browser.intents import ApplyFilters, ClearFilters, NavigationPayload, SelectCourse
from menu_browser.models import Course, FilterSnapshot
from menu_browser.rendering import badge_style, format_price
from menu_browser.validation import build_filter_snapshot

_COURSES: list[Course] = list(Course)


class FilterModal(ModalScreen[NavigationPayload | None]):
    """Edit dietary, price and course filters. Dismisses with the intents to apply, or None on cancel."""

    CSS = """
    FilterModal {
        align: center middle;
        background: $background 60%;
    }

    #filter-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #filter-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #filter-body {
        margin-bottom: 1;
        color: white;
    }

    #filter-error {
        color: #ffb3b3;
    }

    #filter-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, seed: FilterSnapshot, current_course: Course | None) -> None:
        super().__init__()
        self.vegetarian_only = seed.vegetarian_only
        self.vegan_only = seed.vegan_only and seed.vegetarian_only
        self.max_price = seed.max_price
        self.initial_course = current_course
        self.course = current_course
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="filter-dialog"):
            yield Static("Filter Menu", id="filter-title")
            yield Static(id="filter-body")
            yield Static(id="filter-error")
            yield Static(
                "V vegetarian, G vegan, ←/→ max price, 0-5 course\n"
                "Enter apply, C clear filters, Esc/q/Ctrl+C cancel",
                id="filter-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        key = event.key
        if key in {"escape", "q", "ctrl+c"}:
            self.dismiss(None)
        elif key == "enter":
            self._apply()
        elif key == "c":
            self.dismiss(NavigationPayload(filters=ClearFilters()))
        elif key == "v":
            self.vegetarian_only = not self.vegetarian_only
            if not self.vegetarian_only:
                self.vegan_only = False
            self._refresh_content()
        elif key == "g":
            # Must be vegetarian to be vegan.
            if self.vegetarian_only:
                self.vegan_only = not self.vegan_only
            self._refresh_content()
        elif key in {"left", "h"}:
            self._step_price(-PRICE_SLIDER_STEP)
        elif key in {"right", "l"}:
            self._step_price(PRICE_SLIDER_STEP)
        elif event.character and event.character.isdigit():
            self._pick_course(int(event.character))
        event.stop()

    def _step_price(self, delta: int) -> None:
        self.max_price = min(PRICE_SLIDER_MAX, max(PRICE_SLIDER_MIN, self.max_price + delta))
        self.error = ""
        self._refresh_content()

    def _pick_course(self, number: int) -> None:
        if number == 0:
            self.course = None
        elif number <= len(_COURSES):
            picked = _COURSES[number - 1]
            self.course = None if picked == self.course else picked
        self._refresh_content()

    def _apply(self) -> None:
        try:
            snapshot = build_filter_snapshot(self.vegetarian_only, self.vegan_only, self.max_price)
        except ValidationError as exc:
            self.error = f"{exc.title}: {exc.message}"
            self._refresh_content()
            return

        course_intent = None
        if self.course != self.initial_course:
            course_intent = SelectCourse(self.course)
        self.dismiss(NavigationPayload(filters=ApplyFilters(snapshot), course=course_intent))

    def _refresh_content(self) -> None:
        body = self.query_one("#filter-body", Static)
        error_widget = self.query_one("#filter-error", Static)

        content = Text(style="white")
        content.append("Dietary Requirements\n", style="bold underline")
        content.append(f"  [{'x' if self.vegetarian_only else ' '}] Vegetarian\n")
        vegan_style = "white" if self.vegetarian_only else "dim"
        content.append(f"  [{'x' if self.vegan_only else ' '}] Vegan\n", style=vegan_style)

        content.append("\nPrice Range\n", style="bold underline")
        content.append(f"  Max Price: {format_price(self.max_price)}\n", style="bold #b48ee0")
        span = PRICE_SLIDER_MAX - PRICE_SLIDER_MIN
        filled = round(20 * (self.max_price - PRICE_SLIDER_MIN) / span) if span else 20
        filled = min(20, max(0, filled))
        content.append("  " + "█" * filled, style="#8800c7")
        content.append("░" * (20 - filled) + "\n", style="#555555")

        content.append("\nCourse\n", style="bold underline")
        content.append("  0 Any ", style="bold" if self.course is None else "dim")
        for idx, course in enumerate(_COURSES, start=1):
            label = f" {idx} {course.value} "
            content.append(" ")
            content.append(label, style=badge_style(course) if course == self.course else "dim")

        body.update(content)
        error_widget.update(self.error or "")
