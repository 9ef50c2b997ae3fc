"""Add/edit menu item modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from menu_browser.errors import ValidationError
from menu_browser.intents import AddItem, NavigationPayload, ReplaceItem
from menu_browser.models import Course, MenuItem, UserPhoto
from menu_browser.rendering import badge_style
from menu_browser.validation import build_draft

_COURSES: list[Course] = list(Course)

_TEXT_FIELDS = ("name", "description", "price", "photo")
_FIELD_LABELS: dict[str, str] = {
    "name": "Dish Name",
    "description": "Description",
    "price": "Price (R)",
    "vegetarian": "Vegetarian",
    "vegan": "Vegan",
    "course": "Course",
    "photo": "Photo path",
}
_FIELD_ORDER = ("name", "description", "price", "vegetarian", "vegan", "course", "photo")
_PLACEHOLDERS: dict[str, str] = {
    "name": "e.g., Grilled Salmon",
    "description": "e.g., With lemon and herbs",
    "price": "e.g., 250",
    "photo": "optional, e.g., ~/Pictures/dish.jpeg",
}


class ItemFormModal(ModalScreen[NavigationPayload | None]):
    """Collect a new or edited dish. Dismisses with an AddItem/ReplaceItem payload, or None on cancel."""

    CSS = """
    ItemFormModal {
        align: center middle;
        background: $background 60%;
    }

    #item-dialog {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #item-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #item-body {
        margin-bottom: 1;
        color: white;
    }

    #item-error {
        color: #ffb3b3;
    }

    #item-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, item: MenuItem | None = None) -> None:
        super().__init__()
        self.item = item
        self.cursor_index = 0
        self.error = ""
        self.values: dict[str, str] = {"name": "", "description": "", "price": "", "photo": ""}
        self.vegetarian = False
        self.vegan = False
        self.course = Course.MAIN_COURSE
        if item is not None:
            self.values["name"] = item.name
            self.values["description"] = item.description
            self.values["price"] = str(item.price)
            if isinstance(item.picture, UserPhoto):
                self.values["photo"] = item.picture.uri
            self.vegetarian = item.vegetarian
            self.vegan = item.vegan
            self.course = item.course

    @property
    def active_field(self) -> str:
        return _FIELD_ORDER[self.cursor_index]

    def compose(self) -> ComposeResult:
        title = "Add New Item" if self.item is None else f"Edit {self.item.name}"
        with Container(id="item-dialog"):
            yield Static(title, id="item-title")
            yield Static(id="item-body")
            yield Static(id="item-error")
            yield Static(
                "↑/↓ move, type to edit, Space toggle, ←/→ course\n"
                "Enter save, Esc/Ctrl+C cancel",
                id="item-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        key = event.key
        field = self.active_field

        if key in {"escape", "ctrl+c"}:
            self.dismiss(None)
        elif key == "enter":
            self._save()
        elif key in {"down", "tab"}:
            self._move_cursor(1)
        elif key in {"up", "shift+tab"}:
            self._move_cursor(-1)
        elif field == "course" and key in {"left", "right"}:
            step = 1 if key == "right" else -1
            self.course = _COURSES[(_COURSES.index(self.course) + step) % len(_COURSES)]
            self._refresh_content()
        elif field in {"vegetarian", "vegan"} and key in {"space", "left", "right"}:
            self._toggle(field)
        elif field in _TEXT_FIELDS and key == "backspace":
            self.values[field] = self.values[field][:-1]
            self.error = ""
            self._refresh_content()
        elif field in _TEXT_FIELDS and event.is_printable and event.character:
            self.values[field] += event.character
            self.error = ""
            self._refresh_content()
        event.stop()

    def _move_cursor(self, delta: int) -> None:
        self.cursor_index = (self.cursor_index + delta) % len(_FIELD_ORDER)
        self._refresh_content()

    def _toggle(self, field: str) -> None:
        if field == "vegetarian":
            self.vegetarian = not self.vegetarian
            if not self.vegetarian:
                self.vegan = False
        elif self.vegetarian:
            # A vegan dish must also be vegetarian.
            self.vegan = not self.vegan
        self._refresh_content()

    def _save(self) -> None:
        try:
            draft = build_draft(
                name=self.values["name"],
                description=self.values["description"],
                price_text=self.values["price"],
                vegetarian=self.vegetarian,
                vegan=self.vegan,
                course=self.course,
                photo_uri=self.values["photo"],
            )
        except ValidationError as exc:
            self.error = f"{exc.title}: {exc.message}"
            if exc.field in _FIELD_ORDER:
                self.cursor_index = _FIELD_ORDER.index(exc.field)
            self._refresh_content()
            return

        if self.item is None:
            self.dismiss(NavigationPayload(item=AddItem(draft)))
        else:
            self.dismiss(NavigationPayload(item=ReplaceItem(self.item.item_id, draft)))

    def _refresh_content(self) -> None:
        body = self.query_one("#item-body", Static)
        error_widget = self.query_one("#item-error", Static)

        content = Text(style="white")
        for idx, field in enumerate(_FIELD_ORDER):
            if idx > 0:
                content.append("\n")
            is_active = idx == self.cursor_index
            pointer = "➤ " if is_active else "  "
            content.append(f"{pointer}{_FIELD_LABELS[field]}: ", style="bold" if is_active else "white")
            if field in _TEXT_FIELDS:
                value = self.values[field]
                if value:
                    content.append(value + ("|" if is_active else ""))
                else:
                    content.append(("|" if is_active else "") + _PLACEHOLDERS[field], style="dim")
            elif field == "vegetarian":
                content.append("[x]" if self.vegetarian else "[ ]")
            elif field == "vegan":
                content.append("[x]" if self.vegan else "[ ]", style="white" if self.vegetarian else "dim")
            else:
                content.append(f" {self.course.value} ", style=badge_style(self.course))

        body.update(content)
        error_widget.update(self.error or "")
