"""Domain models for menu-browser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Course(str, Enum):
    """Closed set of menu courses."""

    STARTER = "Starter"
    MAIN_COURSE = "Main Course"
    DESSERT = "Dessert"
    DRINK = "Drink"
    SIDE = "Side"


@dataclass(frozen=True)
class BundledAsset:
    """A picture shipped with the app."""

    name: str


@dataclass(frozen=True)
class UserPhoto:
    """A locally-addressable photo supplied by the user."""

    uri: str


Picture = BundledAsset | UserPhoto


@dataclass(frozen=True)
class MenuItemDraft:
    """Every MenuItem field except identity, plus an optional new photo."""

    name: str
    description: str
    price: int
    vegetarian: bool
    vegan: bool
    course: Course
    photo: UserPhoto | None = None


@dataclass(frozen=True)
class MenuItem:
    """A single dish in the catalog."""

    item_id: str
    name: str
    description: str
    price: int
    vegetarian: bool
    vegan: bool
    course: Course
    picture: Picture

    def to_draft(self) -> MenuItemDraft:
        """Return a draft carrying this item's fields, used to pre-fill the edit form."""
        photo = self.picture if isinstance(self.picture, UserPhoto) else None
        return MenuItemDraft(
            name=self.name,
            description=self.description,
            price=self.price,
            vegetarian=self.vegetarian,
            vegan=self.vegan,
            course=self.course,
            photo=photo,
        )


@dataclass(frozen=True)
class FilterSnapshot:
    """Last applied dietary/price constraint set."""

    vegetarian_only: bool
    vegan_only: bool
    max_price: int


@dataclass(frozen=True)
class ViewState:
    """What the home screen renders after an intent has been handled."""

    visible: tuple[MenuItem, ...]
    filters: FilterSnapshot | None
    course: Course | None
    search_term: str
