"""
Pytest fixtures: catalog items, drafts and a menu session.
"""
import pytest

from menu_browser.catalog import CatalogStore
from menu_browser.data import SEED_MENU
from menu_browser.models import BundledAsset, Course, MenuItem, MenuItemDraft
from menu_browser.session import MenuSession


@pytest.fixture
def salmon() -> MenuItem:
    return MenuItem(
        item_id="1",
        name="Grilled Salmon",
        description="With lemon and herbs",
        price=250,
        vegetarian=False,
        vegan=False,
        course=Course.MAIN_COURSE,
        picture=BundledAsset("salmon.jpeg"),
    )


@pytest.fixture
def lava_cake() -> MenuItem:
    return MenuItem(
        item_id="3",
        name="Chocolate Lava Cake",
        description="Warm cake with a molten center",
        price=95,
        vegetarian=True,
        vegan=False,
        course=Course.DESSERT,
        picture=BundledAsset("lava-cake.jpeg"),
    )


@pytest.fixture
def draft() -> MenuItemDraft:
    return MenuItemDraft(
        name="Pea Soup",
        description="Minted garden peas",
        price=70,
        vegetarian=True,
        vegan=True,
        course=Course.STARTER,
    )


@pytest.fixture
def catalog(salmon, lava_cake) -> CatalogStore:
    return CatalogStore([salmon, lava_cake])


@pytest.fixture
def session() -> MenuSession:
    """Session seeded with the default six-dish menu."""
    return MenuSession(SEED_MENU)
