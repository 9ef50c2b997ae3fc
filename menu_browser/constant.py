"""Editable static menu and filter configuration."""

from __future__ import annotations

CURRENCY_PREFIX = "R"

PLACEHOLDER_ASSET = "placeholder.jpeg"

# Courses offered as quick toggles on the home screen, by Course value.
HOME_COURSES: list[str] = ["Starter", "Main Course", "Dessert"]

PRICE_SLIDER_MIN = 50
PRICE_SLIDER_MAX = 500
PRICE_SLIDER_STEP = 10
DEFAULT_MAX_PRICE = 500

# Canonical seed values consumed by menu_browser.data (which wraps these into MenuItem instances).
SEED_MENU_ROWS: list[dict[str, str | int | bool]] = [
    {
        "item_id": "1",
        "name": "Grilled Salmon",
        "description": "With lemon and herbs",
        "price": 250,
        "asset": "salmon.jpeg",
        "vegetarian": False,
        "vegan": False,
        "course": "Main Course",
    },
    {
        "item_id": "2",
        "name": "Mushroom Risotto",
        "description": "Creamy risotto with wild mushrooms",
        "price": 180,
        "asset": "risotto.jpeg",
        "vegetarian": True,
        "vegan": True,
        "course": "Main Course",
    },
    {
        "item_id": "3",
        "name": "Chocolate Lava Cake",
        "description": "Warm cake with a molten center",
        "price": 95,
        "asset": "lava-cake.jpeg",
        "vegetarian": True,
        "vegan": False,
        "course": "Dessert",
    },
    {
        "item_id": "4",
        "name": "Lobster and Pasta",
        "description": "Fresh Atlantic lobster with linguine in a rich butter-garlic sauce",
        "price": 450,
        "asset": "lobster-pasta.jpeg",
        "vegetarian": False,
        "vegan": False,
        "course": "Main Course",
    },
    {
        "item_id": "5",
        "name": "Coconut Rice Bowls",
        "description": "Fluffy coconut rice topped with pan-seared tofu and fresh vegetables",
        "price": 160,
        "asset": "Coconut Rice Bowls.jpeg",
        "vegetarian": True,
        "vegan": True,
        "course": "Starter",
    },
    {
        "item_id": "6",
        "name": "Veg Pizza",
        "description": "Classic stone-baked pizza topped with fresh seasonal vegetables and mozzarella.",
        "price": 250,
        "asset": "Veg Pizza.jpeg",
        "vegetarian": True,
        "vegan": False,
        "course": "Main Course",
    },
]
