"""
Unit tests: predicate composition and one-shot filter/course intents.
"""
import itertools

from menu_browser.catalog import CatalogStore
from menu_browser.data import SEED_MENU
from menu_browser.filter_engine import ViewFilterEngine, compute_visible
from menu_browser.intents import FILTERS_CHANNEL, ApplyFilters, ClearFilters, SelectCourse, SetSearchTerm
from menu_browser.models import Course, FilterSnapshot


def _names(items):
    return [item.name for item in items]


def test_search_dietary_and_price_compose(salmon, lava_cake):
    visible = compute_visible(
        [salmon, lava_cake],
        FilterSnapshot(vegetarian_only=True, vegan_only=False, max_price=100),
        None,
        "cake",
    )
    assert _names(visible) == ["Chocolate Lava Cake"]


def test_price_ceiling_applies_without_dietary_flags(salmon, lava_cake):
    visible = compute_visible([salmon, lava_cake], FilterSnapshot(False, False, 150), None, "")
    assert _names(visible) == ["Chocolate Lava Cake"]


def test_price_ceiling_is_inclusive():
    visible = compute_visible(SEED_MENU, FilterSnapshot(False, False, 180), None, "")
    assert _names(visible) == ["Mushroom Risotto", "Chocolate Lava Cake", "Coconut Rice Bowls"]


def test_no_snapshot_means_no_price_ceiling(salmon, lava_cake):
    assert _names(compute_visible([salmon, lava_cake], None, None, "")) == [
        "Grilled Salmon",
        "Chocolate Lava Cake",
    ]


def test_search_is_case_insensitive_over_name_and_description():
    assert _names(compute_visible(SEED_MENU, None, None, "LEMON")) == ["Grilled Salmon"]
    assert _names(compute_visible(SEED_MENU, None, None, "Risotto")) == ["Mushroom Risotto"]


def test_vegan_and_course_filters_keep_catalog_order():
    visible = compute_visible(SEED_MENU, FilterSnapshot(True, True, 500), Course.MAIN_COURSE, "")
    assert _names(visible) == ["Mushroom Risotto"]

    visible = compute_visible(SEED_MENU, FilterSnapshot(True, False, 500), None, "")
    assert _names(visible) == [
        "Mushroom Risotto",
        "Chocolate Lava Cake",
        "Coconut Rice Bowls",
        "Veg Pizza",
    ]


def test_recompute_is_independent_of_update_order():
    """Reaching the same four inputs in any order gives the same visible list."""
    steps = [
        ApplyFilters(FilterSnapshot(True, False, 300)),
        SelectCourse(Course.MAIN_COURSE),
        SetSearchTerm("pizza"),
    ]
    results = set()
    for order in itertools.permutations(range(len(steps))):
        engine = ViewFilterEngine(CatalogStore(SEED_MENU))
        for idx in order:
            step = steps[idx]
            if isinstance(step, ApplyFilters):
                engine.apply_filters(ApplyFilters(step.snapshot))
            elif isinstance(step, SelectCourse):
                engine.select_course(SelectCourse(step.course))
            else:
                engine.set_search_term(SetSearchTerm(step.text))
        results.add(tuple(item.item_id for item in engine.visible))

    assert results == {("6",)}


def test_select_same_course_twice_clears_it():
    engine = ViewFilterEngine(CatalogStore(SEED_MENU))
    snapshot = FilterSnapshot(True, False, 300)
    engine.apply_filters(ApplyFilters(snapshot))

    engine.select_course(SelectCourse(Course.DESSERT))
    assert engine.course == Course.DESSERT
    assert engine.filters == snapshot
    engine.select_course(SelectCourse(Course.DESSERT))
    assert engine.course is None
    assert engine.filters == snapshot
    assert _names(engine.visible) == [
        "Mushroom Risotto",
        "Chocolate Lava Cake",
        "Coconut Rice Bowls",
        "Veg Pizza",
    ]


def test_select_other_course_switches_and_none_clears():
    engine = ViewFilterEngine(CatalogStore(SEED_MENU))
    engine.select_course(SelectCourse(Course.DESSERT))
    engine.select_course(SelectCourse(Course.STARTER))
    assert engine.course == Course.STARTER
    engine.select_course(SelectCourse(None))
    assert engine.course is None


def test_clearing_filters_keeps_course():
    engine = ViewFilterEngine(CatalogStore(SEED_MENU))
    engine.select_course(SelectCourse(Course.MAIN_COURSE))
    engine.apply_filters(ApplyFilters(FilterSnapshot(False, False, 200)))
    assert _names(engine.visible) == ["Mushroom Risotto"]

    engine.apply_filters(ClearFilters())

    assert engine.filters is None
    assert engine.course == Course.MAIN_COURSE
    assert len(engine.visible) == 4


def test_clear_without_active_filter_is_a_no_op():
    engine = ViewFilterEngine(CatalogStore(SEED_MENU))
    before = engine.state()

    engine.apply_filters(ApplyFilters(None))

    assert engine.state() == before


def test_redelivered_intent_is_not_reapplied():
    engine = ViewFilterEngine(CatalogStore(SEED_MENU))
    apply_vegan = ApplyFilters(FilterSnapshot(True, True, 500))
    pick_dessert = SelectCourse(Course.DESSERT)

    assert engine.apply_filters(apply_vegan) is True
    assert engine.select_course(pick_dessert) is True
    engine.apply_filters(ClearFilters())

    assert engine.apply_filters(apply_vegan) is False
    assert engine.select_course(pick_dessert) is False
    assert engine.filters is None
    assert engine.course == Course.DESSERT


def test_intent_older_than_the_last_applied_one_is_ignored():
    engine = ViewFilterEngine(CatalogStore(SEED_MENU))
    older = ApplyFilters(FilterSnapshot(True, True, 500))
    newer = ApplyFilters(FilterSnapshot(False, False, 100))

    assert engine.apply_filters(newer) is True
    assert engine.apply_filters(older) is False
    assert engine.is_consumed(FILTERS_CHANNEL, older.seq)
    assert engine.filters == FilterSnapshot(False, False, 100)
    assert _names(engine.visible) == ["Chocolate Lava Cake"]
