"""
Unit tests: form validation before intents are issued.
"""
import pytest

from menu_browser.errors import ValidationError
from menu_browser.models import Course, FilterSnapshot, UserPhoto
from menu_browser.validation import build_draft, build_filter_snapshot, parse_price


@pytest.mark.parametrize(
    "text,expected",
    [("250", 250), (" 95 ", 95), ("95.50", 95), ("12abc", 12)],
)
def test_parse_price_accepts_leading_integer(text, expected):
    assert parse_price(text) == expected


@pytest.mark.parametrize("text", ["abc", "0", "-5", "R", ".", "R180"])
def test_parse_price_rejects_non_numeric_or_non_positive(text):
    with pytest.raises(ValidationError) as exc_info:
        parse_price(text)
    assert exc_info.value.title == "Invalid Price"
    assert exc_info.value.field == "price"


def test_build_draft_trims_and_resolves_photo():
    draft = build_draft("  Pea Soup ", " Minted peas ", "70", True, True, "Starter", " /tmp/soup.jpeg ")

    assert draft.name == "Pea Soup"
    assert draft.description == "Minted peas"
    assert draft.price == 70
    assert draft.course == Course.STARTER
    assert draft.photo == UserPhoto("/tmp/soup.jpeg")


def test_build_draft_without_photo():
    draft = build_draft("Soup", "Hot", "70", False, False, Course.SIDE)
    assert draft.photo is None


@pytest.mark.parametrize(
    "name,description,price,field",
    [("", "desc", "10", "name"), ("Soup", "   ", "10", "description"), ("Soup", "desc", "", "price")],
)
def test_build_draft_missing_info(name, description, price, field):
    with pytest.raises(ValidationError) as exc_info:
        build_draft(name, description, price, False, False, Course.STARTER)
    assert exc_info.value.title == "Missing Info"
    assert exc_info.value.field == field


def test_build_draft_rejects_vegan_without_vegetarian():
    with pytest.raises(ValidationError) as exc_info:
        build_draft("Soup", "desc", "10", False, True, Course.STARTER)
    assert exc_info.value.field == "vegan"


def test_build_draft_rejects_unknown_course():
    with pytest.raises(ValidationError) as exc_info:
        build_draft("Soup", "desc", "10", False, False, "Brunch")
    assert exc_info.value.field == "course"


def test_build_filter_snapshot():
    assert build_filter_snapshot(True, True, 200) == FilterSnapshot(True, True, 200)
    with pytest.raises(ValidationError):
        build_filter_snapshot(False, True, 200)
    with pytest.raises(ValidationError):
        build_filter_snapshot(False, False, 0)
