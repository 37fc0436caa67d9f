import pytest

from borrow_return.errors import ValidationError
from borrow_return.models.item import Item
from borrow_return.models.student import Student
from borrow_return.services.catalog_service import CatalogService


def test_add_student_defaults_type_to_free(app):
    s = CatalogService.add_student("Dana")
    assert s.id is not None
    assert s.type == "free"
    assert s.created_at is not None


def test_add_student_trims_name_and_keeps_premium(app):
    s = CatalogService.add_student("  Eve  ", " premium ")
    assert s.name == "Eve"
    assert s.type == "premium"


def test_add_student_blank_type_is_free(app):
    assert CatalogService.add_student("Frank", "   ").type == "free"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_add_student_empty_name_creates_nothing(app, name):
    with pytest.raises(ValidationError):
        CatalogService.add_student(name, "free")
    assert Student.query.count() == 0


def test_add_student_rejects_unknown_type(app):
    with pytest.raises(ValidationError):
        CatalogService.add_student("Gus", "vip")
    assert Student.query.count() == 0


def test_add_item_negative_qty_is_clamped(app):
    item = CatalogService.add_item("Tripod", -3)
    assert item.qty == 0


def test_add_item_default_qty(app):
    assert CatalogService.add_item("Stapler").qty == 1


def test_add_item_empty_title_creates_nothing(app):
    with pytest.raises(ValidationError):
        CatalogService.add_item("  ", 4)
    assert Item.query.count() == 0


def test_add_item_non_numeric_qty(app):
    with pytest.raises(ValidationError):
        CatalogService.add_item("Cable", "lots")


@pytest.mark.parametrize("name,student_type", [(123, "free"), ("Dana", 5), (["x"], None)])
def test_add_student_non_text_input(app, name, student_type):
    with pytest.raises(ValidationError):
        CatalogService.add_student(name, student_type)
    assert Student.query.count() == 0


def test_add_item_non_text_title(app):
    with pytest.raises(ValidationError):
        CatalogService.add_item(["x"], 1)
    assert Item.query.count() == 0
