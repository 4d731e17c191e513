import pytest
from pydantic import ValidationError

from apparel_extractor.models import Category, Item, Supplier, ValidationReport, ValidationWarning


@pytest.mark.parametrize("number", ["123456", "12345678", "209264155"])
def test_item_number_lengths(number):
    assert Item(number=number, description="Woven Label", category=Category.TRIM).number == number


@pytest.mark.parametrize("number", ["1234567", "12345", "1234567890", "12345a"])
def test_item_number_rejects_other_shapes(number):
    with pytest.raises(ValidationError):
        Item(number=number, description="Woven Label", category=Category.TRIM)


def test_unit_of_measure_normalized():
    item = Item(number="123456", description="Woven Label", unit_of_measure=" LB ", category="fabric")
    assert item.unit_of_measure == "lb"
    assert item.category == Category.FABRIC


def test_unit_of_measure_rejects_unknown():
    with pytest.raises(ValidationError):
        Item(number="123456", description="Woven Label", unit_of_measure="kg", category=Category.TRIM)


def test_supplier_name_whitespace_and_bounds():
    assert Supplier(name="Hang   Sang  Press").name == "Hang Sang Press"
    with pytest.raises(ValidationError):
        Supplier(name="Texpak", standard_cost=-1)


def test_report_warnings_count():
    report = ValidationReport(
        total_items=1, items_with_suppliers=0, items_without_suppliers=1, confidence_score=75,
        warnings=[ValidationWarning(item_number="123456", issue="Description missing or incomplete")],
    )
    assert report.warnings_count == 1
    assert report.model_dump(mode='json')['warnings_count'] == 1
    with pytest.raises(ValidationError):
        ValidationReport(
            total_items=0, items_with_suppliers=0, items_without_suppliers=0, confidence_score=101,
        )
