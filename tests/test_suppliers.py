import pytest

from apparel_extractor.models import TBD, UNASSIGNED
from apparel_extractor.parsers import ContextBlock, SupplierBlockParser, SupplierNameResolver


def make_block(lines, anchor_index=0):
    return ContextBlock(lines=tuple(lines), start=0, end=len(lines), anchor_index=anchor_index)


@pytest.fixture
def resolver():
    return SupplierNameResolver()


@pytest.fixture
def supplier_parser():
    return SupplierBlockParser()


@pytest.mark.parametrize("line,expected", [
    ("Avery Dennison Hong Kong 0.12 30 21", "Avery Dennison"),
    ("Avery 0.12 30 21", "Avery"),
    ("Hang Sang Press 0.18 60 45 Hong Kong", "Hang Sang Press"),
    ("FGV Global Trading 0.5 14 7 Malaysia", "FGV"),
    ("Shanghai Textile Global 1.25 40 30 China", "Shanghai Textile Global"),
    ("Sunrise Industries 0.75 20 10 Vietnam", "Sunrise Industries"),
    ("Ningbo Yarn Mills 0.33 35 25 China", "Ningbo Yarn Mills"),
])
def test_resolve_names(resolver, line, expected):
    assert resolver.resolve(line) == expected


@pytest.mark.parametrize("line", [
    "Size Range Small",
    "Color Black",
    "Main Label Woven",
    "BWO Shell 65% Polyester 35% Cotton",
    "0.31 45 30 China",
    "",
])
def test_resolve_rejects_non_suppliers(resolver, line):
    assert resolver.resolve(line) is None


def test_resolve_rejects_own_description(resolver):
    assert resolver.resolve("Nylon Ripstop 209264155", exclude_text="Nylon Ripstop") is None


def test_is_plausible_length(resolver):
    assert not resolver.is_plausible("Acme")
    assert not resolver.is_plausible("A" * 100)
    assert resolver.is_plausible("Acme Mills")


def test_build_supplier_numeric_fields(supplier_parser):
    supplier = supplier_parser.build_supplier("Finotex", "Finotex 0.18 60 45 China")
    assert supplier.name == "Finotex"
    assert supplier.standard_cost == pytest.approx(0.18)
    assert supplier.purchase_cost == 0
    assert supplier.lead_time_with_greige == 60
    assert supplier.lead_time_without_greige == 45
    assert supplier.country == "China"
    assert supplier.article_number == TBD


def test_single_lead_time_fills_with_greige_only(supplier_parser):
    assert supplier_parser.extract_lead_times("Finotex 0.40 30 Sri Lanka") == (30, 0)


def test_lead_times_ignore_costs_and_long_numbers(supplier_parser):
    assert supplier_parser.extract_lead_times("Texpak 1.00 556677 200 14 7") == (14, 7)
    assert supplier_parser.extract_lead_times("Texpak") == (0, 0)


def test_extract_cost(supplier_parser):
    assert supplier_parser.extract_cost("Texpak 1.00 30 14") == 1.0
    assert supplier_parser.extract_cost("Texpak 250.00 30 14") == 0.0
    assert supplier_parser.extract_cost("Texpak 30 14") == 0.0


def test_extract_article_number(supplier_parser):
    assert supplier_parser.extract_article_number("Texpak 0.22 14 7 China 556677") == "556677"
    assert supplier_parser.extract_article_number("Texpak 0.22 n/a") == "n/a"
    assert supplier_parser.extract_article_number("Texpak 0.22 tbd") == TBD
    assert supplier_parser.extract_article_number("123456 Avery 0.2", "123456") == TBD


def test_extract_country(supplier_parser):
    assert supplier_parser.extract_country("PT BSN 2.85 60 45 Indonesia") == "Indonesia"
    assert supplier_parser.extract_country("Finotex 0.40 30 Sri Lanka") == "Sri Lanka"
    assert supplier_parser.extract_country("Finotex 0.40 30") == UNASSIGNED


def test_parse_reads_numbers_from_next_line(supplier_parser):
    block = make_block(["123456 Woven Label", "Avery Dennison", "0.31 45 30 China"])
    suppliers = supplier_parser.parse(block, "123456", description="Woven Label")
    assert len(suppliers) == 1
    supplier = suppliers[0]
    assert supplier.name == "Avery Dennison"
    assert supplier.standard_cost == pytest.approx(0.31)
    assert (supplier.lead_time_with_greige, supplier.lead_time_without_greige) == (45, 30)
    assert supplier.country == "China"


def test_parse_deduplicates_names(supplier_parser):
    block = make_block([
        "123456 Woven Label",
        "Avery Dennison 0.25 45 30 China",
        "Avery Dennison 0.30 40 20 Vietnam",
        "Finotex 0.18 60 45 China",
    ])
    suppliers = supplier_parser.parse(block, "123456", description="Woven Label")
    assert [s.name for s in suppliers] == ["Avery Dennison", "Finotex"]
    assert suppliers[0].country == "China"


def test_parse_stops_at_next_item_line(supplier_parser):
    block = make_block(["123456 Woven Label", "654321 Other", "Avery Dennison 0.2 10 5 China"])
    assert supplier_parser.parse(block, "123456", description="Woven Label") == []


def test_parse_ignores_lines_before_anchor(supplier_parser):
    block = make_block(["Avery Dennison 0.2 10 5 China", "", "Care Label 675351 White"], anchor_index=2)
    assert supplier_parser.parse(block, "675351", description="Care Label") == []


def test_parse_respects_scan_limit():
    parser = SupplierBlockParser(scan_lines=2)
    block = make_block(["123456 Woven Label", "", "Avery Dennison 0.2 10 5 China"])
    assert parser.parse(block, "123456", description="Woven Label") == []
