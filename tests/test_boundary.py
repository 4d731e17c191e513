import pytest

from apparel_extractor.parsers import ItemBoundaryResolver, detect_item_number
from apparel_extractor.parsers.boundary import count_number_runs, starts_with_item_number


@pytest.mark.parametrize("line,expected", [
    ("Ref 123456 item 209264155", "209264155"),
    ("Lot 123456 style 12345678", "12345678"),
    ("654321: Hangtag", "654321"),
    ("Care Label 675351 White", "675351"),
    ("Order 1234567", None),
    ("no numbers here", None),
])
def test_detect_item_number_priority(line, expected):
    assert detect_item_number(line) == expected


def test_count_number_runs():
    assert count_number_runs("100200 100300 100400 Total") == 3
    assert count_number_runs("Hangtag 112204 ref 300100") == 2
    assert count_number_runs("0.25 45 30") == 0


def test_starts_with_item_number():
    assert starts_with_item_number("  123456 Woven Label")
    assert not starts_with_item_number("Woven Label 123456")


def test_resolve_rejects_summary_rows():
    resolver = ItemBoundaryResolver()
    lines = ["100200 100300 100400 Total"]
    assert resolver.resolve(lines, 0, frozenset()) is None


def test_resolve_accepts_two_number_runs():
    resolver = ItemBoundaryResolver()
    candidate = resolver.resolve(["Hangtag 112204 ref 300100"], 0, frozenset())
    assert candidate is not None
    assert candidate.number == "112204"


def test_resolve_skips_seen_numbers():
    resolver = ItemBoundaryResolver()
    seen = resolver.mark_seen(frozenset(), "123456")
    assert resolver.resolve(["123456 Woven Label"], 0, seen) is None


def test_mark_seen_returns_new_set():
    seen = frozenset({"111111"})
    updated = ItemBoundaryResolver.mark_seen(seen, "222222")
    assert updated == {"111111", "222222"}
    assert seen == {"111111"}


def test_context_block_lookback_and_next_item():
    resolver = ItemBoundaryResolver(lookback=3, max_window=25)
    lines = ["a", "b", "c", "d", "123456 Label", "Avery 0.2 10 5", "654321 Other", "e"]
    block = resolver.context_block(lines, 4)
    assert block.start == 1
    assert block.end == 6
    assert block.lines == ("b", "c", "d", "123456 Label", "Avery 0.2 10 5")
    assert block.anchor_line == "123456 Label"


def test_context_block_window_cap():
    resolver = ItemBoundaryResolver(lookback=3, max_window=25)
    lines = ["filler"] * 10 + ["123456 Label"] + ["filler"] * 40
    block = resolver.context_block(lines, 10)
    assert block.start == 7
    assert block.end == 32
    assert len(block.lines) == 25


def test_context_block_at_document_start():
    resolver = ItemBoundaryResolver()
    block = resolver.context_block(["123456 Label"], 0)
    assert block.start == 0
    assert block.end == 1
    assert block.anchor_index == 0
