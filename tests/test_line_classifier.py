import pytest

from apparel_extractor.parsers import LineClassifier, LineKind, SectionState


@pytest.fixture
def classifier():
    return LineClassifier()


def test_blank_line_keeps_state(classifier):
    state = SectionState.trim()
    kind, new_state = classifier.classify("   ", state)
    assert kind == LineKind.BLANK
    assert new_state == state


@pytest.mark.parametrize("line", [
    "FOB Shanghai",
    "CIF 12.50",
    "Unit Cost 0.25",
    "Total 123456",
    "Component - Material list",
    "Material 123456 listing",
    "Part: Body",
    "Page 3 of 12",
])
def test_boilerplate_lines_are_noise(classifier, line):
    kind, state = classifier.classify(line, SectionState())
    assert kind == LineKind.NOISE
    assert state == SectionState()


def test_fabric_marker_switches_section(classifier):
    kind, state = classifier.classify("Fabric", SectionState.trim())
    assert kind == LineKind.SECTION_MARKER
    assert state.in_fabric_section
    assert not state.in_trim_section


def test_trim_marker_switches_section(classifier):
    kind, state = classifier.classify("Trim and Labels", SectionState.fabric())
    assert kind == LineKind.SECTION_MARKER
    assert state.in_trim_section
    assert not state.in_fabric_section


@pytest.mark.parametrize("line", ["Fabric Width 58 in", "Fabric Content", "Trim Specific notes", "Fabrication"])
def test_marker_exclusions_are_plain_text(classifier, line):
    kind, state = classifier.classify(line, SectionState())
    assert kind == LineKind.TEXT
    assert state == SectionState()


def test_item_candidate(classifier):
    kind, _ = classifier.classify("Care Label 675351 White", SectionState())
    assert kind == LineKind.ITEM_CANDIDATE


def test_seven_digit_run_is_not_a_candidate(classifier):
    kind, _ = classifier.classify("Order 1234567", SectionState())
    assert kind == LineKind.TEXT


def test_section_label(classifier):
    assert classifier.section_label(SectionState.fabric()) == "fabric"
    assert classifier.section_label(SectionState.trim()) == "trim"
    assert classifier.section_label(SectionState()) is None
