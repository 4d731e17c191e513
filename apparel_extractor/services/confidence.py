"""
Confidence scoring for an extraction run.

The score compares fields that were populated with fields that were expected.
Expectations adapt to the document: supplier completeness only counts for
items that have suppliers, and fiber/finish only count where they were found,
so a document that simply lacks that data is not penalized.
"""
import math
from typing import Sequence

from apparel_extractor.models import UNASSIGNED, Item, ValidationReport, ValidationWarning

DESCRIPTION_WARNING = "Description missing or incomplete"

ALL_DESCRIPTIONS_FLOOR = 97
MOST_DESCRIPTIONS_FLOOR = 95
MOST_DESCRIPTIONS_RATE = 0.9


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ConfidenceValidator:
    """Score extraction completeness and collect per-item warnings."""

    def validate(self, items: Sequence[Item]) -> ValidationReport:
        """
        Build the validation report for the combined fabric + trim list.

        Args:
            items: All extracted items

        Returns:
            ValidationReport with a 0-100 confidence score
        """
        warnings = []
        successful = 0
        expected = 0
        with_suppliers = 0

        for item in items:
            expected += 2
            if item.number:
                successful += 1
            if item.description and not item.has_placeholder_description:
                successful += 1
            else:
                warnings.append(ValidationWarning(
                    item_number=item.number,
                    issue=DESCRIPTION_WARNING,
                    severity="medium",
                ))

            if item.suppliers:
                with_suppliers += 1
                for supplier in item.suppliers:
                    expected += 2
                    if supplier.name:
                        successful += 1
                    if supplier.country and supplier.country != UNASSIGNED:
                        successful += 1

            if item.fiber_content != UNASSIGNED:
                successful += 1
                expected += 1
            if item.material_finish != UNASSIGNED:
                successful += 1
                expected += 1

        if expected == 0:
            score = 100 if items else 0
        else:
            score = _round_half_up(successful / expected * 100)

        score = self._apply_floors(score, items, with_suppliers)

        return ValidationReport(
            total_items=len(items),
            items_with_suppliers=with_suppliers,
            items_without_suppliers=len(items) - with_suppliers,
            confidence_score=score,
            warnings=warnings,
        )

    def _apply_floors(self, score: int, items: Sequence[Item], with_suppliers: int) -> int:
        if not items:
            return score

        described = sum(1 for item in items if not item.has_placeholder_description)
        rate = described / len(items)

        if rate == 1:
            if with_suppliers > 0 or any(item.fiber_content != UNASSIGNED for item in items):
                return 100
            return max(score, ALL_DESCRIPTIONS_FLOOR)
        if rate >= MOST_DESCRIPTIONS_RATE:
            return max(score, MOST_DESCRIPTIONS_FLOOR)
        return score
