"""
Models for the fabric/trim inventory recovered from a specification document.
"""
from enum import Enum
from typing import List
from pydantic import BaseModel, Field, computed_field, field_validator

from .base import PageInfo, Statistics


UNASSIGNED = "unassigned"
TBD = "TBD"
DEFAULT_UNIT_OF_MEASURE = "ea"
UNITS_OF_MEASURE = ("lb", "yd", "yds", "ea", "pcs")


def placeholder_description(number: str) -> str:
    """Sentinel description meaning "no description could be extracted"."""
    return f"Item {number}"


class Category(str, Enum):
    """Inventory category an item is filed under."""

    FABRIC = "fabric"
    TRIM = "trim"


class Supplier(BaseModel):
    """One supplier quote attached to an item."""

    name: str = Field(..., min_length=1, description="Resolved supplier name")
    article_number: str = Field(TBD, description="6-digit article number, 'TBD' or 'n/a'")
    country: str = Field(UNASSIGNED, description="Country of origin or 'unassigned'")
    standard_cost: float = Field(0.0, ge=0, description="Standard unit cost, 0 when not found")
    purchase_cost: float = Field(0.0, ge=0, description="Reserved; never populated by extraction")
    lead_time_with_greige: int = Field(0, ge=0, description="Lead time in days including greige")
    lead_time_without_greige: int = Field(0, ge=0, description="Lead time in days without greige")

    @field_validator('name', mode='before')
    @classmethod
    def clean_name(cls, v):
        """Collapse internal whitespace in supplier names."""
        if isinstance(v, str):
            return ' '.join(v.split())
        return v


class Item(BaseModel):
    """A single fabric or trim line item."""

    number: str = Field(..., pattern=r'^(\d{6}|\d{8}|\d{9})$', description="Item number")
    description: str = Field(..., min_length=1, description="Item description or placeholder")
    unit_of_measure: str = Field(DEFAULT_UNIT_OF_MEASURE, description="lb, yd, yds, ea or pcs")
    colors: List[str] = Field(default_factory=list, description="Recognized color names")
    content_code: str = Field("", description="Fiber content label code")
    care_code: str = Field("", description="4-digit care code")
    fiber_content: str = Field(UNASSIGNED, description="Fiber composition")
    material_finish: str = Field(UNASSIGNED, description="Finish or color summary")
    trim_specific: str = Field("", description="Reserved trim-specific notes")
    category: Category = Field(..., description="fabric or trim")
    suppliers: List[Supplier] = Field(default_factory=list, description="Supplier quotes")

    @field_validator('unit_of_measure', mode='before')
    @classmethod
    def clean_unit_of_measure(cls, v):
        """Normalize and restrict the unit of measure."""
        if not v:
            return DEFAULT_UNIT_OF_MEASURE
        v = str(v).strip().lower()
        if v not in UNITS_OF_MEASURE:
            raise ValueError(f"unsupported unit of measure: {v}")
        return v

    @field_validator('description', 'fiber_content', 'material_finish', mode='before')
    @classmethod
    def clean_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def has_placeholder_description(self) -> bool:
        return self.description == placeholder_description(self.number)


class ValidationWarning(BaseModel):
    """A per-item issue reported by the confidence validator."""

    item_number: str
    issue: str
    severity: str = "medium"


class ValidationReport(BaseModel):
    """Completeness estimate for one extraction run."""

    total_items: int = Field(..., ge=0)
    items_with_suppliers: int = Field(..., ge=0)
    items_without_suppliers: int = Field(..., ge=0)
    confidence_score: int = Field(..., ge=0, le=100)
    warnings: List[ValidationWarning] = Field(default_factory=list)

    @computed_field
    @property
    def warnings_count(self) -> int:
        return len(self.warnings)


class ExtractionResult(BaseModel):
    """Complete extraction output: both inventories plus the validation report."""

    source: str = Field(..., description="Path or label of the source document")
    source_kind: str = Field(..., description="'pdf' or 'text'")
    fabrics: List[Item] = Field(default_factory=list)
    trims: List[Item] = Field(default_factory=list)
    validation: ValidationReport
    statistics: Statistics
    pages: List[PageInfo] = Field(default_factory=list)

    @property
    def items(self) -> List[Item]:
        """Fabrics followed by trims."""
        return [*self.fabrics, *self.trims]
