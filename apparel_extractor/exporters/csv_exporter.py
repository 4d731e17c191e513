"""
CSV export of extracted items.

Two layouts are produced: a flat item sheet with one row per item/supplier
pair, and the 21-column label template where each item lands in the column
group of the label it most likely is (main label, care label, hangtag, RFID
sticker or UPC sticker).
"""
import csv
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from apparel_extractor.models import UNASSIGNED, Item, Supplier


ITEM_HEADERS = [
    'Item Number',
    'Category',
    'Description',
    'UM',
    'Colors',
    'Fiber Content',
    'Material Finish',
    'Content Code',
    'Care Code',
    'Supplier',
    'Art No',
    'Country',
    'Std Cost',
    'Pur Cost',
    'Lead Time w/ Greige',
    'Lead Time w/o Greige',
]

TEMPLATE_HEADERS = [
    'Main Label',
    'Main Label Color',
    'Supplier',
    'Additional Main Label',
    'Main Label Color',
    'Supplier',
    'Care Label',
    'Care Label Color',
    'Supplier',
    'Content Code',
    'Fibre Composition (Depende sa Color)',
    'TP FC',
    'Care Code',
    'Hangtag',
    'Supplier',
    'Hangtag',
    'Supplier',
    'RFID Sticker',
    'Supplier',
    'UPC Sticker (Polybag)',
    'Supplier',
]


@dataclass(frozen=True)
class LabelRoute:
    """Where an item of one label kind is written in the template row."""

    name: str
    keywords: Tuple[str, ...]
    number_prefixes: Tuple[str, ...]
    number_column: int
    supplier_column: int
    color_column: Optional[int] = None

    def matches(self, item: Item) -> bool:
        description = item.description.lower()
        if any(keyword in description for keyword in self.keywords):
            return True
        return item.number.startswith(self.number_prefixes)


MAIN_LABEL = LabelRoute(
    name='main_label',
    keywords=('main label', 'woven', 'columbia bug'),
    number_prefixes=('003287', '114794', '77027'),
    number_column=0,
    color_column=1,
    supplier_column=2,
)

# Checked in order; the first matching route wins, MAIN_LABEL is the fallback.
LABEL_ROUTES = [
    MAIN_LABEL,
    LabelRoute(
        name='care_label',
        keywords=('care',),
        number_prefixes=('67535',),
        number_column=6,
        color_column=7,
        supplier_column=8,
    ),
    LabelRoute(
        name='hangtag',
        keywords=('hangtag', 'hang', 'msrp', 'no tech'),
        number_prefixes=('097305', '112204'),
        number_column=13,
        supplier_column=14,
    ),
    LabelRoute(
        name='rfid_sticker',
        keywords=('rfid',),
        number_prefixes=('121612',),
        number_column=17,
        supplier_column=18,
    ),
    LabelRoute(
        name='upc_sticker',
        keywords=('upc', 'sticker', 'polybag'),
        number_prefixes=('980010', '980001'),
        number_column=19,
        supplier_column=20,
    ),
]

CARE_CONTENT_CODE_COLUMN = 9
CARE_FIBER_COLUMN = 10
CARE_CODE_COLUMN = 12


def route_item(item: Item) -> LabelRoute:
    """Pick the template column group for an item."""
    for route in LABEL_ROUTES:
        if route.matches(item):
            return route
    return MAIN_LABEL


def _color_text(item: Item) -> str:
    if item.colors:
        return ', '.join(item.colors)
    if item.material_finish != UNASSIGNED:
        return item.material_finish
    return ''


def _supplier_rows(item: Item) -> List[Optional[Supplier]]:
    return list(item.suppliers) if item.suppliers else [None]


def _format_number(value: float) -> str:
    return f"{value:g}"


def _item_row(item: Item, supplier: Optional[Supplier]) -> List[str]:
    row = [
        item.number,
        item.category.value,
        item.description,
        item.unit_of_measure,
        ', '.join(item.colors),
        item.fiber_content,
        item.material_finish,
        item.content_code,
        item.care_code,
    ]
    if supplier is None:
        row.extend([''] * 7)
    else:
        row.extend([
            supplier.name,
            supplier.article_number,
            supplier.country,
            _format_number(supplier.standard_cost),
            _format_number(supplier.purchase_cost),
            str(supplier.lead_time_with_greige),
            str(supplier.lead_time_without_greige),
        ])
    return row


def _template_row(item: Item, supplier: Optional[Supplier]) -> List[str]:
    row = [''] * len(TEMPLATE_HEADERS)
    route = route_item(item)
    supplier_name = supplier.name if supplier else ''

    row[route.number_column] = item.number
    row[route.supplier_column] = supplier_name
    if route.color_column is not None:
        row[route.color_column] = _color_text(item)

    if route.name == 'care_label':
        row[CARE_CONTENT_CODE_COLUMN] = item.content_code
        row[CARE_FIBER_COLUMN] = item.fiber_content if item.fiber_content != UNASSIGNED else ''
        row[CARE_CODE_COLUMN] = item.care_code
    return row


def _render(headers: Sequence[str], rows: Iterable[List[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue()


def items_to_csv(items: Iterable[Item]) -> str:
    """Flat item sheet: one row per item/supplier pair."""
    rows = (
        _item_row(item, supplier)
        for item in items
        for supplier in _supplier_rows(item)
    )
    return _render(ITEM_HEADERS, rows)


def items_to_template_csv(items: Iterable[Item]) -> str:
    """21-column label template: one row per item/supplier pair."""
    rows = (
        _template_row(item, supplier)
        for item in items
        for supplier in _supplier_rows(item)
    )
    return _render(TEMPLATE_HEADERS, rows)


def write_csv(content: str, output_path: str | Path) -> None:
    """Write CSV text to disk, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding='utf-8')
