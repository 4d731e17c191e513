"""
Serializers for extracted items.
"""
from .csv_exporter import (
    ITEM_HEADERS,
    TEMPLATE_HEADERS,
    LabelRoute,
    route_item,
    items_to_csv,
    items_to_template_csv,
    write_csv,
)

__all__ = [
    'ITEM_HEADERS',
    'TEMPLATE_HEADERS',
    'LabelRoute',
    'route_item',
    'items_to_csv',
    'items_to_template_csv',
    'write_csv',
]
