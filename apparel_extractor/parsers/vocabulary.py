"""
Domain vocabulary used by the specification parsers.

Kept as plain data so the word lists can be extended without touching
the matching code.
"""

# Lines that never define an item (cost headers, totals, page footers, material lists)
BOILERPLATE_PATTERNS = [
    r'^FOB\b',
    r'^CIF\b',
    r'^Unit\s+Cost\b',
    r'^Total\b',
    r'^Component\s+-\s+Material\b',
    r'^Material\s+\d{6}\b',
    r'^Part:',
    r'^Page\s+\d+\s+of\b',
]

UNIT_OF_MEASURE_TOKENS = ['lb', 'ea', 'yds', 'yd', 'pcs']
FABRIC_UNITS = {'lb', 'yd', 'yds'}
TRIM_UNITS = {'ea', 'pcs'}

FABRIC_KEYWORDS = ['fabric', 'textile', 'cloth', 'yarn', 'jersey']

COLOR_NAMES = [
    'White', 'Black', 'Grey', 'Gray', 'Red', 'Blue', 'Green', 'Yellow', 'Brown',
    'Pink', 'Purple', 'Orange', 'Beige', 'Tan', 'Navy', 'Cream', 'Natural',
    'Stock', 'Artwork',
]

# Component-type prefixes removed from the front of a description
COMPONENT_PREFIXES = ['Alt Shell', 'Shell', 'Insulation', 'Label', 'Hangtag', 'Packaging']

FIBER_NAMES = ['Polyester', 'Cotton', 'Nylon', 'Acrylic', 'Spandex', 'Wool']

FINISH_PHRASES = [
    r'Antique\s+Silver\s+Finish',
    r'Black,?\s*white',
    r'White,?\s*Black',
    r'Grill,?\s*Columbia\s+Grey',
    r'Black,?\s*Shark,?\s*Shark',
]

# (pattern, canonical name). Longer names come before their prefixes.
SUPPLIER_ALIASES = [
    (r'\bAvery\s+Dennison\b', 'Avery Dennison'),
    (r'\bAvery\b', 'Avery'),
    (r'\bHang\s+Sang\s+Press\b', 'Hang Sang Press'),
    (r'\bHang\s+Sang\b', 'Hang Sang'),
    (r'\bPT\s+BSN\b', 'PT BSN'),
    (r'\bNexgen\b', 'Nexgen'),
    (r'\bBao\s+Shen\b', 'Bao Shen'),
    (r'\bFinotex\b', 'Finotex'),
    (r'\bManohar\b', 'Manohar'),
    (r'\bTexpak\b', 'Texpak'),
    (r'\bFGV\b', 'FGV'),
    (r'\bContractor\b', 'Contractor'),
]

COMPANY_SUFFIXES = [
    'Global', r'Ltd\.?', r'Inc\.?', 'Apparel', 'MSO', 'Sourced', 'Contractor', 'Era',
    'Kewalram', 'Packaging', 'Dennison', r'Enterprises?', 'Group', 'Manufacturing',
    'Trading', 'International', 'Corporation',
]

COMPANY_FORMS = [r'Co\.', r'Corp\.?', 'Company', 'Filaments', r'Textiles?', 'Industries', r'Systems?']

# Field labels that look like capitalized names but never are suppliers
NON_SUPPLIER_LABELS = [
    'Size', 'Color', 'Colour', 'Width', 'Length', 'Weight', 'Price', 'Cost', 'Lead',
    'Time', 'Days', 'Greige', 'Shell', 'Alt Shell', 'Insulation', 'Label', 'Main Label',
    'Care Label', 'Hangtag', 'Packaging', 'Fabric', 'Trim', 'Material', 'Description',
    'Content', 'Care', 'Item', 'Supplier', 'Country', 'Article', 'Unit', 'Page', 'Finish',
]

COUNTRIES = [
    'China', 'Vietnam', 'USA', 'United States', 'Hong Kong', 'El Salvador',
    'India', 'Canada', 'Mexico', 'Bangladesh', 'Thailand', 'Indonesia',
    'Pakistan', 'Cambodia', 'Haiti', 'Guatemala', 'Taiwan', 'South Korea',
    'Japan', 'Philippines', 'Sri Lanka', 'Turkey', 'Italy', 'Portugal',
    'Morocco', 'Tunisia', 'Egypt', 'Jordan', 'Myanmar', 'Malaysia',
]
