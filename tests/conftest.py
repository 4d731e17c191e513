import pytest

from apparel_extractor.parsers import SpecificationParser

SAMPLE_SPEC = """Columbia Sportswear Bill of Materials
Page 1 of 2
Fabric
Nylon Ripstop 209264155 Black yd
Shell: 100% Nylon Exclusive of Trimming
PT BSN 2.85 60 45 Indonesia TBD


Trim
123456 Columbia Bug Woven Label White, Black ea
Avery Dennison 0.25 45 30 China

Care Label 675351 White
BWO Shell 65% Polyester 35% Cotton
Care 1234
Hang Sang Press 0.18 60 45 Hong Kong
100200 100300 100400 Total
"""


@pytest.fixture
def parser():
    return SpecificationParser()


@pytest.fixture
def sample_text():
    return SAMPLE_SPEC


@pytest.fixture
def sample_inventory(parser, sample_text):
    return parser.parse_text(sample_text)


@pytest.fixture
def sample_file(tmp_path, sample_text):
    path = tmp_path / "bom.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path
