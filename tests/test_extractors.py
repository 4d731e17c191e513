import pytest

from apparel_extractor.errors import AcquisitionFailure, ReadFailure
from apparel_extractor.extractors import PDFTextExtractor, PlainTextExtractor, group_words_into_lines
from apparel_extractor.extractors import pdf_text_extractor


def word(text, x0, x1, top):
    return {'text': text, 'x0': x0, 'x1': x1, 'top': top}


def test_group_words_into_rows():
    words = [
        word('Label', 60, 80, 100.2),
        word('123456', 10, 40, 100.0),
        word('Avery', 10, 30, 120.0),
        word('Dennison', 32, 60, 120.1),
    ]
    assert group_words_into_lines(words) == ['123456 Label', 'Avery Dennison']


def test_group_words_rounds_half_steps_up():
    # 100.25 sits halfway between the 100.0 and 100.5 rows
    words = [word('Woven', 10, 30, 100.25), word('Label', 32, 50, 100.5), word('ea', 60, 70, 100.0)]
    assert group_words_into_lines(words) == ['ea', 'Woven Label']


def test_group_words_joins_punctuation_without_gap():
    words = [word('(', 10, 12, 50.0), word('TBD', 12.5, 30, 50.0), word(')', 30.5, 32, 50.0)]
    assert group_words_into_lines(words) == ['(TBD)']


def test_group_words_large_gap_inserts_space():
    words = [word('0.25', 10, 30, 50.0), word('%', 40, 45, 50.0)]
    assert group_words_into_lines(words) == ['0.25 %']


def test_group_words_skips_blank_words():
    assert group_words_into_lines([word('  ', 10, 20, 5.0)]) == []


class FakePage:
    width = 612
    height = 792

    def __init__(self, words):
        self.words = words

    def extract_words(self, **kwargs):
        return self.words


class FakePDF:
    def __init__(self, pages):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def pdf_path(tmp_path):
    path = tmp_path / "spec.pdf"
    path.write_bytes(b"%PDF-1.4 placeholder")
    return path


def test_pdf_extract_pages(monkeypatch, pdf_path):
    pages = [
        FakePage([word('123456', 10, 40, 100.0), word('Label', 60, 80, 100.0)]),
        FakePage([word('Avery', 10, 30, 20.0)]),
    ]
    monkeypatch.setattr(pdf_text_extractor.pdfplumber, 'open', lambda path: FakePDF(pages))

    pages_data = PDFTextExtractor().extract_pages(pdf_path)
    assert [page['page_num'] for page in pages_data] == [1, 2]
    assert pages_data[0]['lines'] == ['123456 Label']
    assert pages_data[1]['lines'] == ['Avery']
    assert pages_data[0]['width'] == 612


def test_pdf_without_text_fails(monkeypatch, pdf_path):
    monkeypatch.setattr(pdf_text_extractor.pdfplumber, 'open', lambda path: FakePDF([FakePage([])]))
    with pytest.raises(AcquisitionFailure):
        PDFTextExtractor().extract_pages(pdf_path)


def test_pdf_parse_error_is_acquisition_failure(monkeypatch, pdf_path):
    def broken_open(path):
        raise ValueError("not a PDF")

    monkeypatch.setattr(pdf_text_extractor.pdfplumber, 'open', broken_open)
    with pytest.raises(AcquisitionFailure):
        PDFTextExtractor().extract_pages(pdf_path)


def test_pdf_missing_file(tmp_path):
    with pytest.raises(ReadFailure):
        PDFTextExtractor().extract_pages(tmp_path / "missing.pdf")


def test_plain_text_single_page(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"Trim\r\n123456 Woven Label ea\r\n")
    pages_data = PlainTextExtractor().extract_pages(path)
    assert pages_data == [{'page_num': 1, 'lines': ['Trim', '123456 Woven Label ea', '']}]


def test_plain_text_strips_bom(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbfTrim")
    assert PlainTextExtractor().extract_pages(path)[0]['lines'] == ['Trim']


def test_plain_text_invalid_bytes(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ReadFailure):
        PlainTextExtractor().extract_pages(path)


def test_plain_text_missing_file(tmp_path):
    with pytest.raises(ReadFailure):
        PlainTextExtractor().extract_pages(tmp_path / "missing.txt")
