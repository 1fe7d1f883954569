import pytest

from content_undo.undo import InvalidRecordError, MissingFieldError, parse_record
from content_undo.undo.records import AccordionSingleRecord, HyperlinkRecord, TextRecord


def test_parse_selects_variant():
    record = parse_record({"id": "7", "type": "text", "text": "Hi", "headline": "ignored"})
    assert isinstance(record, TextRecord)
    assert record.id == "7"
    assert record.text == "Hi"
    assert not hasattr(record, "headline")


def test_optional_columns():
    record = parse_record({"type": "accordionSingle"})
    assert isinstance(record, AccordionSingleRecord)
    assert record.mooHeadline is None
    with pytest.raises(MissingFieldError):
        record.require("text")


def test_id_is_optional():
    record = parse_record({"type": "hyperlink", "url": "https://example.com"})
    assert isinstance(record, HyperlinkRecord)
    assert record.id is None


def test_missing_column():
    with pytest.raises(MissingFieldError) as exc_info:
        parse_record({"id": 1, "type": "youtube"})
    assert exc_info.value.field == "youtube"


def test_unknown_type_is_invalid():
    with pytest.raises(InvalidRecordError):
        parse_record({"type": "image"})


def test_records_are_frozen():
    record = parse_record({"type": "text", "text": "Hi"})
    with pytest.raises(Exception):
        record.text = "changed"
