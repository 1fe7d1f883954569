import pytest

from content_undo.undo import (
    ContentDescriber,
    ContentUndoDescriptionListener,
    MissingFieldError,
    UndoDescriptionEvent,
)


@pytest.fixture
def listener(describer) -> ContentUndoDescriptionListener:
    return ContentUndoDescriptionListener(describer)


def test_sets_description(listener):
    event = UndoDescriptionEvent("content", {"id": 5, "type": "accordionStop"})
    listener(event)
    assert event.description == "ID 5"


def test_unknown_type_sets_no_description(listener):
    event = UndoDescriptionEvent("content", {"id": 5, "type": "image"}, description="previous")
    listener(event)
    assert event.description is None


def test_other_table_is_untouched(listener):
    event = UndoDescriptionEvent("page", {"id": 5, "type": "accordionStop"}, description="kept")
    listener(event)
    assert event.description == "kept"


def test_event_data_is_not_changed(listener):
    data = {"id": 5, "type": "toplink", "linkTitle": "Top"}
    event = UndoDescriptionEvent("content", data)
    listener(event)
    assert event.get_data() == {"id": 5, "type": "toplink", "linkTitle": "Top"}
    assert event.get_data() is not data


def test_errors_propagate(listener):
    event = UndoDescriptionEvent("content", {"type": "code"})
    with pytest.raises(MissingFieldError):
        listener(event)
    assert event.description is None


def test_default_describer():
    listener = ContentUndoDescriptionListener()
    assert isinstance(listener.describer, ContentDescriber)
    event = UndoDescriptionEvent("content", {"type": "vimeo", "vimeo": "123"})
    listener(event)
    assert event.description == "123"
