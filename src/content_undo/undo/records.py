"""
Typed content element records.

One model per supported element type, each carrying only the columns its
description needs. Unknown columns are ignored.
"""
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

RecordId = Union[int, str]


class InvalidRecordError(ValueError):
    """Raised when a record cannot be turned into a content element."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        super().__init__(message)
        self.type_name = type_name


class MissingFieldError(InvalidRecordError):
    """Raised when a column needed for a description is absent."""

    def __init__(self, field: str, type_name: str):
        super().__init__(f"Field '{field}' is required to describe a '{type_name}' element", type_name)
        self.field = field


class ContentRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Optional[RecordId] = None

    def require(self, field: str) -> Any:
        """
        Value of a field that may only be absent when it is not used.

        :param field:
        :return:
        """
        value = getattr(self, field)
        if value is None:
            raise MissingFieldError(field, self.type)
        return value


class HeadlineRecord(ContentRecord):
    type: Literal["headline"]
    headline: Any
    """Serialized unit: {"unit": "h1", "value": "..."}"""


class TextRecord(ContentRecord):
    type: Literal["text"]
    text: str


class HtmlRecord(ContentRecord):
    type: Literal["html"]
    html: str


class ListRecord(ContentRecord):
    type: Literal["list"]
    listitems: Any


class TableRecord(ContentRecord):
    type: Literal["table"]
    tableitems: Any


class AccordionStartRecord(ContentRecord):
    type: Literal["accordionStart"]
    mooHeadline: Optional[str] = None


class AccordionStopRecord(ContentRecord):
    type: Literal["accordionStop"]


class AccordionSingleRecord(ContentRecord):
    type: Literal["accordionSingle"]
    mooHeadline: Optional[str] = None
    text: Optional[str] = None


class SliderStartRecord(ContentRecord):
    type: Literal["sliderStart"]
    headline: Optional[str] = None


class SliderStopRecord(ContentRecord):
    type: Literal["sliderStop"]
    headline: Optional[str] = None


class CodeRecord(ContentRecord):
    type: Literal["code"]
    code: str


class MarkdownRecord(ContentRecord):
    type: Literal["markdown"]
    markdown: str


class HyperlinkRecord(ContentRecord):
    type: Literal["hyperlink"]
    url: str


class ToplinkRecord(ContentRecord):
    type: Literal["toplink"]
    linkTitle: Optional[str] = None


class YoutubeRecord(ContentRecord):
    type: Literal["youtube"]
    youtube: str


class VimeoRecord(ContentRecord):
    type: Literal["vimeo"]
    vimeo: str


AnyContentRecord = Annotated[
    Union[
        HeadlineRecord,
        TextRecord,
        HtmlRecord,
        ListRecord,
        TableRecord,
        AccordionStartRecord,
        AccordionStopRecord,
        AccordionSingleRecord,
        SliderStartRecord,
        SliderStopRecord,
        CodeRecord,
        MarkdownRecord,
        HyperlinkRecord,
        ToplinkRecord,
        YoutubeRecord,
        VimeoRecord,
    ],
    Field(discriminator="type"),
]

_record_adapter = TypeAdapter(AnyContentRecord)


def parse_record(data: Mapping[str, Any]) -> ContentRecord:
    """
    Build the typed record for a raw row.

    The input mapping is copied, never modified.

    :param data: raw row, must contain a ``type`` key
    :return: the matching record model
    :raises MissingFieldError: if a required column is absent
    :raises InvalidRecordError: for any other invalid value
    """
    row: Dict[str, Any] = dict(data)
    type_name = row.get("type")
    try:
        return _record_adapter.validate_python(row)
    except ValidationError as e:
        errors = e.errors()
        for error in errors:
            if error["type"] == "missing" and error["loc"]:
                raise MissingFieldError(str(error["loc"][-1]), type_name) from e
        raise InvalidRecordError(
            f"Invalid '{type_name}' record: {errors[0]['msg']} at {errors[0]['loc']}", type_name
        ) from e
