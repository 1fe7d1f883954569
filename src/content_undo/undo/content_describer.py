"""Undo descriptions for content elements."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, ClassVar, List, Mapping, Optional, Tuple, Union

from content_undo.config import DescriberConfig
from content_undo.formatters.format_utils import (
    as_text,
    escape_html,
    is_blank,
    join_values,
    substr,
    substr_html,
)
from content_undo.serialization import deserialize
from content_undo.undo.records import (
    AccordionSingleRecord,
    AccordionStartRecord,
    AccordionStopRecord,
    CodeRecord,
    ContentRecord,
    HeadlineRecord,
    HtmlRecord,
    HyperlinkRecord,
    ListRecord,
    MarkdownRecord,
    MissingFieldError,
    SliderStartRecord,
    SliderStopRecord,
    TableRecord,
    TextRecord,
    ToplinkRecord,
    VimeoRecord,
    YoutubeRecord,
    parse_record,
)

logger = logging.getLogger(__name__)

Deserializer = Callable[[Any], Any]
Escaper = Callable[[Any], str]


@dataclass
class ContentDescriber:
    """
    Derives a short human readable summary of a content element.

    The summary is picked by the element ``type``; types without a formatter
    yield None.

    >>> describer = ContentDescriber()
    >>> describer.describe("content", {"type": "hyperlink", "url": "https://example.com"})
    'https://example.com'
    >>> describer.describe("content", {"type": "image", "id": 3}) is None
    True
    """

    deserializer: Deserializer = deserialize
    """Decodes serialized columns (headline, listitems, tableitems)"""

    escaper: Escaper = escape_html

    config: DescriberConfig = field(default_factory=DescriberConfig)

    # image and gallery need a file lookup and are not described
    unsupported_types: ClassVar[Tuple[str, ...]] = ("image", "gallery")

    _formatters: Mapping[str, Callable[[Any], str]] = field(init=False, repr=False)

    def __post_init__(self):
        self._formatters = MappingProxyType(
            {
                "headline": self._describe_headline,
                "text": self._describe_text,
                "html": self._describe_html,
                "list": self._describe_list,
                "table": self._describe_table,
                "accordionStart": self._describe_accordion_start,
                "accordionStop": self._describe_accordion_stop,
                "accordionSingle": self._describe_accordion_single,
                "sliderStart": self._describe_slider,
                "sliderStop": self._describe_slider,
                "code": self._describe_code,
                "markdown": self._describe_markdown,
                "hyperlink": self._describe_hyperlink,
                "toplink": self._describe_toplink,
                "youtube": self._describe_youtube,
                "vimeo": self._describe_vimeo,
            }
        )

    @property
    def supported_types(self) -> List[str]:
        return sorted(self._formatters)

    def supports(self, table: str) -> bool:
        return table == self.config.supported_table

    def describe(self, table: str, data: Mapping[str, Any]) -> Optional[str]:
        """
        Describe a record of a table.

        :param table: table the record belongs to
        :param data: the record, with a ``type`` column
        :return: the description, or None if the table or type is not handled
        :raises MissingFieldError: if the record lacks a column its type needs
        """
        if not self.supports(table):
            return None
        type_name = data.get("type")
        formatter = self._formatters.get(type_name)
        if formatter is None:
            if type_name in self.unsupported_types:
                logger.debug(f"Descriptions for {type_name} elements are disabled")
            else:
                logger.debug(f"No description available for content type {type_name}")
            return None
        record = parse_record(data)
        return formatter(record)

    def _id_label(self, record: ContentRecord) -> str:
        return f"ID {record.require('id')}"

    def _describe_headline(self, record: HeadlineRecord) -> str:
        headline = self.deserializer(record.headline)
        if not isinstance(headline, dict) or "value" not in headline:
            raise MissingFieldError("headline.value", record.type)
        return as_text(headline["value"])

    def _describe_text(self, record: TextRecord) -> str:
        return substr_html(
            record.text,
            self.config.text_max_length,
            ellipsis=self.config.ellipsis,
            allowed_tags=self.config.allowed_tags,
        )

    def _describe_html(self, record: HtmlRecord) -> str:
        return substr(
            self.escaper(record.html), self.config.html_max_length, ellipsis=self.config.ellipsis
        )

    def _describe_list(self, record: ListRecord) -> str:
        return join_values(_values(self.deserializer(record.listitems)))

    def _describe_table(self, record: TableRecord) -> str:
        rows = _values(self.deserializer(record.tableitems))
        if not rows:
            return ""
        return join_values(_values(rows[0]))

    def _describe_accordion_start(self, record: AccordionStartRecord) -> str:
        if not is_blank(record.mooHeadline):
            return record.mooHeadline
        return self._id_label(record)

    def _describe_accordion_stop(self, record: AccordionStopRecord) -> str:
        return self._id_label(record)

    def _describe_accordion_single(self, record: AccordionSingleRecord) -> str:
        if not is_blank(record.mooHeadline):
            return record.mooHeadline
        return self.escaper(record.require("text"))

    def _describe_slider(self, record: Union[SliderStartRecord, SliderStopRecord]) -> str:
        if not is_blank(record.headline):
            return record.headline
        return self._id_label(record)

    def _describe_code(self, record: CodeRecord) -> str:
        return self.escaper(record.code)

    def _describe_markdown(self, record: MarkdownRecord) -> str:
        return self.escaper(record.markdown)

    def _describe_hyperlink(self, record: HyperlinkRecord) -> str:
        return record.url

    def _describe_toplink(self, record: ToplinkRecord) -> str:
        if not is_blank(record.linkTitle):
            return record.linkTitle
        return self._id_label(record)

    def _describe_youtube(self, record: YoutubeRecord) -> str:
        return record.youtube

    def _describe_vimeo(self, record: VimeoRecord) -> str:
        return record.vimeo


def _values(value: Any) -> List[Any]:
    # decoded arrays with non sequential keys are dicts
    if isinstance(value, dict):
        return list(value.values())
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is None or value == "":
        return []
    return [value]
