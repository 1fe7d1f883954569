from typing import Dict, List

import pytest
from click.testing import CliRunner

from content_undo.serialization import serialize
from content_undo.undo import ContentDescriber


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def describer() -> ContentDescriber:
    return ContentDescriber()


@pytest.fixture
def complete_records() -> List[Dict]:
    """One record per described type, with every column its description needs."""
    return [
        {"id": 1, "type": "headline", "headline": serialize({"unit": "h2", "value": "Welcome"})},
        {"id": 2, "type": "text", "text": "<p>Some <strong>rich</strong> text</p>"},
        {"id": 3, "type": "html", "html": "<div>raw</div>"},
        {"id": 4, "type": "list", "listitems": serialize(["a", "b", "c"])},
        {"id": 5, "type": "table", "tableitems": serialize([["x", "y"], ["p", "q"]])},
        {"id": 6, "type": "accordionStart", "mooHeadline": "Section"},
        {"id": 7, "type": "accordionStop"},
        {"id": 8, "type": "accordionSingle", "mooHeadline": "", "text": "Tom & Jerry"},
        {"id": 9, "type": "sliderStart", "headline": "Gallery"},
        {"id": 10, "type": "sliderStop", "headline": ""},
        {"id": 11, "type": "code", "code": "if a < b:"},
        {"id": 12, "type": "markdown", "markdown": "# Title"},
        {"id": 13, "type": "hyperlink", "url": "https://example.com"},
        {"id": 14, "type": "toplink", "linkTitle": "Back to top"},
        {"id": 15, "type": "youtube", "youtube": "dQw4w9WgXcQ"},
        {"id": 16, "type": "vimeo", "vimeo": "76979871"},
    ]
