"""Configuration for describers."""
import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field

from content_undo.formatters.format_utils import DEFAULT_ALLOWED_TAGS, DEFAULT_ELLIPSIS

logger = logging.getLogger(__name__)


class DescriberConfig(BaseModel):
    """
    Settings for the content describer.
    """

    supported_table: str = "content"
    """Table whose records are described; records of other tables are ignored"""

    text_max_length: int = Field(100, gt=0)
    """Maximum number of visible characters for text elements"""

    html_max_length: int = Field(100, gt=0)
    """Maximum number of characters for escaped HTML elements"""

    ellipsis: str = DEFAULT_ELLIPSIS
    """Appended to shortened descriptions"""

    allowed_tags: List[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_TAGS))
    """Tags kept when shortening text elements"""


def load_config(config_path: Optional[Union[str, Path]]) -> DescriberConfig:
    """
    Load a describer configuration from a YAML file.

    A missing file (or no path) yields the defaults.

    :param config_path:
    :return:
    """
    if config_path is None:
        return DescriberConfig()
    try:
        with open(config_path, "r") as file:
            config_data = yaml.safe_load(file)
    except FileNotFoundError:
        logger.info(f"No config at {config_path}, using defaults")
        return DescriberConfig()
    return DescriberConfig(**(config_data or {}))
