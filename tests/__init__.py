"""Tests for content-undo."""
from pathlib import Path

this_directory = Path(__file__).resolve().parent
INPUT_DIR = this_directory / "input"
RECORDS_PATH = INPUT_DIR / "records.yaml"
CONFIG_PATH = INPUT_DIR / "config.yaml"
