import logging
from pathlib import Path

import pytest
import structlog

from ours.config import reset_config

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

SAMPLE = """/* ours@2.0 */
# Autumn semester
MATH@BLUE@Mathematics
PHY@#1a2b3c#ffffff@Physics

MATH:book:Room 101:MON:0900:1030
MATH::Room 101:03:1400:1530
PHY:flask:Lab B.2:THU:0800:1000
"""


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    for name in ("OURS_TEMPLATES_DIR", "OURS_LOG_JSON", "OURS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    reset_config()
    yield
    reset_config()
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def templates_dir() -> Path:
    return TEMPLATES_DIR


@pytest.fixture
def sample_file(tmp_path) -> Path:
    path = tmp_path / "timetable.ours"
    path.write_text(SAMPLE, encoding="utf-8")
    return path
