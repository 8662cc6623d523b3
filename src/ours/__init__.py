"""ours: render a weekly timetable written in the ours@2.0 syntax as HTML.

Parses activity and slot declarations into pydantic models, then renders
them per weekday through Jinja2 templates.
"""

__version__ = "2.0.0"

from ours.models import Activity, Color, Slot, Timetable  # noqa: E402
from ours.parser import SYNTAX_VERSION, parse_lines, parse_text  # noqa: E402
from ours.rendering import TimetableRenderer  # noqa: E402

__all__ = [
    "Activity",
    "Color",
    "Slot",
    "Timetable",
    "SYNTAX_VERSION",
    "parse_lines",
    "parse_text",
    "TimetableRenderer",
]
