"""Jinja2 rendering of a parsed Timetable.

Each slot is rendered through the slot template; the results are joined
per weekday and handed, together with the raw stylesheet, to the base
template as the monday..friday and css fragments.
"""

from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup

from ours.errors import RenderError
from ours.logging import get_logger
from ours.models import DAY_NAMES, Activity, Slot, Timetable

log = get_logger(__name__)

BASE_TEMPLATE = "base.html"
SLOT_TEMPLATE = "slot.html"
STYLES_FILE = "stylus.css"


def slot_context(slot: Slot, activity: Activity) -> dict:
    """Template variables for a single slot."""
    return {
        "id": slot.id,
        "activity_id": slot.activity_id,
        "activity_name": activity.name,
        "icon": slot.icon,
        "location": slot.location,
        "day": slot.day,
        "day_name": slot.day_name,
        "start": slot.start,
        "end": slot.end,
        "start_printable": slot.printable_start,
        "end_printable": slot.printable_end,
        "duration": slot.duration_minutes,
        "start_delay": slot.start_offset_minutes,
        "styles": slot.inline_style(activity.color),
        "color_name": activity.color.name,
        "background": activity.color.background,
        "foreground": activity.color.foreground,
    }


class TimetableRenderer:
    """Renders timetables with the templates found in one directory."""

    def __init__(
        self,
        templates_dir: str | Path,
        *,
        base_template: str = BASE_TEMPLATE,
        slot_template: str = SLOT_TEMPLATE,
        styles_file: str = STYLES_FILE,
    ) -> None:
        self.templates_dir = Path(templates_dir)
        self.base_template = base_template
        self.slot_template = slot_template
        self.styles_file = styles_file
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render_days(self, timetable: Timetable) -> list[str]:
        """Render every slot and join the results per weekday.

        Returns:
            Five strings, Monday first.

        Raises:
            RenderError: If the slot template is missing, not UTF-8 or fails to render.
        """
        try:
            template = self.env.get_template(self.slot_template)
            days = [
                "".join(
                    template.render(slot_context(slot, timetable.resolve(slot)))
                    for slot in bucket
                )
                for bucket in timetable.slots_by_day()
            ]
        except (TemplateError, UnicodeDecodeError) as exc:
            raise RenderError(
                f"There was an error while rendering your timetable -> {exc}"
            ) from exc
        return days

    def read_styles(self) -> str:
        """Return the stylesheet contents, used verbatim.

        Raises:
            RenderError: If the stylesheet cannot be read or is not UTF-8.
        """
        path = self.templates_dir / self.styles_file
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RenderError(
                f"There was an error while opening the styles' file -> {exc}"
            ) from exc

    def render(self, timetable: Timetable) -> str:
        """Render the complete document.

        Raises:
            RenderError: If any template or the stylesheet fails.
        """
        days = self.render_days(timetable)
        fragments = {
            name.lower(): Markup(fragment) for name, fragment in zip(DAY_NAMES, days)
        }
        fragments["css"] = Markup(self.read_styles())

        try:
            output = self.env.get_template(self.base_template).render(fragments)
        except (TemplateError, UnicodeDecodeError) as exc:
            raise RenderError(
                f"There was an error while rendering your timetable -> {exc}"
            ) from exc

        log.debug(
            "timetable_rendered",
            templates_dir=str(self.templates_dir),
            slots_per_day=[len(bucket) for bucket in timetable.slots_by_day()],
        )
        return output
