"""Pydantic models for timetable data.

All data structures use Pydantic v2 for validation and type safety.
A Slot points back at its Activity by key (activity_id); the Timetable
resolves that key against its activity mapping.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Reference start of the day (08:00) in minutes; slot offsets count from here.
DAY_START_MINUTES = 8 * 60

# Minutes per vh unit when positioning slots in the rendered grid.
STYLE_SCALE = 10

DAY_NAMES: tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


def _minutes(hhmm: str) -> int:
    return int(hhmm[0:2]) * 60 + int(hhmm[2:4])


class Color(BaseModel):
    """Background/foreground pair of an activity."""

    model_config = ConfigDict(frozen=True)

    name: str
    background: str  # "#rrggbb"
    foreground: str  # "#rrggbb"


class Slot(BaseModel):
    """One scheduled occurrence of an activity.

    Times are kept as the raw "HHMM" tokens from the input; the parser has
    already restricted them to the class-schedule window.
    """

    activity_id: str
    id: str  # activity token as written on the slot line
    icon: str = ""
    location: str
    day: int = Field(ge=0, le=len(DAY_NAMES) - 1)
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def _check_hhmm(cls, value: str) -> str:
        if len(value) != 4 or not value.isdigit():
            raise ValueError(f"expected HHMM, got {value!r}")
        return value

    @property
    def printable_start(self) -> str:
        return f"{self.start[0:2]}:{self.start[2:4]}"

    @property
    def printable_end(self) -> str:
        return f"{self.end[0:2]}:{self.end[2:4]}"

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day]

    @property
    def start_offset_minutes(self) -> int:
        """Minutes since 08:00. Negative for slots starting earlier."""
        return _minutes(self.start) - DAY_START_MINUTES

    @property
    def duration_minutes(self) -> int:
        """Minutes from start to end. Not checked against end > start."""
        return _minutes(self.end) - _minutes(self.start)

    def inline_style(self, color: Color) -> str:
        """CSS declarations positioning the slot in its day column.

        Height follows the duration and top follows the start offset, both
        in vh at one minute per STYLE_SCALE.
        """
        height = self.duration_minutes / STYLE_SCALE
        top = self.start_offset_minutes / STYLE_SCALE
        return (
            f"height: {height:.1f}vh; top: {top:.1f}vh; "
            f"background-color: {color.background}; color: {color.foreground};"
        )


class Activity(BaseModel):
    """A named, colored category of recurring events (e.g. a course)."""

    id: str
    name: str
    color: Color
    slots: list[Slot] = Field(default_factory=list)


class Timetable(BaseModel):
    """Activities of one document, keyed by ID in declaration order."""

    version: str
    activities: dict[str, Activity] = Field(default_factory=dict)

    def resolve(self, slot: Slot) -> Activity:
        """Return the activity owning the slot.

        Raises:
            KeyError: If the slot's activity is not part of this timetable.
        """
        return self.activities[slot.activity_id]

    def iter_slots(self):
        """Yield every slot, activities in declaration order, then slots in order."""
        for activity in self.activities.values():
            yield from activity.slots

    def slots_by_day(self) -> list[list[Slot]]:
        """Group slots into the five Monday-Friday buckets."""
        buckets: list[list[Slot]] = [[] for _ in DAY_NAMES]
        for slot in self.iter_slots():
            buckets[slot.day].append(slot)
        return buckets
