"""Line-oriented parser for the ours timetable syntax.

Document layout:

    /* ours@2.0 */
    # comment
    MATH@BLUE@Mathematics
    MATH:book:Room 101:MON:0900:1030

Line 1 is the version header. Every following line is an activity
declaration (ID@COLOR@NAME), a slot (ID:ICON:LOCATION:DAY:START:END),
a comment or a blank line. Slots may only reference activities declared
on an earlier line.

The rule patterns are deliberately narrow: the hour digit sets encode the
class-schedule window (starts 08:00-22:59, ends 08:00-23:59, no 01-07).
"""

import re
from collections.abc import Iterable
from enum import Enum

from ours.errors import (
    DuplicateActivityError,
    InvalidDayError,
    InvalidSyntaxError,
    ParseError,
    ParseErrors,
    UnknownActivityError,
    UnknownColorError,
    UnsupportedSyntaxError,
    VersionMismatchError,
)
from ours.logging import get_logger
from ours.models import Activity, Slot, Timetable
from ours.palette import resolve_color, resolve_day

log = get_logger(__name__)

SYNTAX_VERSION = "2.0"

# Patterns are applied with fullmatch(); re.ASCII keeps \s and \d to ASCII.
SYNTAX_RE = re.compile(r"/\* ours@(\d\.\d) \*/", re.ASCII)
ACTIVITY_RE = re.compile(
    r"([A-Z0-9]+)@([A-Z]+|#[a-fA-F0-9]{6}#[a-fA-F0-9]{6})@(.+)", re.ASCII
)
SLOT_RE = re.compile(
    r"([A-Z0-9]+)"
    r":([-a-zA-Z0-9]*)"
    r":([a-zA-Z0-9\s.-]+)"
    r":(MON|TUE|WED|THU|FRI|01|02|03|04|05)"
    r":((?:0[089]|1[0-9]|2[0-2])[0-5][0-9])"
    r":((?:0[089]|1[0-9]|2[0-3])[0-5][0-9])",
    re.ASCII,
)
COMMENT_RE = re.compile(r"#.+")


class LineKind(str, Enum):
    """What a successfully parsed line turned out to be."""

    HEADER = "header"
    ACTIVITY = "activity"
    SLOT = "slot"
    COMMENT = "comment"
    BLANK = "blank"


class TimetableParser:
    """Stateful, single-pass parser.

    Feed lines in document order with feed(); each call either returns the
    LineKind of the line or raises a ParseError naming the line. Whether
    to stop at the first error is up to the caller (see parse_lines).
    """

    def __init__(self, supported_version: str = SYNTAX_VERSION) -> None:
        self.supported_version = supported_version
        self.version: str | None = None
        self.activities: dict[str, Activity] = {}
        self.line_number = 0

    def feed(self, text: str) -> LineKind:
        """Classify and apply the next input line.

        Raises:
            ParseError: Subclass naming the violated rule and line number.
        """
        self.line_number += 1
        content = text.rstrip("\r\n")

        if self.line_number == 1:
            return self._parse_header(content)

        match = ACTIVITY_RE.fullmatch(content)
        if match:
            self._add_activity(*match.groups())
            return LineKind.ACTIVITY

        match = SLOT_RE.fullmatch(content)
        if match:
            self._add_slot(*match.groups())
            return LineKind.SLOT

        if COMMENT_RE.fullmatch(content):
            return LineKind.COMMENT

        if not content.strip():
            return LineKind.BLANK

        raise InvalidSyntaxError(self.line_number, "Invalid syntax rule.")

    def timetable(self) -> Timetable:
        """Build the Timetable from everything fed so far.

        Raises:
            UnsupportedSyntaxError: If no line (hence no header) was fed.
        """
        if self.version is None:
            raise UnsupportedSyntaxError(1, "Unsupported syntax file.")
        return Timetable(version=self.version, activities=self.activities)

    def _parse_header(self, content: str) -> LineKind:
        match = SYNTAX_RE.fullmatch(content)
        if match is None:
            raise UnsupportedSyntaxError(self.line_number, "Unsupported syntax file.")
        found = match.group(1)
        if found != self.supported_version:
            raise VersionMismatchError(self.line_number, self.supported_version, found)
        self.version = found
        return LineKind.HEADER

    def _add_activity(self, activity_id: str, color_token: str, name: str) -> None:
        if activity_id in self.activities:
            raise DuplicateActivityError(
                self.line_number,
                f"Activity with ID `{activity_id}` is already registered",
            )
        try:
            color = resolve_color(color_token)
        except ValueError:
            raise UnknownColorError(
                self.line_number,
                f"Color {color_token} not found in registered colors",
            )

        self.activities[activity_id] = Activity(id=activity_id, name=name, color=color)
        log.debug(
            "activity_registered",
            line=self.line_number,
            activity_id=activity_id,
            color=color.name,
        )

    def _add_slot(
        self,
        activity_id: str,
        icon: str,
        location: str,
        day_token: str,
        start: str,
        end: str,
    ) -> None:
        activity = self.activities.get(activity_id)
        if activity is None:
            raise UnknownActivityError(
                self.line_number,
                f"Activity with ID `{activity_id}` not found in registered activities",
            )
        try:
            day = resolve_day(day_token)
        except ValueError:
            raise InvalidDayError(self.line_number, f"Day is incorrect -> {day_token}")

        activity.slots.append(
            Slot(
                activity_id=activity_id,
                id=activity_id,
                icon=icon,
                location=location,
                day=day,
                start=start,
                end=end,
            )
        )
        log.debug(
            "slot_registered",
            line=self.line_number,
            activity_id=activity_id,
            day=day,
            start=start,
            end=end,
        )


def parse_lines(lines: Iterable[str], *, collect_errors: bool = False) -> Timetable:
    """Parse timetable lines into a Timetable.

    Args:
        lines: Input lines in document order (trailing newlines allowed).
        collect_errors: If False, raise the first line error. If True, keep
                        parsing and raise every line error at the end.
                        A bad header always stops parsing immediately.

    Raises:
        ParseError: First failing line (collect_errors=False).
        ParseErrors: All failing lines (collect_errors=True).
    """
    parser = TimetableParser()
    errors: list[ParseError] = []

    for line in lines:
        try:
            parser.feed(line)
        except (UnsupportedSyntaxError, VersionMismatchError):
            raise
        except ParseError as exc:
            if not collect_errors:
                raise
            log.debug("line_rejected", line=exc.line, reason=exc.message)
            errors.append(exc)

    if errors:
        raise ParseErrors(errors)

    timetable = parser.timetable()
    log.debug(
        "timetable_parsed",
        lines=parser.line_number,
        activities=len(timetable.activities),
        slots=sum(len(activity.slots) for activity in timetable.activities.values()),
    )
    return timetable


def parse_text(text: str, *, collect_errors: bool = False) -> Timetable:
    """Parse a whole timetable document held in memory.

    Lines are split on newline characters only, like a file read by
    read_timetable; form feeds and other separators stay inside the line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return parse_lines(lines, collect_errors=collect_errors)
