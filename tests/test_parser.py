import pytest

from ours.converter import read_timetable
from ours.errors import (
    DuplicateActivityError,
    InvalidDayError,
    InvalidSyntaxError,
    ParseErrors,
    UnknownActivityError,
    UnknownColorError,
    UnsupportedSyntaxError,
    VersionMismatchError,
)
from ours.parser import LineKind, TimetableParser, parse_lines, parse_text

HEADER = "/* ours@2.0 */"


def doc(*lines: str) -> str:
    return "\n".join((HEADER,) + lines) + "\n"


def test_minimal_document_has_one_slot_in_one_bucket() -> None:
    timetable = parse_text(doc("MATH@BLUE@Mathematics", "MATH:book:Room 101:TUE:0900:1030"))

    buckets = timetable.slots_by_day()
    assert [len(bucket) for bucket in buckets] == [0, 1, 0, 0, 0]
    slot = buckets[1][0]
    assert slot.activity_id == "MATH"
    assert slot.id == "MATH"
    assert slot.icon == "book"
    assert slot.location == "Room 101"
    assert (slot.start, slot.end) == ("0900", "1030")
    assert timetable.version == "2.0"


def test_activity_fields() -> None:
    timetable = parse_text(doc("PHY@#1a2b3c#FFFFFF@Physics: waves & optics"))
    activity = timetable.activities["PHY"]
    assert activity.name == "Physics: waves & optics"
    assert activity.color.name == "custom"
    assert activity.color.background == "#1a2b3c"
    assert activity.color.foreground == "#FFFFFF"
    assert activity.slots == []


def test_slots_keep_declaration_order() -> None:
    timetable = parse_text(
        doc(
            "A@RED@First",
            "B@GREY@Second",
            "B::Hall:MON:1000:1100",
            "A::Hall:MON:0800:0900",
            "A::Hall:MON:1200:1300",
        )
    )
    assert list(timetable.activities) == ["A", "B"]
    assert [slot.start for slot in timetable.activities["A"].slots] == ["0800", "1200"]
    assert [slot.activity_id for slot in timetable.slots_by_day()[0]] == ["A", "A", "B"]


@pytest.mark.parametrize("token", ["MON", "01"])
def test_monday_tokens(token: str) -> None:
    timetable = parse_text(doc("A@RED@A", f"A::Hall:{token}:0900:1000"))
    assert timetable.activities["A"].slots[0].day == 0


def test_comments_and_blank_lines_are_ignored() -> None:
    timetable = parse_text(doc("# note", "", "   ", "A@RED@A", "#A::Hall:MON:0900:1000"))
    assert timetable.activities["A"].slots == []


def test_crlf_input() -> None:
    timetable = parse_lines([HEADER + "\r\n", "A@RED@A\r\n", "A::Hall:FRI:0900:1000\r\n"])
    assert timetable.activities["A"].slots[0].day == 4


def test_missing_header() -> None:
    with pytest.raises(UnsupportedSyntaxError) as info:
        parse_text("A@RED@A\nA::Hall:MON:0900:1000\n")
    assert info.value.line == 1
    assert str(info.value) == "Line 1: Unsupported syntax file."


def test_empty_document() -> None:
    with pytest.raises(UnsupportedSyntaxError):
        parse_text("")


def test_version_mismatch() -> None:
    with pytest.raises(VersionMismatchError) as info:
        parse_text("/* ours@1.0 */\nA@RED@A\n")
    assert info.value.expected == "2.0"
    assert info.value.found == "1.0"


def test_header_fails_before_other_lines_even_when_collecting() -> None:
    with pytest.raises(VersionMismatchError):
        parse_text("/* ours@3.1 */\nnot a rule\n", collect_errors=True)


def test_duplicate_activity() -> None:
    with pytest.raises(DuplicateActivityError) as info:
        parse_text(doc("A@RED@One", "A@BLUE@Two"))
    assert info.value.line == 3


def test_unknown_builtin_color() -> None:
    with pytest.raises(UnknownColorError) as info:
        parse_text(doc("A@PINK@A"))
    assert info.value.line == 2


def test_slot_before_activity() -> None:
    with pytest.raises(UnknownActivityError) as info:
        parse_text(doc("A::Hall:MON:0900:1000", "A@RED@A"))
    assert info.value.line == 2


def test_invalid_day_when_table_lacks_token(monkeypatch) -> None:
    monkeypatch.setattr("ours.parser.resolve_day", _reject_day)
    with pytest.raises(InvalidDayError):
        parse_text(doc("A@RED@A", "A::Hall:WED:0900:1000"))


def _reject_day(token: str) -> int:
    raise ValueError(token)


@pytest.mark.parametrize(
    "line",
    [
        "A::Hall:SAT:0900:1000",  # weekend
        "A::Hall:MON:0700:0900",  # starts before 08:00
        "A::Hall:MON:2300:2330",  # starts after 22:59
        "A::Hall:MON:0900:0960",  # invalid minutes
        "A::Hall:MON:0900:2400",  # ends after 23:59
        "A:bo_ok:Hall:MON:0900:1000",  # underscore in icon
        "A:b\u00e9ok:Hall:MON:0900:1000",  # non-ASCII icon
        "A::Room_1:MON:0900:1000",  # underscore in location
        "A::Hall/B:MON:0900:1000",  # slash in location
        "A:::MON:0900:1000",  # empty location
        "A::Hall\u00a0B:MON:0900:1000",  # non-ASCII space in location
        "A::Hall:MON:900:1000",  # three-digit time
        "a@RED@lowercase id",
        "A@#12345#ffffff@short hex",
        "#",
        "random text",
    ],
)
def test_invalid_syntax(line: str) -> None:
    with pytest.raises(InvalidSyntaxError):
        parse_text(doc("A@RED@A", line))


def test_end_window_allows_late_evening() -> None:
    timetable = parse_text(doc("A@RED@A", "A::Hall:MON:2200:2345"))
    assert timetable.activities["A"].slots[0].end == "2345"


def test_collect_errors_reports_every_line() -> None:
    with pytest.raises(ParseErrors) as info:
        parse_text(
            doc("A@RED@A", "A@RED@Again", "B::Hall:MON:0900:1000", "junk"),
            collect_errors=True,
        )
    errors = info.value.errors
    assert [type(error) for error in errors] == [
        DuplicateActivityError,
        UnknownActivityError,
        InvalidSyntaxError,
    ]
    assert [error.line for error in errors] == [3, 4, 5]


def test_feed_returns_line_kinds() -> None:
    parser = TimetableParser()
    kinds = [
        parser.feed(line)
        for line in (HEADER, "A@RED@A", "A::Hall:MON:0900:1000", "# c", "")
    ]
    assert kinds == [
        LineKind.HEADER,
        LineKind.ACTIVITY,
        LineKind.SLOT,
        LineKind.COMMENT,
        LineKind.BLANK,
    ]
    assert parser.timetable().activities["A"].slots[0].location == "Hall"


@pytest.mark.parametrize(
    "line, field, value",
    [
        ("A::Hall:MON:2259:2359", "end", "2359"),
        ("A:icon-2:Hall:MON:0900:1000", "icon", "icon-2"),
        ("A::Lab B.2 - west:MON:0900:1000", "location", "Lab B.2 - west"),
        ("A::Hall\tA:MON:0900:1000", "location", "Hall\tA"),
    ],
)
def test_accepted_slot_fields(line: str, field: str, value: str) -> None:
    timetable = parse_text(doc("A@RED@A", line))
    assert getattr(timetable.activities["A"].slots[0], field) == value


def test_text_splits_on_newlines_only(tmp_path) -> None:
    source = doc("A@RED@Maths\x0cLab", "B@BLUE@Art History")
    path = tmp_path / "week.ours"
    path.write_text(source, encoding="utf-8")

    from_text = parse_text(source)
    from_file = read_timetable(path)
    assert from_text.activities["A"].name == "Maths\x0cLab"
    assert from_text.activities["B"].name == "Art History"
    assert [a.name for a in from_text.activities.values()] == [
        a.name for a in from_file.activities.values()
    ]
