"""Error hierarchy for timetable conversion.

Every failure is fatal to a conversion run. Parse errors carry the 1-based
line number of the offending input line so the CLI can report a single
diagnostic line per failure.

Example usage:
    try:
        timetable = parse_text(source)
    except ParseError as exc:
        log.error("parse_failed", line=exc.line, reason=exc.message)
"""


class OursError(Exception):
    """Base exception for all conversion errors."""

    pass


class ParseError(OursError):
    """Input line violates the timetable syntax.

    Attributes:
        line: 1-based line number of the failing input line.
        message: Human readable description of the violated rule.
    """

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        self.message = message
        super().__init__(f"Line {line}: {message}")


class UnsupportedSyntaxError(ParseError):
    """First line is not a `/* ours@X.Y */` header."""

    pass


class VersionMismatchError(ParseError):
    """Header declares a syntax version other than the supported one."""

    def __init__(self, line: int, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            line,
            f"Mismatch file syntax version => Expecting {expected}, found {found}",
        )


class DuplicateActivityError(ParseError):
    """Activity ID declared twice."""

    pass


class UnknownColorError(ParseError):
    """Color token is neither a built-in name nor a hex pair."""

    pass


class UnknownActivityError(ParseError):
    """Slot references an activity that was not declared before it."""

    pass


class InvalidDayError(ParseError):
    """Slot day token is not in the day table."""

    pass


class InvalidSyntaxError(ParseError):
    """Line matches none of the known rules."""

    pass


class ParseErrors(OursError):
    """Several line errors collected in one pass.

    Only raised when the parser is asked to aggregate instead of stopping
    at the first failing line.
    """

    def __init__(self, errors: list[ParseError]) -> None:
        self.errors = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))


class RenderError(OursError):
    """Template or stylesheet could not be loaded or rendered."""

    pass


class ConversionIOError(OursError):
    """Input file could not be read or output file could not be written."""

    pass
