"""One conversion pass: read the input file, parse, render, write the output."""

from pathlib import Path

from ours.errors import ConversionIOError
from ours.models import Timetable
from ours.parser import parse_lines
from ours.rendering import TimetableRenderer


def read_timetable(input_path: str | Path, *, collect_errors: bool = False) -> Timetable:
    """Parse a timetable file.

    Raises:
        ConversionIOError: If the file cannot be opened or decoded.
        ParseError / ParseErrors: If the content is invalid.
    """
    path = Path(input_path)
    try:
        with path.open(encoding="utf-8") as handle:
            return parse_lines(handle, collect_errors=collect_errors)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConversionIOError(f"Cannot read input file {path}: {exc}") from exc


def write_output(output_path: str | Path, content: str) -> Path:
    """Write the rendered document, creating parent directories.

    Raises:
        ConversionIOError: If the file cannot be written.
    """
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ConversionIOError(
            f"There was an error while saving your file -> {exc}"
        ) from exc
    return path


def convert(
    input_path: str | Path,
    output_path: str | Path,
    renderer: TimetableRenderer,
    *,
    collect_errors: bool = False,
) -> Path:
    """Convert a timetable file into a rendered document.

    Nothing is written unless parsing and rendering both succeed.

    Returns:
        Path of the written document.
    """
    timetable = read_timetable(input_path, collect_errors=collect_errors)
    content = renderer.render(timetable)
    return write_output(output_path, content)
