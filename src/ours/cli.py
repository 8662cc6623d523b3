"""Convert an ours timetable file into an HTML document.

Run with: ours-cli timetable.ours timetable.html
Custom:   ours-cli timetable.ours timetable.html path/to/templates
Check:    ours-cli timetable.ours timetable.html --all-errors

The templates directory must contain base.html, slot.html and stylus.css
(names configurable through OURS_BASE_TEMPLATE, OURS_SLOT_TEMPLATE and
OURS_STYLES_FILE).

Exit codes:
  0 = success (document written)
  1 = parse, read, render or write error (diagnostics on stderr)
  2 = invalid command line
"""

import argparse
import sys

from ours import __version__
from ours.config import get_config
from ours.converter import convert
from ours.errors import OursError, ParseError, ParseErrors
from ours.logging import get_logger, setup_logging
from ours.parser import SYNTAX_VERSION
from ours.rendering import TimetableRenderer

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="ours-cli",
        description=f"Render an ours@{SYNTAX_VERSION} timetable as HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_file", help="Timetable source file.")
    parser.add_argument("output_file", help="Path of the rendered document.")
    parser.add_argument(
        "templates_dir",
        nargs="?",
        default=config.templates_dir,
        help=f"Directory with templates and stylesheet (default: {config.templates_dir}).",
    )
    parser.add_argument(
        "--all-errors",
        action="store_true",
        help="Report every invalid line instead of stopping at the first one.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=config.log_json,
        help="Output logs as JSON.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level}).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__} (syntax {SYNTAX_VERSION})",
    )
    return parser.parse_args(argv)


def _report(exc: OursError) -> None:
    """Log one diagnostic event per failing line."""
    if isinstance(exc, ParseErrors):
        for error in exc.errors:
            _report(error)
    elif isinstance(exc, ParseError):
        log.error(
            "parse_failed",
            line=exc.line,
            error=type(exc).__name__,
            reason=exc.message,
        )
    else:
        log.error("conversion_failed", error=type(exc).__name__, reason=str(exc))


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(json_output=args.log_json, log_level=args.log_level)

    config = get_config()
    renderer = TimetableRenderer(
        args.templates_dir,
        base_template=config.base_template,
        slot_template=config.slot_template,
        styles_file=config.styles_file,
    )

    try:
        output = convert(
            args.input_file,
            args.output_file,
            renderer,
            collect_errors=args.all_errors,
        )
    except OursError as exc:
        _report(exc)
        return 1

    log.info("done", output=str(output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
