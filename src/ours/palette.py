"""Built-in lookup tables: activity colors and slot day codes.

Both tables are read-only mappings built once at import time.
"""

import re
from types import MappingProxyType

from ours.models import Color

CUSTOM_COLOR_NAME = "custom"

HEX_RE = re.compile(r"[a-fA-F0-9]{6}")

BUILT_IN_COLORS: MappingProxyType = MappingProxyType(
    {
        "green": Color(name="green", background="#2ecc71", foreground="#fefefe"),
        "turquoise": Color(name="turquoise", background="#1abc9c", foreground="#fefefe"),
        "navy": Color(name="navy", background="#34495e", foreground="#fefefe"),
        "blue": Color(name="blue", background="#3498db", foreground="#fefefe"),
        "purple": Color(name="purple", background="#9b59b6", foreground="#fefefe"),
        "grey": Color(name="grey", background="#bdc3c7", foreground="#202020"),
        "red": Color(name="red", background="#e74c3c", foreground="#fefefe"),
        "orange": Color(name="orange", background="#f39c12", foreground="#fefefe"),
        "yellow": Color(name="yellow", background="#f1c40f", foreground="#303030"),
    }
)

# Slot day tokens -> bucket index (Monday = 0)
BUILT_IN_DAYS: MappingProxyType = MappingProxyType(
    {
        "MON": 0,
        "TUE": 1,
        "WED": 2,
        "THU": 3,
        "FRI": 4,
        "01": 0,
        "02": 1,
        "03": 2,
        "04": 3,
        "05": 4,
    }
)


def resolve_color(token: str) -> Color:
    """Turn an activity color token into a Color.

    Args:
        token: Either "#rrggbb#rrggbb" (background, foreground) or a
               built-in color name in any case.

    Raises:
        ValueError: If the token is neither a valid hex pair nor a built-in name.
    """
    if "#" in token:
        parts = token.split("#")
        if len(parts) != 3 or parts[0] or not all(
            HEX_RE.fullmatch(part) for part in parts[1:]
        ):
            raise ValueError(f"Invalid hex color pair {token!r}")
        return Color(
            name=CUSTOM_COLOR_NAME,
            background="#" + parts[1],
            foreground="#" + parts[2],
        )

    color = BUILT_IN_COLORS.get(token.lower())
    if color is None:
        raise ValueError(f"Unknown color {token!r}. Valid: {list(BUILT_IN_COLORS)}")
    return color


def resolve_day(token: str) -> int:
    """Turn a slot day token ("MON".."FRI" or "01".."05") into a bucket index.

    Raises:
        ValueError: If the token is not in the day table.
    """
    day = BUILT_IN_DAYS.get(token)
    if day is None:
        raise ValueError(f"Unknown day {token!r}. Valid: {list(BUILT_IN_DAYS)}")
    return day
