"""SGR escape sequences used by the ANSI formatter.

Fixed at import time; not configurable at runtime.

Usage:
    from mdansi import ansi

    sink.write(ansi.BOLD + "title" + ansi.RESET_BOLD)
"""

import re

# Standard foreground colors
BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"

# Bright foreground colors
BRIGHT_BLACK = "\x1b[90m"
BRIGHT_RED = "\x1b[91m"
BRIGHT_GREEN = "\x1b[92m"
BRIGHT_YELLOW = "\x1b[93m"
BRIGHT_BLUE = "\x1b[94m"
BRIGHT_MAGENTA = "\x1b[95m"
BRIGHT_CYAN = "\x1b[96m"
BRIGHT_WHITE = "\x1b[97m"

# Styles
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
ITALIC = "\x1b[3m"
UNDERLINE = "\x1b[4m"
BLINK = "\x1b[5m"
REVERSE = "\x1b[7m"
STRIKETHROUGH = "\x1b[9m"

# Style-off codes (22 clears both bold and dim)
RESET_BOLD = "\x1b[22m"
RESET_DIM = "\x1b[22m"
RESET_ITALIC = "\x1b[23m"
RESET_UNDERLINE = "\x1b[24m"
RESET_BLINK = "\x1b[25m"
RESET_REVERSE = "\x1b[27m"
RESET_STRIKETHROUGH = "\x1b[29m"

FOREGROUND_COLORS: tuple[str, ...] = (BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE)

BRIGHT_FOREGROUND_COLORS: tuple[str, ...] = (
    BRIGHT_BLACK,
    BRIGHT_RED,
    BRIGHT_GREEN,
    BRIGHT_YELLOW,
    BRIGHT_BLUE,
    BRIGHT_MAGENTA,
    BRIGHT_CYAN,
    BRIGHT_WHITE,
)

_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences, leaving the visible text."""
    return _SGR_RE.sub("", text)
