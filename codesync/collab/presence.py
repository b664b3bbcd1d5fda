"""
Participant presence: user colors and cursor geometry for remote carets.
"""

from dataclasses import dataclass
from typing import Optional

USER_COLORS = (
    "#ff6b35",
    "#4ecdc4",
    "#45b7d1",
    "#96ceb4",
    "#feca57",
    "#ff9ff3",
    "#54a0ff",
)

CHAR_WIDTH_RATIO = 0.6   # monospace advance relative to font size
LINE_HEIGHT_RATIO = 1.6
DEFAULT_PADDING = 16


@dataclass
class User:
    id: str
    name: str
    color: str
    last_activity: Optional[float] = None


@dataclass(frozen=True)
class RemoteCursor:
    user_id: str
    position: int
    color: str


@dataclass(frozen=True)
class CursorPosition:
    line: int
    column: int
    x: float
    y: float


def color_for_index(index: int) -> str:
    return USER_COLORS[index % len(USER_COLORS)]


def cursor_position(text: str, offset: int, font_size: float, wrap_width: float,
                    padding: float = DEFAULT_PADDING, char_width: Optional[float] = None,
                    line_height: Optional[float] = None) -> CursorPosition:
    """
    Maps a buffer offset to the visual line/column and pixel position of a caret.

    Wrapping is estimated arithmetically (line length divided by characters
    per row), so word-boundary wrapping is not modelled.
    """
    char_width = char_width or font_size * CHAR_WIDTH_RATIO
    line_height = line_height or font_size * LINE_HEIGHT_RATIO
    offset = max(0, min(offset, len(text)))

    max_chars = max(1, int((wrap_width - padding * 2) // char_width))
    lines = text[:offset].split('\n')

    visual_lines = 0
    for line_text in lines[:-1]:
        # A hard line always occupies at least one row, even when empty
        visual_lines += max(1, -(-len(line_text) // max_chars))
    last = lines[-1]
    visual_lines += len(last) // max_chars
    column = len(last) % max_chars

    return CursorPosition(
        line=visual_lines,
        column=column,
        x=column * char_width + padding,
        y=visual_lines * line_height + padding,
    )
