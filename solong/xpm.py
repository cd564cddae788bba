"""Reader for XPM pixmaps as used by the game textures."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value stored for the ``None`` colour."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9a-fA-F]*")
_QUOTED = re.compile(r'"([^"]*)"')
_NAME_BUFFER = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap; pixels are 0xRRGGBB, or TRANSPARENT."""

    width: int
    height: int
    rows: Tuple[Tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.rows[y][x]


def split_words(text: str) -> List[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos in range(len(text) - len(token) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside double quotes, keeping the length."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        end = len(text) if close == -1 else close + 2
        text = text[:begin] + " " * (end - begin) + text[end:]
    while (begin := _find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        end = len(text) if newline == -1 else newline + 1
        text = text[:begin] + " " * (end - begin) + text[end:]
    return text


def color_from_spec(name: str, suffix: Optional[str]) -> int:
    """Resolve an XPM colour: ``#hex``, or a colour name, possibly two words.

    Unknown names give 0 (black); ``None`` gives -1.
    """
    if name.startswith("#"):
        digits = _LEADING_HEX.match(name, 1).group(0)
        return int(digits, 16) if digits else 0
    if suffix:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its sequence of quoted strings."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"invalid header: {' '.join(header[:4])!r}")

    last_definition_wins = cpp <= 2
    palette: Dict[str, int] = {}
    for index in range(ncolors):
        line = _next_line(source, f"colour definition {index + 1}")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            position = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no 'c' colour in definition: {line!r}") from None
        if position >= len(words):
            raise XpmError(f"no value after 'c' in definition: {line!r}")
        suffix = words[position + 1] if position + 1 < len(words) else None
        value = color_from_spec(words[position], suffix)
        key = line[:cpp]
        if last_definition_wins or key not in palette:
            palette[key] = value

    rows: List[Tuple[int, ...]] = []
    for row_number in range(height):
        line = _next_line(source, f"pixel row {row_number + 1}")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {row_number + 1} is too short")
        row = []
        for start in range(0, width * cpp, cpp):
            value = palette.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT if value == -1 else value)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: Union[str, Path]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)