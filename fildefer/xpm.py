"""Reading XPM pixmaps, from data lines or from C-style XPM files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from fildefer.colors import color_by_name
from fildefer.image import Image

TRANSPARENT_PIXEL = 0xFF000000

_WORD_SPLIT = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def split_words(text: str) -> list[str]:
    """Split `text` into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first `needle` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    last_start = len(text) - len(needle)
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, begin: int, end: int) -> str:
    return text[:begin] + " " * (end - begin) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces; the length is kept."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
    return text


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def text_to_rgb(name: str, extra: str | None) -> int:
    """Return the colour an XPM colour word stands for.

    "#RRGGBB" is read as hexadecimal. Otherwise `name`, joined to `extra` by
    a space when given, is looked up among the named colours; "None" gives -1
    and unknown names give 0.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        return _to_int32(-value if match.group(1) == "-" else value)
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def parse_xpm(lines: Iterable[str]) -> list[list[int]]:
    """Parse XPM data lines into rows of 0xRRGGBB colours, -1 for transparent."""
    source = iter(lines)
    words = split_words(_next_line(source, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words)!r}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "end of the colour table")
        key = line[:cpp]
        entry = split_words(line[cpp:])
        try:
            index = entry.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if index + 1 >= len(entry):
            raise XpmError(f"colour line without a colour: {line!r}")
        extra = entry[index + 2] if index + 2 < len(entry) else None
        rgb = text_to_rgb(entry[index + 1], extra)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = _next_line(source, "end of the pixels")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row shorter than {width * cpp} characters: {line!r}")
        rows.append([palette.get(line[i:i + cpp], 0) for i in range(0, width * cpp, cpp)])
    return rows


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM data lines; transparent pixels get alpha 0xFF."""
    rows = parse_xpm(lines)
    image = Image(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.write_pixel(x, y, TRANSPARENT_PIXEL if color == -1 else color)
    return image


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def xpm_file_to_image(path: str | Path) -> Image:
    """Read an XPM file written as a C array of strings into an image."""
    text = Path(path).read_text(encoding="latin-1")
    return xpm_to_image(_quoted_strings(strip_comments(text)))