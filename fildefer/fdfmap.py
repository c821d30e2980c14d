"""Loading FdF height maps: rows of "z" or "z,0xRRGGBB" tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_COLOR = 0xFFFFFF
MAP_SUFFIX = ".fdf"

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d*)")
_LINES = re.compile(r"[^\n]*\n|[^\n]+")


class MapError(ValueError):
    """Raised when a map file cannot be read or is malformed."""


@dataclass(frozen=True)
class Point:
    """One vertex of the map: grid position, height and colour."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR


@dataclass
class Map:
    """A grid of points, `height` rows of `width` points each."""

    width: int
    height: int
    points: list[list[Point]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.points) != self.height:
            raise MapError(f"expected {self.height} rows, got {len(self.points)}")
        for row in self.points:
            if len(row) != self.width:
                raise MapError(f"expected rows of {self.width} points, got {len(row)}")


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def has_suffix(name: str, suffix: str) -> bool:
    """Tell whether `name` ends with `suffix`."""
    return len(name) >= len(suffix) and name.endswith(suffix)


def atoi_base(text: str, base: int) -> int:
    """Read digits 0-9, A-F and a-f in `base`, skipping any other character.

    A leading '-' makes the result negative.
    """
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    result = 0
    for char in text:
        if "0" <= char <= "9":
            digit = ord(char) - ord("0")
        elif "A" <= char <= "F":
            digit = ord(char) - ord("A") + 10
        elif "a" <= char <= "f":
            digit = ord(char) - ord("a") + 10
        else:
            continue
        result = _to_int32(result * base + digit)
    return _to_int32(result * sign)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    digits = match.group(2) if match else ""
    if not digits:
        return 0
    value = int(digits)
    return _to_int32(-value if match.group(1) == "-" else value)


def _token_color(token: str) -> int:
    _, comma, rest = token.partition(",")
    if comma and rest[:2] in ("0x", "0X"):
        return atoi_base(rest[2:], 16)
    return DEFAULT_COLOR


def parse_point(token: str, x: int, y: int) -> Point:
    """Build the point at grid position (x, y) from a "z[,0xRRGGBB]" token."""
    return Point(x, y, _atoi(token), _token_color(token))


def _tokens(line: str) -> list[str]:
    return [word for word in line.split(" ") if word]


def count_width(line: str) -> int:
    """Count the space-separated tokens of a map line.

    A token that is only the line's newline ends the count.
    """
    width = 0
    for word in _tokens(line):
        if word.endswith("\n") and word[:-1] == "":
            break
        width += 1
    return width


def _is_empty_line(line: str) -> bool:
    return all(char in " \t\n" for char in line)


def load_map(path: str | Path) -> Map:
    """Read an .fdf file into a Map; raise MapError if it cannot be used."""
    if not has_suffix(str(path), MAP_SUFFIX):
        raise MapError("invalid file name")
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError:
        raise MapError("can't read fdf file") from None

    lines = _LINES.findall(text)
    width = 0
    for line in lines:
        if width == 0:
            width = count_width(line)
        if count_width(line) != width or _is_empty_line(line):
            raise MapError("can't mapping")

    points = [
        [parse_point(token, x, y) for x, token in enumerate(_tokens(line)[:width])]
        for y, line in enumerate(lines)
    ]
    return Map(width, len(lines), points)