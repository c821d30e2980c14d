"""Conversion of 0xRRGGBB colours to pixel values for a TrueColor visual."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]


def _shift_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit field, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    bits = bin(mask >> shift)[2:]
    width = len(bits) - len(bits.rstrip("1"))
    return shift, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Return (shift, width) pairs for the red, green and blue masks.

    The result is flat: (red_shift, red_width, green_shift, green_width,
    blue_shift, blue_width). Each shift is the position of the lowest set bit
    of a mask and each width the number of consecutive set bits from there.
    """
    red = _shift_and_width(red_mask)
    green = _shift_and_width(green_mask)
    blue = _shift_and_width(blue_mask)
    return (*red, *green, *blue)


def convert_color(color: int, depth: int, shifts: Shifts) -> int:
    """Turn a 0xRRGGBB colour into a pixel value for a visual of `depth` bits.

    Visuals of depth 24 or more take the colour unchanged; shallower ones
    keep the top bits of each channel and place them with `shifts`.
    """
    if depth >= 24:
        return color
    red_shift, red_width, green_shift, green_width, blue_shift, blue_width = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_width)) << red_shift)
        + ((green >> (16 - green_width)) << green_shift)
        + ((blue >> (16 - blue_width)) << blue_shift)
    )