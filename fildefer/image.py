"""Off-screen images holding packed pixels in rows, as a ZPixmap does."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Image:
    """A width x height image of `bpp`-bit pixels.

    `endian` is 0 for least significant byte first and 1 for most significant
    byte first. Rows are `size_line` bytes long, padded to 32 bits.
    """

    width: int
    height: int
    bpp: int = 32
    endian: int = 0
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bpp <= 0 or self.bpp % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {self.bpp}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {self.endian}")
        self.size_line = (self.width * self.bpp + 31) // 32 * 4
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def contains(self, x: int, y: int) -> bool:
        """Tell whether (x, y) lies inside the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def write_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low `bpp` bits of `color` at (x, y) in the image's byte order."""
        offset = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << self.bpp) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def put_pixel(self, x: int, y: int, color: int) -> bool:
        """Store `color` at (x, y) if the point is inside; report whether it was."""
        if not self.contains(x, y):
            return False
        self.write_pixel(x, y, color)
        return True

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self.bytes_per_pixel], self._byteorder)

    def clear(self) -> None:
        """Set every byte of the image to zero."""
        self.data[:] = bytes(len(self.data))