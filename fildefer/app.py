"""The map viewer: load a map, draw it and show it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from fildefer.events import KEY_PRESS_MASK, Display, EventType, Window
from fildefer.fdfmap import Map, MapError, load_map
from fildefer.image import Image
from fildefer.render import draw_map

WIN_WIDTH = 1920
WIN_HEIGHT = 1080
TITLE = "Fil De Fer"
ESC = 0xFF1B


def open_map(argv: Sequence[str]) -> Map:
    """Load the map named by the single command-line argument."""
    if len(argv) != 1:
        raise MapError("invalid number of arguments")
    return load_map(argv[0])


def render_map(fdf_map: Map, width: int, height: int) -> Image:
    """Return a blank width x height image with the map drawn into it."""
    image = Image(width, height)
    image.clear()
    draw_map(image, fdf_map)
    return image


def _key_press(key: int, viewer: Viewer) -> int:
    if key == ESC:
        viewer.close()
    return 0


def _close_window(viewer: Viewer) -> int:
    viewer.close()
    return 0


class Viewer:
    """Shows one map in a window that Escape or the close button shuts."""

    def __init__(
        self,
        fdf_map: Map,
        width: int = WIN_WIDTH,
        height: int = WIN_HEIGHT,
        display: Display | None = None,
    ) -> None:
        self.map = fdf_map
        self.width = width
        self.height = height
        self.display = display if display is not None else Display()
        self.window: Window | None = None
        self.image: Image | None = None
        self.closed = False

    def show(self) -> Window:
        """Open the window, draw the map into it and install the close hooks."""
        if self.window is not None:
            raise RuntimeError("the viewer is already shown")
        window = self.display.new_window(self.width, self.height, TITLE)
        self.window = window
        self.image = render_map(self.map, self.width, self.height)
        window.images.append((self.image, 0, 0))
        window.key_hook(_key_press, self)
        window.hook(EventType.DESTROY_NOTIFY, KEY_PRESS_MASK, _close_window, self)
        return window

    def close(self) -> None:
        """Close the window and end the event loop."""
        if self.closed:
            return
        self.closed = True
        if self.window is not None and self.window in self.display.windows:
            self.display.destroy_window(self.window)
        self.image = None
        self.display.loop_end()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the map file given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        fdf_map = open_map(args)
    except MapError as exc:
        print(f"Error: {exc}")
        return 1
    viewer = Viewer(fdf_map)
    viewer.show()
    viewer.display.loop(())
    return 0


if __name__ == "__main__":
    sys.exit(main())