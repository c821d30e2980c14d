# fildefer

`fildefer` reads an `.fdf` height map and draws it as an isometric
wireframe ("fil de fer") into an in-memory 32-bit pixel image.

## The map format

An `.fdf` file holds one row of points per line. Points are separated by
spaces; each is an integer height, optionally followed by a comma and a
colour written as `0xRRGGBB`:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

- Every line must have the same number of points as the first.
- A line made only of spaces, tabs or a newline is rejected.
- A point without a colour (or whose colour does not start with `0x`/`0X`)
  is white, `0xFFFFFF`.
- The file name must end in `.fdf`.

A map that breaks these rules raises `fildefer.fdfmap.MapError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
fildefer path/to/map.fdf
```

The command takes exactly one argument. It loads the map, draws it into a
1920 x 1080 image and attaches that image to a window of the in-memory
event model, then returns with status 0. If the number of arguments is
wrong, the name does not end in `.fdf`, or the file cannot be read or is
malformed, it prints `Error: <reason>` and exits with status 1.

## Library use

```python
from fildefer.fdfmap import load_map
from fildefer.app import render_map

fdf_map = load_map("pyramid.fdf")
image = render_map(fdf_map, 1920, 1080)
print(hex(image.get_pixel(960, 540)))
```

Modules:

- `fildefer.fdfmap`: `load_map`, `parse_point`, `count_width`, `atoi_base`,
  `has_suffix`, and the `Map`, `Point` and `MapError` types.
- `fildefer.render`: `iso_projection` (scales the map to 70% of the window
  and centres it), `line_points` (a Bresenham line generator, both ends
  included), `draw_line` (skips points outside the image) and `draw_map`
  (each edge in the colour of its start point).
- `fildefer.image`: `Image`, a row-padded pixel buffer (32 bits per pixel
  and little-endian by default) with `put_pixel` (returns whether the point
  was inside), `write_pixel`, `get_pixel`, `contains` and `clear`.
- `fildefer.app`: `open_map`, `render_map`, the `Viewer` class (`show`
  opens a window in a `Display`, draws the map and installs hooks so that
  Escape or a close request calls `close`) and `main`.
- `fildefer.events`: `Display`, `Window`, `Event`, `Hook` and `EventType`, a
  window-and-hook model. `Window.key_hook`, `mouse_hook`, `expose_hook` and
  `hook` register callbacks; `Display.dispatch` delivers one `Event` and
  `Display.loop` feeds an iterable of events until it runs out, no window is
  left, or `loop_end` is called.
- `fildefer.xpm`: `xpm_to_image` and `xpm_file_to_image` load XPM pictures
  into an `Image` (transparent pixels become `0xFF000000`); `parse_xpm`
  returns rows of `0xRRGGBB` values with `-1` for transparent;
  `strip_comments`, `find_unquoted`, `split_words` and `text_to_rgb` are
  its helpers, and `XpmError` is raised for malformed input.
- `fildefer.colors`: `color_by_name` looks up X11 colour names, ignoring
  case (`"none"` gives `-1`, unknown names raise `KeyError`).
- `fildefer.visual`: `mask_shifts` and `convert_color` turn `0xRRGGBB`
  colours into pixel values for visuals shallower than 24 bits.

## What it does not do

`fildefer` does not open a window on the screen. Windows, events and the
event loop exist only in memory: events come from the iterable passed to
`Display.loop`, and the `fildefer` command passes none. To look at a
rendered map, read the pixels from the `Image` (`Image.data` holds the raw
bytes, `Image.size_line` bytes per row) and save or display them with a
tool of your choice.