# circumdraw

circumdraw is a small drawing board that works on an 8-bit grayscale
image. You place up to three round markers on it. Once all three are
placed, it draws a ring: the circle passing through the three marker
centres, with a border thickness that you choose. Markers can be
dragged and the ring follows them. A reset clears the board. A random
move sends every marker to a new spot. It can do this once, or ten
times at half-second intervals on a background thread.

## Installing

```
pip install .
```

The package uses only the Python standard library and runs on Python
3.10 or later.

## Running

```
circumdraw
```

The `circumdraw` command reads commands from standard input, one per
line, and applies them to the board. Blank lines and lines starting
with `#` are ignored.

| Command         | Effect |
|-----------------|--------|
| `press X Y`     | Start dragging a marker under the point, or place the next marker |
| `release X Y`   | Stop dragging |
| `move X Y`      | Move the dragged marker to the point and redraw |
| `click X Y`     | `press` followed by `release` at the same point |
| `radius N`      | Set the radius of the marker dots |
| `border N`      | Set the thickness of the ring's border |
| `reset`         | Remove all markers and clear the picture |
| `random`        | Move all three markers to random places (only once all are placed) |
| `thread`        | Do the random move ten times, twice a second, in the background |
| `wait`          | Wait until background moves have finished |
| `info`          | Print the marker centres |
| `save PATH`     | Write the current picture to PATH as a binary PGM file |
| `quit`, `exit`  | Stop reading commands |

Coordinates given to `press`, `release`, `move` and `click` are in the
space that holds the picture area. Points outside the area are ignored
by `press` and `release`. The marker centres are stored relative to the
area's top-left corner. After a marker is placed, after each move, reset
or random move, and after each background move, the centres are printed
in this form:

```
X[0] : 30, Y[0]: 30
X[1] : 110, Y[1]: 50
X[2] : 70, Y[2]: 120
```

Bad input prints a line starting with `error:`, and reading then goes
on with the next line.

Options:

- `--left`, `--top`, `--width`, `--height`: the picture area. The
  default is a 640×480 area with its corner at (10, 10).
- `--radius`: the marker radius (default 20).
- `--border`: the ring's border thickness (default 5).
- `--seed`: the seed for the random moves.

Example:

```
printf 'click 40 40\nclick 120 60\nclick 80 130\nsave ring.pgm\n' | circumdraw
```

## Using it from Python

- `circumdraw.geometry` provides `Point` and `Rect`. `Rect.contains`
  treats the right and bottom edges as exclusive. It also provides
  `is_in_circle` and `circumcenter`. When the three points lie on one
  line, `circumcenter` returns the first point.
- `circumdraw.canvas` provides `GrayImage`, a grayscale pixel buffer
  with `clear`, `get`, `fill_disk` and `to_pgm`. It also provides
  `Marker`, a single placed dot.
- `circumdraw.board` provides `Board(area, radius=20, border=5)`. A
  board holds the image and the three markers. It reacts to `press`,
  `move` and `release`, and offers `reset`, `randomize`, `set_radius`,
  `set_border`, `render` and `position_info`.
- `circumdraw.app` provides `App`, the command reader described above.
  It provides `RandomMover`, which runs the repeated random moves, either
  with `run` in the calling thread or with `start` on a background
  thread. It also provides `main`.

A short session:

```python
import random

from circumdraw.board import Board
from circumdraw.geometry import Point, Rect

board = Board(Rect(0, 0, 200, 160))
for p in (Point(40, 40), Point(120, 60), Point(80, 130)):
    board.press(p)
    board.release(p)

image = board.render()
print(board.position_info())

board.randomize(random.Random(1))
with open("ring.pgm", "wb") as fh:
    fh.write(board.render().to_pgm())
```

## What it does not do

There is no graphical window and no mouse input. The board is driven
only through the text commands above or from Python, and pictures are
viewed by saving them as PGM files, which most image viewers can open.

## Tests

```
pip install .[test]
pytest
```