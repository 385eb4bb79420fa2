# termgrid

A tiny game that runs in your terminal. A green square sits inside a
60 × 30 playing field with a border of block characters. You move the square
with the keyboard. The screen is redrawn at most 30 times a second. The top
corners show a frame-rate figure, the average load of recent frames, and the
bytes of the last key input.

## Requirements

- Python 3.10 or later
- A POSIX terminal that understands ANSI escape sequences. It must answer
  cursor-position queries (`ESC[6n`).

The playing field is centred when the terminal is at least 120 columns wide
and 30 rows high. On a smaller terminal the field keeps an offset of 0, 0 and
may not fit on the screen.

## Installation

```
pip install .
```

## Playing

```
termgrid
```

The game first measures the terminal by moving the cursor to the bottom-right
corner and reading the position that the terminal reports back. It shows the
screen size and the offset of the playing field for two seconds, and then the
game loop starts.

| Key      | Action                                      |
|----------|---------------------------------------------|
| `h`      | move left                                   |
| `j`      | move down                                   |
| `k`      | move up                                     |
| `l`      | move right                                  |
| `Ctrl-R` | measure the terminal size again             |
| `Esc`    | quit (an `Esc` followed by `[` is ignored)  |

The square cannot leave the playing field. A move that would take it past
the edge is ignored. `Ctrl-R` updates the screen size, which sets where the
frame statistics are drawn. It does not centre the field again. When you
quit, the terminal settings, blocking input and the cursor are restored.

`termgrid --help` prints a short usage line. The command takes no other
options.

## Using the pieces

The modules also work on their own:

- `termgrid.frame_info`
  - `FrameInfo` holds one frame's `start` and `end` times in milliseconds.
    Both are -1 while unset.
  - `FrameInfoBuffer(size)` is a ring of frames. `advance()` moves to the
    next slot and `current` returns the current one.
  - `average_active_time()` averages `end - start` over the completed frames,
    leaving out the current one.
  - `average_fps()` computes a figure from the spread of the start times. It
    raises `ZeroDivisionError` when that spread is zero.
- `termgrid.timing`
  - `now()` returns the time in milliseconds.
  - `wait(milliseconds)` sleeps. A negative value returns at once.
  - `until_end_of_frame(start_time, target_frame_time)` returns the time left
    in the frame.
  - `check_stdin(timeout)` tells whether standard input becomes readable
    within the timeout.
- `termgrid.game`
  - `Vector` supports `+` and `Vector.from_direction(direction, distance)`.
  - `Game` holds the level size, the offset and the player.
  - `set_offset(screen_size)` centres the field. It returns `False` when the
    screen is too small.
  - `to_terminal`, `try_move_player`, `render_border` and `render_player`
    return escape sequences as strings. `move_cursor`, `clear_screen` and
    `render_drawable` do the same.
- `termgrid.terminal`
  - `Terminal` is a context manager. It switches the terminal to raw,
    non-blocking mode and hides the cursor. It buffers output until
    `flush()`.
  - `parse_cursor_report(data)` turns a report such as `[40;120` into
    `Vector(120, 40)`.
- `termgrid.app`
  - `handle_input`, `render_frame_info` and `render_input_info` are the
    pieces of the main loop.

```python
from termgrid.game import Game, Vector, Direction

game = Game()
game.set_offset(Vector(120, 40))
game.try_move_player(Vector.from_direction(Direction.RIGHT, 1))
print(game.render_border() + game.render_player())
```

## What it does not do

There is no goal, score, obstacles or levels. You can only move the square
around inside the field. The game does not handle terminal resize signals. It
measures the terminal size only at start-up and when you press `Ctrl-R`. It
needs `termios`, so it does not run on Windows.