"""Main loop: read keys, move the player and redraw at a fixed frame rate."""

from __future__ import annotations

import argparse
import locale
import time
from dataclasses import dataclass

from termgrid.frame_info import FrameInfoBuffer
from termgrid.game import Direction, Game, Vector, clear_screen, move_cursor
from termgrid.terminal import Terminal
from termgrid.timing import now, until_end_of_frame, wait

FPS = 30
FRAME_TIME = 1000 // FPS
RECENT_FRAMES_SIZE = FPS
INPUT_BUFFER_SIZE = 20

ESC = 27
CTRL_R = ord("r") & 0x1F

_MOVES = {
    ord("h"): Direction.LEFT,
    ord("j"): Direction.DOWN,
    ord("k"): Direction.UP,
    ord("l"): Direction.RIGHT,
}


@dataclass
class InputOutcome:
    exit: bool = False
    resize: bool = False


def handle_input(game: Game, data: bytes) -> InputOutcome:
    """Apply a chunk of key bytes to the game and report exit/resize requests."""
    outcome = InputOutcome()
    following = data[1:] + b"\0"
    for byte, next_byte in zip(data, following):
        if byte == CTRL_R:
            outcome.resize = True
        elif byte in _MOVES:
            game.try_move_player(Vector.from_direction(_MOVES[byte], 1))
        elif byte == ESC and next_byte != ord("["):
            outcome.exit = True
    return outcome


def render_frame_info(
    frames: FrameInfoBuffer, screen_width: int, frame_time: int
) -> str:
    fps = frames.average_fps()
    load = int(frames.average_active_time() * 100 / frame_time)
    return (
        move_cursor(screen_width - 8, 1)
        + f"FPS :{fps:4d}"
        + move_cursor(screen_width - 8, 2)
        + f"Load:{load:3d}%"
    )


def render_input_info(last_input: bytes) -> str:
    parts = [move_cursor(1, 1), "Last Input: "]
    for byte in last_input.split(b"\0", 1)[0]:
        if 32 <= byte < 127:
            parts.append(f"{byte} ({chr(byte)}) ")
        else:
            signed = byte - 256 if byte > 127 else byte
            parts.append(f"{signed} ")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Move a square around a bordered field with h/j/k/l; Esc quits."
    )
    parser.parse_args(argv)
    locale.setlocale(locale.LC_ALL, "")

    game = Game()
    last_input = b""
    with Terminal() as terminal:
        terminal.write(clear_screen())
        screen = terminal.query_screen_size()
        game.set_offset(screen)

        terminal.write(move_cursor(1, 1) + f"Screen Size: {screen.x}, {screen.y}")
        terminal.write(
            move_cursor(1, 2) + f"Game Offset: {game.offset.x}, {game.offset.y}"
        )
        terminal.flush()
        time.sleep(2)

        frames = FrameInfoBuffer(RECENT_FRAMES_SIZE)
        exited = False
        while not exited:
            frames.current.start = now()

            data = terminal.read_input(INPUT_BUFFER_SIZE - 1)
            if data:
                last_input = data
            outcome = handle_input(game, data)
            if outcome.resize:
                screen = terminal.query_screen_size()
            exited = outcome.exit

            terminal.write(clear_screen())
            terminal.write(game.render_border())
            terminal.write(game.render_player())
            terminal.write(render_frame_info(frames, screen.x, FRAME_TIME))
            terminal.write(render_input_info(last_input))
            terminal.flush()

            frames.current.end = now()
            wait(until_end_of_frame(frames.current.start, FRAME_TIME))
            frames.advance()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())