"""Game state and its rendering into terminal escape sequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

GAME_WIDTH = 60
GAME_HEIGHT = 30

FULL_BLOCK = "\u2588"
SMILING_FACE = "\u263b"
SQUARE = "\u25a0"


class Mode(IntEnum):
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINKING = 5
    STRIKETHROUGH = 9


class Color(IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39

    @property
    def background(self) -> int:
        return self.value + 10


class Direction(Enum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


@dataclass(frozen=True)
class Vector:
    x: int = 0
    y: int = 0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    @staticmethod
    def from_direction(direction: Direction, distance: int = 1) -> Vector:
        """Vector of ``distance`` steps towards ``direction``."""
        if direction is Direction.UP:
            return Vector(0, -distance)
        if direction is Direction.DOWN:
            return Vector(0, distance)
        if direction is Direction.LEFT:
            return Vector(-distance, 0)
        if direction is Direction.RIGHT:
            return Vector(distance, 0)
        raise ValueError(f"unknown direction: {direction!r}")


@dataclass(frozen=True)
class Display:
    character: str
    modes: tuple[int, ...] = ()


@dataclass
class Drawable:
    position: Vector
    display: Display


def out_of_bounds(vector: Vector) -> bool:
    return not (0 <= vector.x <= GAME_WIDTH - 1 and 0 <= vector.y <= GAME_HEIGHT - 1)


def move_cursor(x: int, y: int) -> str:
    return f"\033[{y};{x}H"


def clear_screen() -> str:
    return "\033[2J\033[1;1H"


def render_drawable(drawable: Drawable, offset: Vector) -> str:
    """Escape sequence drawing ``drawable`` shifted by ``offset``."""
    position = offset + drawable.position
    modes = ";".join(str(mode) for mode in drawable.display.modes)
    return (
        move_cursor(position.x, position.y)
        + f"\033[{modes}m"
        + drawable.display.character
        + "\033[0m"
    )


@dataclass
class Game:
    level_size: Vector = field(default_factory=lambda: Vector(GAME_WIDTH, GAME_HEIGHT))
    offset: Vector = field(default_factory=Vector)
    player: Drawable = field(
        default_factory=lambda: Drawable(
            Vector(10, 10), Display(SQUARE, (Color.GREEN.value,))
        )
    )

    def set_offset(self, screen_size: Vector) -> bool:
        """Center the level on the screen; False if the screen is too small."""
        if self.level_size.x * 2 > screen_size.x or self.level_size.y > screen_size.y:
            return False
        self.offset = Vector(
            screen_size.x // 2 - self.level_size.x // 2,
            screen_size.y // 2 - self.level_size.y // 2,
        )
        return True

    def to_terminal(self, vector: Vector) -> Vector:
        return self.offset + vector

    def try_move_player(self, vector: Vector) -> bool:
        destination = self.player.position + vector
        if out_of_bounds(destination):
            return False
        self.player.position = destination
        return True

    def _border_cells(self):
        width, height = self.level_size.x, self.level_size.y
        for x in range(-1, width + 2):
            for y in range(-1, height + 2):
                if x in (-1, width + 1) or y in (-1, height + 1):
                    yield Vector(x, y)

    def render_border(self) -> str:
        return "".join(
            move_cursor(position.x, position.y) + FULL_BLOCK
            for position in map(self.to_terminal, self._border_cells())
        )

    def render_player(self) -> str:
        return render_drawable(self.player, self.offset)