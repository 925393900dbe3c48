"""The snake entity."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .utils import BASE_SPEED_MS, CELL_SIZE, RIGHT, Direction, Position, add_direction, is_opposite


@dataclass(slots=True)
class Snake:
    """Ordered tail-to-head body, heading and tick interval."""

    start_pos: Position = (0, 0)
    start_dir: Direction = RIGHT
    base_speed_ms: int = BASE_SPEED_MS

    cells: deque[Position] = field(default_factory=deque, init=False)
    direction: Direction = field(init=False)
    speed_ms: int = field(init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Shrink back to a single cell at the start position."""
        self.cells.clear()
        self.cells.append(self.start_pos)
        self.direction = self.start_dir
        self.speed_ms = self.base_speed_ms

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def head(self) -> Position:
        return self.cells[-1]

    @property
    def body(self) -> list[Position]:
        """Every cell except the head, tail first."""
        return list(self.cells)[:-1]

    def next_head(self, step: int = CELL_SIZE) -> Position:
        """Compute where the head lands after one step."""
        return add_direction(self.head, self.direction, step)

    def grow(self, cell: Position) -> None:
        """Push a new head and keep the tail."""
        self.cells.append(cell)

    def advance(self, cell: Position) -> None:
        """Push a new head and drop the tail."""
        self.cells.append(cell)
        self.cells.popleft()

    def turn(self, direction: Direction) -> bool:
        """Change heading unless it would reverse the current one."""
        if is_opposite(direction, self.direction):
            return False
        self.direction = direction
        return True

    def hits_itself(self) -> bool:
        return self.head in self.body
