"""A character grid with a movable cursor."""

from __future__ import annotations

from dataclasses import dataclass, field

from .direction import Direction


@dataclass(frozen=True)
class UVec2:
    """A non-negative grid coordinate."""

    x: int
    y: int


@dataclass
class TraversableMatrix:
    """A grid of characters with a current position."""

    grid: list[list[str]]
    width: int
    height: int
    position: UVec2 = field(default_factory=lambda: UVec2(0, 0))

    @classmethod
    def from_str(cls, text: str) -> "TraversableMatrix":
        """Build a matrix from lines of text, one cell per character."""
        grid = [list(line) for line in text.splitlines()]
        if not grid:
            raise ValueError("cannot build a matrix from empty text")
        return cls(grid=grid, width=len(grid[0]), height=len(grid))

    def cur(self) -> str:
        """The cell at the current position."""
        return self.grid[self.position.y][self.position.x]

    def set_position(self, x: int, y: int) -> None:
        """Move the cursor to (x, y); positions outside the grid are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.position = UVec2(x, y)

    def pos_in_dir(self, direction: Direction) -> UVec2 | None:
        """The neighbouring position in a direction, or None at the edge."""
        dx, dy = direction.offset
        x = self.position.x + dx
        y = self.position.y + dy
        if 0 <= x < self.width and 0 <= y < self.height:
            return UVec2(x, y)
        return None

    def peek_in_dir(self, direction: Direction) -> str | None:
        """The neighbouring cell in a direction, or None at the edge."""
        pos = self.pos_in_dir(direction)
        if pos is None:
            return None
        return self.grid[pos.y][pos.x]

    def move_in_dir(self, direction: Direction) -> None:
        """Step in a direction; stays put at the edge."""
        pos = self.pos_in_dir(direction)
        if pos is not None:
            self.position = pos

    def render(self) -> str:
        """The grid as text, one row per line."""
        return "\n".join("".join(row) for row in self.grid)

    def __str__(self) -> str:
        return self.render()