"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

BOARD_SIZE = 10


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    def toggled(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class CellState(IntEnum):
    """Per-cell state on the owner's board."""

    EMPTY = 0
    OCCUPIED = 1
    HIT = 2
    MISS = 3
    SUNK = 4


class CellView(IntEnum):
    """Per-cell state as rendered for a given viewer."""

    UNKNOWN = 0
    OCCUPIED = 1
    HIT = 2
    MISS = 3
    SUNK = 4


class ShotResult(StrEnum):
    """Result of a single shot."""

    INVALID = "INVALID"
    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"


class Side(StrEnum):
    """Owner of a board or turn."""

    PLAYER = "PLAYER"
    AI = "AI"

    @property
    def opponent(self) -> Side:
        return Side.AI if self is Side.PLAYER else Side.PLAYER


class Phase(StrEnum):
    """Match lifecycle phase."""

    PLACEMENT = "PLACEMENT"
    BATTLE = "BATTLE"
    OVER = "OVER"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship."""

    length: int
    bow: Coord
    orientation: Orientation


# Fixed probe order: up, down, left, right.
ORTHOGONAL_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def cells_for_placement(placement: ShipPlacement) -> list[Coord]:
    """Compute occupied cells for a ship placement."""
    result: list[Coord] = []
    for i in range(placement.length):
        if placement.orientation is Orientation.HORIZONTAL:
            result.append(Coord(placement.bow.row, placement.bow.col + i))
        else:
            result.append(Coord(placement.bow.row + i, placement.bow.col))
    return result


def in_bounds(coord: Coord, size: int) -> bool:
    """Return whether the coordinate lies on a size x size board."""
    return 0 <= coord.row < size and 0 <= coord.col < size


def orthogonal_neighbors(
    coord: Coord,
    size: int,
    steps: tuple[tuple[int, int], ...] = ORTHOGONAL_STEPS,
) -> list[Coord]:
    """Return in-bounds orthogonal neighbours in step order."""
    result: list[Coord] = []
    for dr, dc in steps:
        cell = Coord(coord.row + dr, coord.col + dc)
        if in_bounds(cell, size):
            result.append(cell)
    return result


def moore_neighborhood(cells: list[Coord], size: int) -> set[Coord]:
    """Return the cells plus their 8-neighbourhood, clipped to the board."""
    result: set[Coord] = set()
    for cell in cells:
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                candidate = Coord(cell.row + dr, cell.col + dc)
                if in_bounds(candidate, size):
                    result.add(candidate)
    return result
