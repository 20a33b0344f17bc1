"""Fleet model and randomized fleet construction."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from seabattle.core.errors import InvalidPlacement
from seabattle.core.models import (
    BOARD_SIZE,
    Coord,
    Orientation,
    ShipPlacement,
    cells_for_placement,
    moore_neighborhood,
)
from seabattle.core.rulesets import Ruleset, packed_layout, validate_ruleset

logger = logging.getLogger(__name__)

DEFAULT_PLACEMENT_ATTEMPTS = 400


@dataclass(slots=True)
class Ship:
    """A placed ship and its damage counter."""

    length: int
    cells: tuple[Coord, ...]
    name: str = ""
    hits: int = 0

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError("Ship length must be positive.")
        if len(self.cells) != self.length:
            raise ValueError("Ship footprint must match its length.")

    @property
    def sunk(self) -> bool:
        return self.hits >= self.length

    def record_hit(self) -> bool:
        """Count one hit; return whether the ship is now sunk."""
        if self.hits < self.length:
            self.hits += 1
        return self.sunk


@dataclass(slots=True)
class Fleet:
    """Ordered collection of ships owned by one side."""

    ships: list[Ship] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.ships)

    def add(self, ship: Ship) -> int:
        """Append ship and return its fleet index."""
        self.ships.append(ship)
        return len(self.ships) - 1

    def alive_count(self) -> int:
        return sum(1 for ship in self.ships if not ship.sunk)

    def all_sunk(self) -> bool:
        """Return whether every ship has been sunk (false for an empty fleet)."""
        return bool(self.ships) and self.alive_count() == 0

    def lengths(self) -> list[int]:
        return [ship.length for ship in self.ships]


def remaining_lengths(ruleset: Ruleset, fleet: Fleet) -> list[int]:
    """Ruleset lengths not yet covered by the fleet, in ruleset order."""
    pending = list(ruleset.lengths)
    for length in fleet.lengths():
        if length in pending:
            pending.remove(length)
    return pending


def random_fleet(
    ruleset: Ruleset,
    rng: random.Random,
    size: int = BOARD_SIZE,
    attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
    occupied: set[Coord] | None = None,
) -> list[ShipPlacement]:
    """Generate a random non-touching layout for the ruleset.

    ``occupied`` seeds cells already taken by ships on the board, so a
    partially placed fleet can be completed. Returns one placement per
    ruleset length, in ruleset order.
    """
    valid, reason = validate_ruleset(ruleset, size)
    if not valid:
        raise ValueError(reason)
    taken = set(occupied or ())
    for _ in range(max(1, attempts)):
        generated = _generate_non_touching_fleet(ruleset.lengths, rng, size, taken)
        if generated is not None:
            return generated
    logger.warning(
        "random_fleet_fallback ruleset=%s size=%d attempts=%d", ruleset.name, size, attempts
    )
    return _packed_fallback(ruleset, size, taken)


def _generate_non_touching_fleet(
    lengths: tuple[int, ...],
    rng: random.Random,
    size: int,
    occupied: set[Coord],
) -> list[ShipPlacement] | None:
    taken = set(occupied)
    placements: dict[int, ShipPlacement] = {}
    order = sorted(range(len(lengths)), key=lambda idx: -lengths[idx])

    for idx in order:
        candidates = _candidate_placements(lengths[idx], size, taken)
        if not candidates:
            return None
        placement = rng.choice(candidates)
        placements[idx] = placement
        taken.update(cells_for_placement(placement))

    return [placements[idx] for idx in range(len(lengths))]


def _candidate_placements(length: int, size: int, occupied: set[Coord]) -> list[ShipPlacement]:
    candidates: list[ShipPlacement] = []
    orientations = (Orientation.HORIZONTAL,) if length == 1 else (Orientation.HORIZONTAL, Orientation.VERTICAL)
    for orientation in orientations:
        max_row = size if orientation is Orientation.HORIZONTAL else size - length + 1
        max_col = size - length + 1 if orientation is Orientation.HORIZONTAL else size
        for row in range(max_row):
            for col in range(max_col):
                placement = ShipPlacement(length=length, bow=Coord(row, col), orientation=orientation)
                if moore_neighborhood(cells_for_placement(placement), size) & occupied:
                    continue
                candidates.append(placement)
    return candidates


def _packed_fallback(ruleset: Ruleset, size: int, occupied: set[Coord]) -> list[ShipPlacement]:
    """Deterministic last resort; only usable on a board with no ships yet."""
    if occupied:
        raise InvalidPlacement("Remaining ships do not fit around the ships already placed.")
    layout = packed_layout(ruleset.lengths, size)
    if layout is None:
        raise RuntimeError("Failed to generate fleet placement.")
    return layout
