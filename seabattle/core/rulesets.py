"""Fleet composition rulesets."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from seabattle.core.models import BOARD_SIZE, Coord, Orientation, ShipPlacement


@dataclass(frozen=True, slots=True)
class Ruleset:
    """Named fleet composition: the ship lengths each side must place."""

    name: str
    lengths: tuple[int, ...]
    ship_names: tuple[str, ...] = ()

    def ship_name(self, index: int) -> str:
        """Display name for the ship at ruleset position ``index``."""
        if index < len(self.ship_names):
            return self.ship_names[index]
        return f"{self.lengths[index]}-deck"

    @property
    def ship_count(self) -> int:
        return len(self.lengths)


CLASSIC = Ruleset(
    name="classic",
    lengths=(5, 4, 3, 3, 2),
    ship_names=("Carrier", "Battleship", "Cruiser", "Submarine", "Destroyer"),
)
RUSSIAN = Ruleset(name="russian", lengths=(4, 3, 3, 2, 2, 2, 1, 1, 1, 1))

RULESETS: dict[str, Ruleset] = {CLASSIC.name: CLASSIC, RUSSIAN.name: RUSSIAN}


def resolve_ruleset(spec: Ruleset | str | Sequence[int]) -> Ruleset:
    """Resolve a ruleset from an instance, a registered name, or raw lengths.

    Strings that are not registered names are parsed as comma-separated
    lengths, so ``"4,3,2"`` yields a custom ruleset.
    """
    if isinstance(spec, Ruleset):
        return spec
    if isinstance(spec, str):
        key = spec.strip().lower()
        if key in RULESETS:
            return RULESETS[key]
        try:
            lengths = tuple(int(part) for part in key.split(",") if part.strip())
        except ValueError as exc:
            raise ValueError(f"Unknown ruleset: {spec!r}.") from exc
        return Ruleset(name="custom", lengths=lengths)
    return Ruleset(name="custom", lengths=tuple(int(length) for length in spec))


def validate_ruleset(ruleset: Ruleset, size: int = BOARD_SIZE) -> tuple[bool, str]:
    """Validate that a ruleset can always be laid out on a board of ``size``."""
    if size < 1:
        return False, "Board size must be positive."
    if not ruleset.lengths:
        return False, "Ruleset must contain at least one ship."
    for length in ruleset.lengths:
        if not 1 <= length <= size:
            return False, f"Ship length {length} does not fit a {size}x{size} board."
    if packed_layout(ruleset.lengths, size) is None:
        return False, f"Fleet {list(ruleset.lengths)} cannot be laid out on a {size}x{size} board."
    return True, ""


def packed_layout(lengths: Sequence[int], size: int) -> list[ShipPlacement] | None:
    """Deterministic non-touching layout, or None when the fleet does not fit.

    Ships go horizontally, longest first, left to right with a one-cell gap
    on every other row. Result order matches ``lengths``.
    """
    order = sorted(range(len(lengths)), key=lambda idx: (-lengths[idx], idx))
    placements: dict[int, ShipPlacement] = {}
    row = 0
    col = 0
    for idx in order:
        length = lengths[idx]
        if col + length > size:
            row += 2
            col = 0
        if row >= size or length > size:
            return None
        placements[idx] = ShipPlacement(length, Coord(row, col), Orientation.HORIZONTAL)
        col += length + 1
    return [placements[idx] for idx in range(len(lengths))]
