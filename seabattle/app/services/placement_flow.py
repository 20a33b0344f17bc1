"""Click-driven ship placement for the player's board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from seabattle.app.services.battle import try_place
from seabattle.core.errors import InvalidPlacement
from seabattle.core.models import Coord, Orientation, Phase, ShipPlacement, Side, cells_for_placement
from seabattle.core.placement import can_place
from seabattle.core.rules import Match, next_ship_length


class ClickKind(StrEnum):
    """Pointer button forwarded by the rendering surface."""

    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"


@dataclass(slots=True)
class PlacementCursor:
    """Orientation for the next ship in hand."""

    side: Side = Side.PLAYER
    orientation: Orientation = Orientation.HORIZONTAL


@dataclass(frozen=True, slots=True)
class PlacementPreview:
    """Hover preview for the next ship."""

    cells: tuple[Coord, ...]
    valid: bool


@dataclass(frozen=True, slots=True)
class PlacementActionResult:
    """Outcome of a placement interaction."""

    handled: bool
    placed: bool
    status: str


def preview(match: Match, cursor: PlacementCursor, coord: Coord) -> PlacementPreview | None:
    """Footprint of the next ship at ``coord`` and whether it may go there."""
    length = next_ship_length(match, cursor.side)
    if length is None:
        return None
    cells = cells_for_placement(ShipPlacement(length, coord, cursor.orientation))
    valid = can_place(match.boards[cursor.side], coord, length, cursor.orientation)
    return PlacementPreview(cells=tuple(cells), valid=valid)


def handle_placement_click(
    match: Match,
    cursor: PlacementCursor,
    coord: Coord,
    kind: ClickKind,
) -> PlacementActionResult:
    """Rotate on secondary click, place the next ship on primary click."""
    length = next_ship_length(match, cursor.side)
    if length is None:
        return PlacementActionResult(handled=False, placed=False, status=match.last_message)

    if kind is ClickKind.SECONDARY:
        cursor.orientation = cursor.orientation.toggled()
        return PlacementActionResult(
            handled=True,
            placed=False,
            status=f"Place {length}-cell ship ({cursor.orientation.value.lower()}).",
        )

    try:
        ship = try_place(match, cursor.side, coord, length, cursor.orientation)
    except InvalidPlacement as exc:
        return PlacementActionResult(handled=True, placed=False, status=str(exc))

    upcoming = next_ship_length(match, cursor.side)
    if upcoming is None and match.phase is Phase.PLACEMENT:
        status = "Fleet placed. Waiting for opponent."
    elif upcoming is None:
        status = match.last_message
    else:
        status = f"Placed {ship.name}. Next: {upcoming}-cell ship."
    return PlacementActionResult(handled=True, placed=True, status=status)
