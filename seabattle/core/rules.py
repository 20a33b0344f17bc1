"""Match state, placement/battle phases, and turn resolution logic."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from seabattle.core.board import BoardState
from seabattle.core.errors import FleetIncomplete, InvalidAttack, InvalidPlacement
from seabattle.core.fleet import DEFAULT_PLACEMENT_ATTEMPTS, Fleet, Ship, random_fleet, remaining_lengths
from seabattle.core.models import BOARD_SIZE, Coord, Orientation, Phase, ShotResult, Side
from seabattle.core.placement import place
from seabattle.core.rulesets import Ruleset, resolve_ruleset, validate_ruleset
from seabattle.core.shot_resolution import attack

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Match:
    """Runtime match state.

    Each side exclusively owns one board and one fleet; the opponent only
    reaches them through ``fire``.
    """

    ruleset: Ruleset
    size: int
    boards: dict[Side, BoardState]
    fleets: dict[Side, Fleet]
    phase: Phase = Phase.PLACEMENT
    active_side: Side = Side.PLAYER
    winner: Side | None = None
    last_message: str = "Place your fleet."
    history: list[str] = field(default_factory=list)

    def board(self, side: Side) -> BoardState:
        return self.boards[side]

    def fleet(self, side: Side) -> Fleet:
        return self.fleets[side]

    def fleet_complete(self, side: Side) -> bool:
        return len(self.fleets[side]) == self.ruleset.ship_count


def create_match(ruleset: Ruleset | str | Sequence[int], size: int = BOARD_SIZE) -> Match:
    """Create a match in the placement phase with empty boards."""
    resolved = resolve_ruleset(ruleset)
    valid, reason = validate_ruleset(resolved, size)
    if not valid:
        raise ValueError(reason)
    return Match(
        ruleset=resolved,
        size=size,
        boards={side: BoardState(size=size) for side in Side},
        fleets={side: Fleet() for side in Side},
    )


def pending_lengths(match: Match, side: Side) -> list[int]:
    """Ship lengths the side still has to place, in ruleset order."""
    return remaining_lengths(match.ruleset, match.fleets[side])


def next_ship_length(match: Match, side: Side) -> int | None:
    """Length of the next ship to place in ruleset order, if any."""
    pending = pending_lengths(match, side)
    return pending[0] if pending else None


def place_ship(
    match: Match,
    side: Side,
    origin: Coord,
    length: int,
    orientation: Orientation,
) -> Ship:
    """Place one ship for ``side`` and advance to battle when both fleets are complete."""
    if match.phase is not Phase.PLACEMENT:
        raise InvalidPlacement("Ships can only be placed during the placement phase.")
    pending = pending_lengths(match, side)
    if length not in pending:
        raise InvalidPlacement(f"No {length}-cell ship left to place for {side.value}.")
    name = match.ruleset.ship_name(_ruleset_index(match, side, length))
    ship = place(match.boards[side], match.fleets[side], origin, length, orientation, name=name)
    logger.info(
        "ship_placed side=%s name=%s length=%d row=%d col=%d orientation=%s",
        side.value,
        name,
        length,
        origin.row,
        origin.col,
        orientation.value,
    )
    _maybe_start_battle(match)
    return ship


def auto_place(
    match: Match,
    side: Side,
    rng: random.Random,
    attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
) -> list[Ship]:
    """Randomly place every ship the side has not placed yet."""
    if match.phase is not Phase.PLACEMENT:
        raise InvalidPlacement("Ships can only be placed during the placement phase.")
    pending = pending_lengths(match, side)
    if not pending:
        return []
    occupied = {cell for ship in match.fleets[side].ships for cell in ship.cells}
    remainder = Ruleset(name=match.ruleset.name, lengths=tuple(pending))
    layout = random_fleet(remainder, rng, size=match.size, attempts=attempts, occupied=occupied)
    return [
        place_ship(match, side, placement.bow, placement.length, placement.orientation)
        for placement in layout
    ]


def fire(match: Match, side: Side, target: Coord) -> ShotResult:
    """Resolve a shot by ``side`` at the opponent's board.

    A miss passes the turn; a hit or sink keeps it. Sinking the defender's
    last ship ends the match in the same call.
    """
    if match.phase is Phase.PLACEMENT:
        raise FleetIncomplete("Fleets are still being placed.")
    if match.phase is Phase.OVER:
        raise InvalidAttack("The match is over.")
    if match.active_side is not side:
        raise InvalidAttack(f"It is not {side.value}'s turn.")

    defender = side.opponent
    result = attack(match.boards[defender], match.fleets[defender], target)
    if result is ShotResult.INVALID:
        raise InvalidAttack(f"Cell ({target.row}, {target.col}) cannot be targeted.")

    who = "You" if side is Side.PLAYER else "AI"
    if result is ShotResult.MISS:
        match.last_message = f"{who} fired at ({target.row}, {target.col}): miss."
        match.active_side = defender
    elif result is ShotResult.HIT:
        match.last_message = f"{who} fired at ({target.row}, {target.col}): hit."
    else:
        owner = match.boards[defender].owner_at(target)
        name = match.fleets[defender].ships[owner].name if owner is not None else "ship"
        match.last_message = f"{who} fired at ({target.row}, {target.col}): sunk {name}."
    match.history.append(match.last_message)

    if match.fleets[defender].all_sunk():
        match.phase = Phase.OVER
        match.winner = side
        match.last_message = "You win." if side is Side.PLAYER else "AI wins."
        match.history.append(match.last_message)
        logger.info("match_over winner=%s", side.value)
    return result


def _ruleset_index(match: Match, side: Side, length: int) -> int:
    used = match.fleets[side].lengths().count(length)
    seen = 0
    for idx, candidate in enumerate(match.ruleset.lengths):
        if candidate != length:
            continue
        if seen == used:
            return idx
        seen += 1
    raise InvalidPlacement(f"No {length}-cell ship left to place for {side.value}.")


def _maybe_start_battle(match: Match) -> None:
    if all(match.fleet_complete(side) for side in Side):
        match.phase = Phase.BATTLE
        match.active_side = Side.PLAYER
        match.last_message = "Battle started. Your turn."
        match.history.append(match.last_message)
        logger.info("battle_started ruleset=%s size=%d", match.ruleset.name, match.size)
