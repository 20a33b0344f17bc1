"""Battle flow orchestration: the library surface consumed by a presentation layer."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from seabattle.ai.directional_probe import DirectionalProbeAI
from seabattle.ai.hunt_target import HuntTargetAI
from seabattle.ai.strategy import AIStrategy
from seabattle.core.errors import InvalidAttack, InvalidPlacement
from seabattle.core.fleet import Ship
from seabattle.core.models import BOARD_SIZE, Coord, Orientation, Phase, ShotResult, Side
from seabattle.core.rules import Match, auto_place, create_match, fire, place_ship
from seabattle.core.rulesets import Ruleset
from seabattle.infra.config import EngineSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameSetup:
    """A freshly started match with the computer fleet in place."""

    match: Match
    ai_strategy: AIStrategy


@dataclass(frozen=True, slots=True)
class ShotReport:
    """Outcome of one AI shot."""

    target: Coord | None
    result: ShotResult
    status: str
    winner: Side | None
    again: bool


def start_match(ruleset: Ruleset | str | Sequence[int], board_size: int = BOARD_SIZE) -> Match:
    """Create a match in the placement phase with two empty boards."""
    match = create_match(ruleset, board_size)
    logger.info("match_created ruleset=%s size=%d", match.ruleset.name, board_size)
    return match


def try_place(
    match: Match,
    side: Side,
    origin: Coord,
    length: int,
    orientation: Orientation,
) -> Ship:
    """Place one ship for ``side``; raises ``InvalidPlacement`` and leaves the match untouched."""
    try:
        return place_ship(match, side, origin, length, orientation)
    except InvalidPlacement as exc:
        logger.debug("placement_rejected side=%s reason=%s", side.value, exc)
        raise


def try_attack(match: Match, side: Side, target: Coord) -> ShotResult:
    """Fire at the opponent of ``side``; raises ``InvalidAttack`` and leaves the match untouched."""
    try:
        return fire(match, side, target)
    except InvalidAttack as exc:
        logger.debug("attack_rejected side=%s reason=%s", side.value, exc)
        raise


def board_snapshot(match: Match, owner: Side, viewer: Side) -> np.ndarray:
    """Read-only ``CellView`` grid of ``owner``'s board as ``viewer`` may see it."""
    view = match.boards[owner].snapshot(reveal_ships=owner is viewer)
    view.setflags(write=False)
    return view


def ai_choose_move(ai: AIStrategy, view: np.ndarray) -> Coord | None:
    """Ask the strategy for its next target."""
    return ai.choose_shot(view)


def ai_record_result(ai: AIStrategy, cell: Coord, result: ShotResult) -> None:
    """Feed a resolved shot back into the strategy's memory."""
    ai.notify_result(cell, result)


def play_ai_shot(match: Match, ai: AIStrategy, side: Side = Side.AI) -> ShotReport:
    """Resolve exactly one AI shot.

    The caller's scheduler invokes this again while ``report.again`` is set;
    a hit never triggers a second shot inside the same call.
    """
    if match.phase is not Phase.BATTLE or match.active_side is not side:
        raise InvalidAttack(f"It is not {side.value}'s turn to fire.")
    view = board_snapshot(match, side.opponent, side)
    target = ai_choose_move(ai, view)
    if target is None:
        return ShotReport(
            target=None,
            result=ShotResult.INVALID,
            status=match.last_message,
            winner=match.winner,
            again=False,
        )
    result = try_attack(match, side, target)
    ai_record_result(ai, target, result)
    return ShotReport(
        target=target,
        result=result,
        status=match.last_message,
        winner=match.winner,
        again=match.phase is Phase.BATTLE and match.active_side is side,
    )


def build_ai_strategy(mode: str, rng: random.Random, size: int = BOARD_SIZE) -> AIStrategy:
    """Construct AI strategy from the configured mode name."""
    selected = mode.strip().lower()
    if selected == "probe":
        return DirectionalProbeAI(rng)
    if selected != "hunt":
        logger.warning("unknown_ai_mode mode=%s fallback=hunt", mode)
    return HuntTargetAI(rng, size=size)


def new_game(settings: EngineSettings, rng: random.Random | None = None) -> GameSetup:
    """Start a match, lay out the computer fleet, and build its strategy."""
    rng = rng if rng is not None else random.Random(settings.seed)
    match = start_match(settings.ruleset, settings.board_size)
    auto_place(match, Side.AI, rng, attempts=settings.placement_attempts)
    strategy = build_ai_strategy(settings.ai_mode, rng, size=settings.board_size)
    logger.info("game_started ai_mode=%s", settings.ai_mode)
    return GameSetup(match=match, ai_strategy=strategy)
