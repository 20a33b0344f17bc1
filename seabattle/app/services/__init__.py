"""Application service-layer helpers."""

from seabattle.app.services.battle import (
    GameSetup,
    ShotReport,
    ai_choose_move,
    ai_record_result,
    board_snapshot,
    build_ai_strategy,
    new_game,
    play_ai_shot,
    start_match,
    try_attack,
    try_place,
)
from seabattle.app.services.placement_flow import (
    ClickKind,
    PlacementActionResult,
    PlacementCursor,
    PlacementPreview,
    handle_placement_click,
    preview,
)

__all__ = [
    "ClickKind",
    "GameSetup",
    "PlacementActionResult",
    "PlacementCursor",
    "PlacementPreview",
    "ShotReport",
    "ai_choose_move",
    "ai_record_result",
    "board_snapshot",
    "build_ai_strategy",
    "handle_placement_click",
    "new_game",
    "play_ai_shot",
    "preview",
    "start_match",
    "try_attack",
    "try_place",
]
