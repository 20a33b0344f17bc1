import random

from seabattle.app.services.placement_flow import (
    ClickKind,
    PlacementCursor,
    handle_placement_click,
    preview,
)
from seabattle.core.models import Coord, Orientation, Phase, Side
from seabattle.core.rules import auto_place, create_match


def test_secondary_click_rotates_next_ship() -> None:
    match = create_match("classic")
    cursor = PlacementCursor()
    result = handle_placement_click(match, cursor, Coord(0, 0), ClickKind.SECONDARY)
    assert result.handled and not result.placed
    assert cursor.orientation is Orientation.VERTICAL
    assert "vertical" in result.status
    assert len(match.fleet(Side.PLAYER)) == 0


def test_primary_click_places_ships_in_ruleset_order() -> None:
    match = create_match("classic")
    cursor = PlacementCursor()
    first = handle_placement_click(match, cursor, Coord(0, 0), ClickKind.PRIMARY)
    assert first.placed
    assert first.status == "Placed Carrier. Next: 4-cell ship."
    assert match.fleet(Side.PLAYER).lengths() == [5]

    rejected = handle_placement_click(match, cursor, Coord(1, 0), ClickKind.PRIMARY)
    assert rejected.handled and not rejected.placed
    assert match.fleet(Side.PLAYER).lengths() == [5]


def test_preview_reports_footprint_and_validity() -> None:
    match = create_match("classic")
    cursor = PlacementCursor(orientation=Orientation.VERTICAL)
    shown = preview(match, cursor, Coord(6, 9))
    assert shown is not None
    assert shown.cells == (Coord(6, 9), Coord(7, 9), Coord(8, 9), Coord(9, 9), Coord(10, 9))
    assert not shown.valid
    assert preview(match, cursor, Coord(5, 9)).valid


def test_clicks_after_fleet_complete_are_not_handled() -> None:
    match = create_match("russian")
    auto_place(match, Side.AI, random.Random(1))
    cursor = PlacementCursor()
    auto_place(match, Side.PLAYER, random.Random(2))
    assert match.phase is Phase.BATTLE
    result = handle_placement_click(match, cursor, Coord(0, 0), ClickKind.PRIMARY)
    assert not result.handled
    assert preview(match, cursor, Coord(0, 0)) is None


def test_last_click_status_waits_for_incomplete_opponent() -> None:
    match = create_match([2, 1])
    cursor = PlacementCursor()
    handle_placement_click(match, cursor, Coord(0, 0), ClickKind.PRIMARY)
    result = handle_placement_click(match, cursor, Coord(5, 5), ClickKind.PRIMARY)
    assert result.placed
    assert match.phase is Phase.PLACEMENT
    assert result.status == "Fleet placed. Waiting for opponent."


def test_last_click_status_announces_battle_start() -> None:
    match = create_match([2, 1])
    auto_place(match, Side.AI, random.Random(5))
    cursor = PlacementCursor()
    handle_placement_click(match, cursor, Coord(0, 0), ClickKind.PRIMARY)
    result = handle_placement_click(match, cursor, Coord(5, 5), ClickKind.PRIMARY)
    assert result.placed
    assert match.phase is Phase.BATTLE
    assert result.status == "Battle started. Your turn."
