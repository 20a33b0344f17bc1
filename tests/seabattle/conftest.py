from __future__ import annotations

import random

import pytest

from seabattle.core.models import Coord, Orientation, ShipPlacement, Side
from seabattle.core.rules import Match, create_match, place_ship


def make_valid_fleet() -> list[ShipPlacement]:
    return [
        ShipPlacement(5, Coord(0, 0), Orientation.HORIZONTAL),
        ShipPlacement(4, Coord(2, 0), Orientation.HORIZONTAL),
        ShipPlacement(3, Coord(4, 0), Orientation.HORIZONTAL),
        ShipPlacement(3, Coord(6, 0), Orientation.HORIZONTAL),
        ShipPlacement(2, Coord(8, 0), Orientation.HORIZONTAL),
    ]


def make_battle_match(fleet: list[ShipPlacement] | None = None) -> Match:
    layout = fleet if fleet is not None else make_valid_fleet()
    match = create_match("classic")
    for side in Side:
        for placement in layout:
            place_ship(match, side, placement.bow, placement.length, placement.orientation)
    return match


@pytest.fixture
def valid_fleet() -> list[ShipPlacement]:
    return make_valid_fleet()


@pytest.fixture
def battle_match() -> Match:
    return make_battle_match()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
