import random

import pytest

import seabattle.core.fleet as fleet_module
from seabattle.core.board import BoardState
from seabattle.core.errors import InvalidPlacement
from seabattle.core.fleet import Fleet, Ship, random_fleet, remaining_lengths
from seabattle.core.models import Coord, cells_for_placement, moore_neighborhood
from seabattle.core.placement import place
from seabattle.core.rulesets import CLASSIC, RUSSIAN, packed_layout, resolve_ruleset


def _assert_non_touching(layout, size: int = 10) -> None:
    for idx, placement in enumerate(layout):
        halo = moore_neighborhood(cells_for_placement(placement), size)
        for other_idx, other in enumerate(layout):
            if other_idx != idx:
                assert not halo & set(cells_for_placement(other))


def test_ship_hits_never_exceed_length() -> None:
    ship = Ship(length=2, cells=(Coord(0, 0), Coord(0, 1)))
    assert not ship.record_hit()
    assert ship.record_hit()
    assert ship.record_hit()
    assert ship.hits == 2
    assert ship.sunk


def test_ship_rejects_mismatched_footprint() -> None:
    with pytest.raises(ValueError):
        Ship(length=3, cells=(Coord(0, 0),))


def test_fleet_alive_and_all_sunk() -> None:
    fleet = Fleet()
    assert not fleet.all_sunk()
    fleet.add(Ship(length=1, cells=(Coord(0, 0),)))
    fleet.add(Ship(length=1, cells=(Coord(2, 2),)))
    assert fleet.alive_count() == 2
    fleet.ships[0].record_hit()
    fleet.ships[1].record_hit()
    assert fleet.alive_count() == 0
    assert fleet.all_sunk()


def test_remaining_lengths_follows_ruleset_order() -> None:
    fleet = Fleet()
    fleet.add(Ship(length=3, cells=(Coord(0, 0), Coord(0, 1), Coord(0, 2))))
    assert remaining_lengths(CLASSIC, fleet) == [5, 4, 3, 2]


@pytest.mark.parametrize("ruleset", [CLASSIC, RUSSIAN])
def test_random_fleet_is_legal(seeded_rng, ruleset) -> None:
    layout = random_fleet(ruleset, seeded_rng)
    assert [placement.length for placement in layout] == list(ruleset.lengths)
    _assert_non_touching(layout)
    board = BoardState()
    fleet = Fleet()
    for placement in layout:
        place(board, fleet, placement.bow, placement.length, placement.orientation)
    assert len(fleet) == ruleset.ship_count


def test_random_fleet_falls_back_to_packed_layout(monkeypatch) -> None:
    monkeypatch.setattr(fleet_module, "_generate_non_touching_fleet", lambda *args: None)
    layout = random_fleet(CLASSIC, random.Random(5), attempts=3)
    assert layout == packed_layout(CLASSIC.lengths, 10)


def test_random_fleet_rejects_unfit_ruleset() -> None:
    with pytest.raises(ValueError):
        random_fleet(resolve_ruleset([6, 6]), random.Random(1), size=5)


def test_random_fleet_respects_existing_ships(seeded_rng) -> None:
    occupied = {Coord(0, col) for col in range(5)}
    layout = random_fleet(resolve_ruleset([4, 3]), seeded_rng, occupied=occupied)
    for placement in layout:
        assert not moore_neighborhood(cells_for_placement(placement), 10) & occupied


def test_random_fleet_rejects_remainder_that_cannot_fit(caplog) -> None:
    occupied = {Coord(1, 1)}
    with pytest.raises(InvalidPlacement):
        random_fleet(resolve_ruleset([3]), random.Random(2), size=3, attempts=5, occupied=occupied)
    assert any("random_fleet_fallback" in record.getMessage() for record in caplog.records)
