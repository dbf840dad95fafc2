import random

import pytest

from swapmatch.components.board import Board, BoardBoundsError
from swapmatch.components.match import Match
from swapmatch.constants import EMPTY
from swapmatch.events.bus import (EventBus, EVENT_TILE_SWAP_REQUEST, EVENT_TILE_SWAP_VALID,
                                  EVENT_TILE_SWAP_INVALID, EVENT_MATCH_FOUND, EVENT_MATCH_CLEARED)
from swapmatch.session import MatchSession

from tests.helpers import checker_board, has_run, scripted_random


def double_row_board() -> Board:
    # Swapping (1,6) with (1,7) completes a triple on both rows.
    return checker_board(8, 8, {
        (0, 6): 2, (1, 6): 1, (2, 6): 2,
        (0, 7): 1, (1, 7): 2, (2, 7): 1,
    })


def make_session(board, bus=None, refills=()):
    return MatchSession(bus or EventBus(), board=board, rng=scripted_random(refills, seed=11), reset_on_stalemate=False)


def test_invalid_swap_reverts():
    bus = EventBus()
    session = make_session(checker_board(), bus)
    before = list(session.board.cells)
    invalid = []
    bus.subscribe(EVENT_TILE_SWAP_INVALID, lambda s, **k: invalid.append(k))
    assert session.swap(0, 0, 1, 0) == []
    assert session.board.cells == before
    assert invalid == [{'src': (0, 0), 'dst': (1, 0), 'reason': 'no_match'}]


def test_non_adjacent_and_empty_swaps_rejected():
    bus = EventBus()
    board = checker_board()
    board.set_color(4, 4, EMPTY)
    session = make_session(board, bus)
    reasons = []
    bus.subscribe(EVENT_TILE_SWAP_INVALID, lambda s, **k: reasons.append(k['reason']))
    assert session.swap(0, 0, 1, 1) == []
    assert session.swap(0, 0, 2, 0) == []
    assert session.swap(4, 3, 4, 4) == []
    assert reasons == ['not_adjacent', 'not_adjacent', 'empty_cell']
    assert session.board.color_at(4, 4) == EMPTY


def test_out_of_bounds_swap_raises():
    session = make_session(checker_board())
    before = list(session.board.cells)
    with pytest.raises(BoardBoundsError):
        session.swap(0, 0, -1, 0)
    assert session.board.cells == before


def test_valid_swap_resolves_both_rows():
    bus = EventBus()
    session = make_session(double_row_board(), bus)
    events = []
    for name in (EVENT_TILE_SWAP_VALID, EVENT_MATCH_FOUND, EVENT_MATCH_CLEARED):
        bus.subscribe(name, lambda s, _name=name, **k: events.append((_name, k)))
    matches = session.swap(1, 6, 1, 7)
    # The moved tile's destination is detected first.
    assert matches == [Match(1, 7, -1, 0, 3, 1), Match(1, 6, -1, 0, 3, 1)]
    assert [name for name, _ in events] == [EVENT_TILE_SWAP_VALID, EVENT_MATCH_FOUND, EVENT_MATCH_CLEARED]
    found = events[1][1]
    assert found['reason'] == 'swap'
    assert len(found['positions']) == 6
    assert events[2][1]['affected'] == {0: 7, 1: 7, 2: 7}
    assert session.score == 200
    assert session.board.empty_cells() == []


def test_swap_request_event_drives_swap():
    bus = EventBus()
    session = make_session(double_row_board(), bus)
    valid = []
    bus.subscribe(EVENT_TILE_SWAP_VALID, lambda s, **k: valid.append(k))
    bus.emit(EVENT_TILE_SWAP_REQUEST, src=(1, 6), dst=(1, 7))
    assert valid == [{'src': (1, 6), 'dst': (1, 7)}]


def test_input_locked_until_cascade_settles():
    bus = EventBus()
    session = make_session(double_row_board(), bus)
    reasons = []
    bus.subscribe(EVENT_TILE_SWAP_INVALID, lambda s, **k: reasons.append(k['reason']))
    assert session.swap(1, 6, 1, 7)
    assert session.swap(5, 0, 6, 0) == []
    assert reasons == ['cascade_active']
    session.settle()
    assert not has_run(session.board)
    outcomes = []
    bus.subscribe(EVENT_TILE_SWAP_VALID, lambda s, **k: outcomes.append("valid"))
    bus.subscribe(EVENT_TILE_SWAP_INVALID, lambda s, **k: outcomes.append(k["reason"]))
    session.swap(5, 0, 6, 0)
    assert outcomes and outcomes[-1] != "cascade_active"


def test_refill_uses_board_colour_count():
    names = ["red", "orange", "yellow", "green", "blue", "indigo", "violet", "pink"]
    with pytest.raises(ValueError):
        MatchSession(board=double_row_board(), color_names=names)

    for seed in range(30):
        cells = double_row_board().cells
        session = MatchSession(
            board=Board(width=8, height=8, cells=cells, num_colors=8),
            color_names=names,
            rng=random.Random(seed),
            reset_on_stalemate=False,
        )
        assert session.swap(1, 6, 1, 7)
        session.settle()
        assert EMPTY not in session.board.cells
        assert set(session.board.cells) <= set(range(1, 9))


def test_single_step_releases_lock_when_nothing_cascades():
    bus = EventBus()
    # Refills recreate the checker pattern, so the swap leaves nothing to cascade.
    session = make_session(double_row_board(), bus, refills=[4, 5, 5, 4, 4, 5])
    reasons = []
    bus.subscribe(EVENT_TILE_SWAP_INVALID, lambda s, **k: reasons.append(k['reason']))
    assert session.swap(1, 6, 1, 7)
    assert session.board.cells == checker_board(8, 8).cells
    assert session.swap(5, 0, 6, 0) == []
    assert session.cascade_step() == []
    assert session.swap(5, 0, 6, 0) == []
    assert reasons == ['cascade_active', 'no_match']
