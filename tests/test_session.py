import json

from pairs.components.selection_state import SelectionPhase
from pairs.events.bus import EVENT_BOARD_READY, EVENT_SCORE_CHANGED
from pairs.systems.board_ops import get_board, get_selection, iter_cards
from tests.helpers import SYMBOLS_AB, drive_ticks, make_session, record_events


def _write_save(tmp_path, value):
    (tmp_path / "prefs.json").write_text(json.dumps({"CardGameState": value}), encoding="utf-8")


def test_initialize_without_save_starts_new_game(tmp_path):
    session = make_session(tmp_path)
    ready = record_events(session.event_bus, EVENT_BOARD_READY)
    scores = record_events(session.event_bus, EVENT_SCORE_CHANGED)

    assert session.initialize() is False

    assert get_board(session.world).card_count == 4
    assert ready[-1]["restored"] is False
    assert scores == [{"match_count": 0, "total_attempts": 0}]


def test_initialize_restores_saved_game(tmp_path):
    _write_save(tmp_path, json.dumps({
        "matchCount": 1,
        "NoMatchCount": 2,
        "cardStates": [
            {"spriteName": "B", "isMatched": False},
            {"spriteName": "A", "isMatched": True},
            {"spriteName": "A", "isMatched": True},
            {"spriteName": "B", "isMatched": False},
        ],
    }))
    session = make_session(tmp_path)
    scores = record_events(session.event_bus, EVENT_SCORE_CHANGED)

    assert session.initialize() is True

    board = get_board(session.world)
    assert (board.match_count, board.mismatch_count) == (1, 2)
    assert [card.symbol_id for _, _, card in iter_cards(session.world)] == ["B", "A", "A", "B"]
    assert scores == [{"match_count": 1, "total_attempts": 3}]


def test_initialize_falls_back_on_corrupt_save(tmp_path):
    _write_save(tmp_path, "{not json")
    session = make_session(tmp_path)

    assert session.initialize() is False

    assert get_board(session.world).card_count == 4
    assert get_board(session.world).match_count == 0
    assert not session.persistence_system.has_save()


def test_initialize_falls_back_on_unreadable_prefs_file(tmp_path):
    (tmp_path / "prefs.json").write_text("garbage", encoding="utf-8")
    session = make_session(tmp_path)
    assert session.initialize() is False
    assert get_board(session.world).card_count == 4


def test_initialize_falls_back_on_unknown_symbol(tmp_path):
    _write_save(tmp_path, json.dumps({
        "matchCount": 0,
        "NoMatchCount": 0,
        "cardStates": [
            {"spriteName": "A", "isMatched": False},
            {"spriteName": "Retired", "isMatched": False},
            {"spriteName": "A", "isMatched": False},
            {"spriteName": "Retired", "isMatched": False},
        ],
    }))
    session = make_session(tmp_path)

    assert session.initialize() is False

    symbols = sorted(card.symbol_id for _, _, card in iter_cards(session.world))
    assert symbols == ["A", "A", "B", "B"]
    assert get_selection(session.world).phase == SelectionPhase.IDLE


def test_shutdown_saves_current_board(tmp_path):
    session = make_session(tmp_path)
    session.initialize()
    session.match_system.select_card(0)
    session.match_system.select_card(1)
    drive_ticks(session.event_bus)

    session.shutdown()

    payload = json.loads(session.persistence_system.store.get("CardGameState"))
    board = get_board(session.world)
    assert payload["matchCount"] == board.match_count
    assert payload["NoMatchCount"] == board.mismatch_count
    assert [entry["spriteName"] for entry in payload["cardStates"]] == [
        card.symbol_id for _, _, card in iter_cards(session.world)
    ]


def test_saved_game_resumes_in_new_session(tmp_path):
    first = make_session(tmp_path, SYMBOLS_AB, seed=1)
    first.initialize()
    order = [card.symbol_id for _, _, card in iter_cards(first.world)]
    partner = order.index(order[0], 1)
    first.match_system.select_card(0)
    first.match_system.select_card(partner)
    drive_ticks(first.event_bus)
    first.shutdown()

    second = make_session(tmp_path, SYMBOLS_AB, seed=2)
    assert second.initialize() is True
    assert [card.symbol_id for _, _, card in iter_cards(second.world)] == order
    assert get_board(second.world).match_count == 1
    restored_flags = [card.is_matched for _, _, card in iter_cards(second.world)]
    assert restored_flags[0] and restored_flags[partner]


def test_initialize_falls_back_on_unplayable_save(tmp_path):
    # Well-formed JSON, but the matched flags disagree with matchCount.
    _write_save(tmp_path, json.dumps({
        "matchCount": 0,
        "NoMatchCount": 1,
        "cardStates": [
            {"spriteName": "A", "isMatched": True},
            {"spriteName": "A", "isMatched": True},
            {"spriteName": "B", "isMatched": True},
            {"spriteName": "B", "isMatched": True},
        ],
    }))
    session = make_session(tmp_path)

    assert session.initialize() is False

    assert get_board(session.world).card_count == 4
    assert not any(card.is_matched for _, _, card in iter_cards(session.world))
    assert get_selection(session.world).phase == SelectionPhase.IDLE
    assert not session.persistence_system.has_save()


def test_shutdown_before_initialize_writes_nothing(tmp_path):
    session = make_session(tmp_path)

    session.shutdown()

    assert not session.persistence_system.has_save()
    assert not (tmp_path / "prefs.json").exists()
