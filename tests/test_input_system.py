import pytest

from pairs.errors import LayoutConfigError
from pairs.events.bus import (
    EVENT_CARD_CLICK,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_RESTART_REQUEST,
)
from pairs.systems.input import KEY_R, InputSystem
from pairs.ui.layout import compute_board_geometry, restart_button_rect
from tests.helpers import layout_board, make_session, record_events


class DummyWindow:
    def __init__(self):
        self.width = 800
        self.height = 600


def _setup(tmp_path):
    session = make_session(tmp_path)
    layout_board(session, ["B", "A", "A", "B"])
    window = DummyWindow()
    InputSystem(session.event_bus, window, session.world)
    return session, window


def test_click_on_card_emits_card_index(tmp_path):
    session, window = _setup(tmp_path)
    clicks = record_events(session.event_bus, EVENT_CARD_CLICK)
    geometry = compute_board_geometry(window.width, window.height, 2, 4)

    for index in range(4):
        x, y = geometry.card_center(index)
        session.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)

    assert [event["index"] for event in clicks] == [0, 1, 2, 3]


def test_top_row_comes_first(tmp_path):
    _, window = _setup(tmp_path)
    geometry = compute_board_geometry(window.width, window.height, 2, 4)
    (_, y0), (_, y2) = geometry.card_center(0), geometry.card_center(2)
    assert y0 > y2


def test_clicks_outside_cards_are_ignored(tmp_path):
    session, window = _setup(tmp_path)
    clicks = record_events(session.event_bus, EVENT_CARD_CLICK)
    geometry = compute_board_geometry(window.width, window.height, 2, 4)

    session.event_bus.emit(EVENT_MOUSE_PRESS, x=5, y=5, button=1)
    # Gutter between the two columns.
    gutter_x = geometry.left + geometry.card_size + geometry.gap / 2
    _, y = geometry.card_center(0)
    session.event_bus.emit(EVENT_MOUSE_PRESS, x=gutter_x, y=y, button=1)
    # Right button on a card.
    x, y = geometry.card_center(0)
    session.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)

    assert clicks == []


def test_restart_button_and_key_request_restart(tmp_path):
    session, window = _setup(tmp_path)
    restarts = record_events(session.event_bus, EVENT_RESTART_REQUEST)
    left, bottom, width, height = restart_button_rect(window.width, window.height)

    session.event_bus.emit(EVENT_MOUSE_PRESS, x=left + width / 2, y=bottom + height / 2, button=1)
    session.event_bus.emit(EVENT_KEY_PRESS, symbol=KEY_R, modifiers=0)
    session.event_bus.emit(EVENT_KEY_PRESS, symbol=KEY_R + 1, modifiers=0)

    assert len(restarts) == 2


def test_partial_last_row_has_no_phantom_cards():
    geometry = compute_board_geometry(800, 600, 4, 6)
    assert geometry.rows == 2
    x, y = geometry.card_center(7)
    assert geometry.index_at(x, y, 6) is None
    x, y = geometry.card_center(5)
    assert geometry.index_at(x, y, 6) == 5


def test_layout_rejects_non_positive_columns():
    with pytest.raises(LayoutConfigError):
        compute_board_geometry(800, 600, 0, 4)
