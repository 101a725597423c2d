from pairs.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_KEY_PRESS,
    EVENT_CARD_CLICK,
    EVENT_RESTART_REQUEST,
)
from pairs.systems.board_ops import get_board
from pairs.ui.layout import compute_board_geometry, point_in_rect, restart_button_rect

# arcade.key.R; kept numeric to avoid importing arcade in headless tests.
KEY_R = 114


class InputSystem:
    """Translates window mouse/key presses into card clicks and restart requests."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Left button (1) only.
        if button != 1:
            return
        if point_in_rect(x, y, restart_button_rect(self.window.width, self.window.height)):
            self.event_bus.emit(EVENT_RESTART_REQUEST)
            return
        board = get_board(self.world)
        if not board.cards:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, board.columns, board.card_count)
        index = geometry.index_at(x, y, board.card_count)
        if index is not None:
            self.event_bus.emit(EVENT_CARD_CLICK, index=index)

    def on_key_press(self, sender, **kwargs):
        if kwargs.get('symbol') == KEY_R:
            self.event_bus.emit(EVENT_RESTART_REQUEST)
