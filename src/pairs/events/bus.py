from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"            # payload: x, y, button
EVENT_KEY_PRESS = "key_press"                # payload: symbol, modifiers
EVENT_CARD_CLICK = "card_click"              # payload: index=int
EVENT_RESTART_REQUEST = "restart_request"    # payload: None


# ============================================================================
# BOARD LIFECYCLE
# ============================================================================
EVENT_BOARD_READY = "board_ready"            # payload: columns=int, card_count=int, restored=bool
EVENT_BOARD_CLEARED = "board_cleared"        # payload: generation=int
EVENT_GAME_RESTARTED = "game_restarted"      # payload: generation=int


# ============================================================================
# CARDS & MATCHING
# ============================================================================
EVENT_CARD_REVEALED = "card_revealed"        # payload: index=int, symbol_id=str
EVENT_CARD_HIDDEN = "card_hidden"            # payload: index=int
EVENT_PAIR_MATCHED = "pair_matched"          # payload: indices=(int,int), symbol_id=str
EVENT_PAIR_MISSED = "pair_missed"            # payload: indices=(int,int)


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"        # payload: match_count=int, total_attempts=int
EVENT_GAME_WON = "game_won"                  # payload: match_count=int, mismatch_count=int


# ============================================================================
# PERSISTENCE
# ============================================================================
EVENT_GAME_SAVED = "game_saved"              # payload: key=str
EVENT_SAVE_RESET = "save_reset"              # payload: key=str
