from __future__ import annotations

import random
from pathlib import Path
from typing import Sequence

from pairs.events.bus import EVENT_TICK, EventBus
from pairs.persistence.snapshot import BoardSnapshot, CardState
from pairs.session import GameSession

SYMBOLS_AB = {"A": (200, 0, 0), "B": (0, 0, 200)}
SYMBOLS_ABC = {"A": (200, 0, 0), "B": (0, 0, 200), "C": (0, 200, 0)}


def make_session(tmp_path: Path, symbols=None, *, seed: int = 7, columns: int = 2) -> GameSession:
    """Session with a seeded rng and a save file inside tmp_path."""

    return GameSession(
        symbols=symbols or SYMBOLS_AB,
        columns=columns,
        rng=random.Random(seed),
        save_path=Path(tmp_path) / "prefs.json",
    )


def layout_board(session: GameSession, symbol_order: Sequence[str]) -> None:
    """Place face-down cards in a known order (bypassing the shuffle)."""

    session.board_system.restore_board(
        BoardSnapshot(
            match_count=0,
            mismatch_count=0,
            cards=[CardState(symbol_id=symbol, is_matched=False) for symbol in symbol_order],
        )
    )


def record_events(bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received


def drive_ticks(bus: EventBus, seconds: float = 0.6, step: float = 0.05) -> None:
    elapsed = 0.0
    while elapsed < seconds:
        bus.emit(EVENT_TICK, dt=step)
        elapsed += step
