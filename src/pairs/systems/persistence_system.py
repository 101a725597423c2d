from __future__ import annotations

import logging
from pathlib import Path

from esper import World

from pairs.constants import SAVE_KEY
from pairs.events.bus import (
    EVENT_GAME_RESTARTED,
    EVENT_GAME_SAVED,
    EVENT_PAIR_MATCHED,
    EVENT_SAVE_RESET,
    EventBus,
)
from pairs.persistence.codec import decode_snapshot, encode_snapshot
from pairs.persistence.snapshot import BoardSnapshot, snapshot_board
from pairs.persistence.store import PrefsStore

logger = logging.getLogger(__name__)


class PersistenceSystem:
    """Saves the board after every match and clears the save on restart."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        save_path: Path | None = None,
        store: PrefsStore | None = None,
        key: str = SAVE_KEY,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        if store is None:
            store = PrefsStore(Path(save_path) if save_path is not None else self._default_save_path())
        self._store = store
        self._key = key

        self.event_bus.subscribe(EVENT_PAIR_MATCHED, self._on_pair_matched)
        self.event_bus.subscribe(EVENT_GAME_RESTARTED, self._on_game_restarted)

    @staticmethod
    def _default_save_path() -> Path:
        return Path(__file__).resolve().parents[3] / "data" / "prefs.json"

    @property
    def store(self) -> PrefsStore:
        return self._store

    def has_save(self) -> bool:
        return self._store.has(self._key)

    def save(self) -> str:
        blob = encode_snapshot(snapshot_board(self.world))
        self._store.set(self._key, blob)
        logger.info("Game saved")
        self.event_bus.emit(EVENT_GAME_SAVED, key=self._key)
        return blob

    def load(self) -> BoardSnapshot | None:
        """Return the saved snapshot, None when nothing is saved.

        Raises CorruptSaveError when the stored value cannot be decoded.
        """
        blob = self._store.get(self._key)
        if blob is None:
            logger.info("No saved game found")
            return None
        snapshot = decode_snapshot(blob)
        logger.info("Game loaded")
        return snapshot

    def reset(self) -> None:
        self._store.delete(self._key)
        logger.info("Save data reset")
        self.event_bus.emit(EVENT_SAVE_RESET, key=self._key)

    # Event handlers -----------------------------------------------------

    def _on_pair_matched(self, sender, **payload) -> None:
        try:
            self.save()
        except OSError as exc:
            logger.warning("Autosave failed, keeping the game running: %s", exc)

    def _on_game_restarted(self, sender, **payload) -> None:
        self.reset()
