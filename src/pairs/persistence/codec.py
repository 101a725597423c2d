"""JSON codec for board snapshots.

Layout of the stored value::

    {"matchCount": int, "NoMatchCount": int,
     "cardStates": [{"spriteName": str, "isMatched": bool}, ...]}
"""
from __future__ import annotations

import json
from typing import Any

from pairs.errors import CorruptSaveError
from pairs.persistence.snapshot import BoardSnapshot, CardState

MATCH_COUNT_FIELD = "matchCount"
MISMATCH_COUNT_FIELD = "NoMatchCount"
CARD_STATES_FIELD = "cardStates"
SPRITE_NAME_FIELD = "spriteName"
IS_MATCHED_FIELD = "isMatched"


def encode_snapshot(snapshot: BoardSnapshot) -> str:
    # Field order is fixed and no whitespace varies, so equal snapshots encode identically.
    payload = {
        MATCH_COUNT_FIELD: snapshot.match_count,
        MISMATCH_COUNT_FIELD: snapshot.mismatch_count,
        CARD_STATES_FIELD: [
            {SPRITE_NAME_FIELD: card.symbol_id, IS_MATCHED_FIELD: card.is_matched}
            for card in snapshot.cards
        ],
    }
    return json.dumps(payload, separators=(",", ":"))


def decode_snapshot(blob: str) -> BoardSnapshot:
    try:
        payload = json.loads(blob)
    except (TypeError, ValueError) as exc:
        raise CorruptSaveError(f"Saved state is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise CorruptSaveError("Saved state must be a JSON object")

    match_count = _require_count(payload, MATCH_COUNT_FIELD)
    mismatch_count = _require_count(payload, MISMATCH_COUNT_FIELD)
    raw_cards = payload.get(CARD_STATES_FIELD)
    if not isinstance(raw_cards, list):
        raise CorruptSaveError(f"'{CARD_STATES_FIELD}' must be a list")

    cards = []
    for position, entry in enumerate(raw_cards):
        if not isinstance(entry, dict):
            raise CorruptSaveError(f"Card state {position} must be an object")
        sprite_name = entry.get(SPRITE_NAME_FIELD)
        is_matched = entry.get(IS_MATCHED_FIELD)
        if not isinstance(sprite_name, str) or not sprite_name:
            raise CorruptSaveError(f"Card state {position} has no '{SPRITE_NAME_FIELD}'")
        if not isinstance(is_matched, bool):
            raise CorruptSaveError(f"Card state {position} has no boolean '{IS_MATCHED_FIELD}'")
        cards.append(CardState(symbol_id=sprite_name, is_matched=is_matched))

    _check_board_shape(match_count, cards)
    return BoardSnapshot(match_count=match_count, mismatch_count=mismatch_count, cards=cards)


def _require_count(payload: dict[str, Any], name: str) -> int:
    value = payload.get(name)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise CorruptSaveError(f"'{name}' must be an integer")
    if value < 0:
        raise CorruptSaveError(f"'{name}' must not be negative")
    return value


def _check_board_shape(match_count: int, cards: list[CardState]) -> None:
    """Reject boards no game could have produced: every symbol appears exactly
    twice, both cards of a pair share a match flag, and matchCount counts the
    matched pairs."""
    if not cards:
        raise CorruptSaveError("Saved board has no cards")
    if len(cards) % 2:
        raise CorruptSaveError(f"Saved board has an odd card count ({len(cards)})")
    if match_count > len(cards) // 2:
        raise CorruptSaveError(f"'{MATCH_COUNT_FIELD}' exceeds the number of pairs on the board")

    flags: dict[str, list[bool]] = {}
    for card in cards:
        flags.setdefault(card.symbol_id, []).append(card.is_matched)
    for symbol_id, matched in flags.items():
        if len(matched) != 2:
            raise CorruptSaveError(f"Symbol '{symbol_id}' appears {len(matched)} times, expected 2")
        if matched[0] != matched[1]:
            raise CorruptSaveError(f"Only one card of pair '{symbol_id}' is matched")

    matched_cards = sum(1 for card in cards if card.is_matched)
    if matched_cards != 2 * match_count:
        raise CorruptSaveError(
            f"'{MATCH_COUNT_FIELD}' is {match_count} but {matched_cards} cards are matched"
        )
