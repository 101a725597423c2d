from __future__ import annotations

import random
from typing import Iterable, List, MutableSequence, Tuple, TypeVar

from esper import World

from pairs.components.board import Board
from pairs.components.card import Card, CardSlot
from pairs.components.pending_evaluation import PendingEvaluation
from pairs.components.selection_state import SelectionState
from pairs.components.symbol_registry import SymbolRegistry
from pairs.components.symbol_set import SymbolSet

T = TypeVar("T")


def get_symbol_registry(world: World) -> SymbolSet:
    for entity, _ in world.get_component(SymbolRegistry):
        return world.component_for_entity(entity, SymbolSet)
    raise RuntimeError("SymbolSet definitions not found")


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_selection(world: World) -> SelectionState:
    for _, selection in world.get_component(SelectionState):
        return selection
    raise RuntimeError("SelectionState component not found")


def build_pair_deck(symbol_ids: Iterable[str]) -> List[str]:
    """Return a deck holding every symbol exactly twice, in input order."""
    deck: List[str] = []
    for symbol_id in symbol_ids:
        deck.append(symbol_id)
        deck.append(symbol_id)
    return deck


def shuffle_in_place(items: MutableSequence[T], rng: random.Random) -> None:
    """Fisher-Yates: swap each position i with a uniform pick from [i, n-1]."""
    n = len(items)
    for i in range(n):
        j = rng.randrange(i, n)
        items[i], items[j] = items[j], items[i]


def card_entity_at(world: World, index: int) -> int | None:
    board = get_board(world)
    if index < 0 or index >= len(board.cards):
        return None
    return board.cards[index]


def card_index(world: World, entity: int) -> int:
    return world.component_for_entity(entity, CardSlot).index


def iter_cards(world: World) -> Iterable[Tuple[int, int, Card]]:
    """Yield (index, entity, card) in board order."""
    board = get_board(world)
    for index, entity in enumerate(board.cards):
        yield index, entity, world.component_for_entity(entity, Card)


def spawn_card(world: World, index: int, symbol_id: str, *, matched: bool = False) -> int:
    return world.create_entity(
        Card(symbol_id=symbol_id, is_matched=matched, is_face_up=matched),
        CardSlot(index=index),
    )


def cancel_pending_evaluations(world: World) -> int:
    stale = [entity for entity, _ in world.get_component(PendingEvaluation)]
    for entity in stale:
        world.delete_entity(entity, immediate=True)
    return len(stale)
