import logging
from typing import List

from esper import World

from pairs.components.selection_state import SelectionPhase
from pairs.events.bus import EventBus, EVENT_BOARD_READY, EVENT_BOARD_CLEARED
from pairs.errors import UnknownSymbolError
from pairs.persistence.snapshot import BoardSnapshot
from pairs.systems.board_ops import (
    build_pair_deck,
    cancel_pending_evaluations,
    get_board,
    get_selection,
    get_symbol_registry,
    shuffle_in_place,
    spawn_card,
)

logger = logging.getLogger(__name__)


class BoardSystem:
    """Builds, restores and clears the card layout owned by the Board singleton."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def new_board(self) -> List[str]:
        """Lay out a freshly shuffled face-down deck; returns the symbol order."""
        registry = get_symbol_registry(self.world)
        deck = build_pair_deck(registry.keys())
        shuffle_in_place(deck, self.world.random)
        self.clear_board()
        board = get_board(self.world)
        board.cards = [spawn_card(self.world, index, symbol_id) for index, symbol_id in enumerate(deck)]
        board.match_count = 0
        board.mismatch_count = 0
        get_selection(self.world).clear()
        logger.info("New board with %d cards (generation %d)", len(deck), board.generation)
        self.event_bus.emit(EVENT_BOARD_READY, columns=board.columns, card_count=len(deck), restored=False)
        return deck

    def restore_board(self, snapshot: BoardSnapshot) -> None:
        """Rebuild cards and counters from a snapshot without reshuffling.

        Raises UnknownSymbolError before touching the board if any card names a
        symbol the registry does not know.
        """
        registry = get_symbol_registry(self.world)
        for state in snapshot.cards:
            if not registry.has(state.symbol_id):
                raise UnknownSymbolError(state.symbol_id)
        self.clear_board()
        board = get_board(self.world)
        board.cards = [
            spawn_card(self.world, index, state.symbol_id, matched=state.is_matched)
            for index, state in enumerate(snapshot.cards)
        ]
        board.match_count = snapshot.match_count
        board.mismatch_count = snapshot.mismatch_count
        selection = get_selection(self.world)
        # A fully matched save is restored as already won; the win is not signalled again.
        selection.clear(SelectionPhase.WON if board.is_complete else SelectionPhase.IDLE)
        logger.info(
            "Restored board with %d cards, %d matches, %d misses",
            len(board.cards), board.match_count, board.mismatch_count,
        )
        self.event_bus.emit(EVENT_BOARD_READY, columns=board.columns, card_count=len(board.cards), restored=True)

    def clear_board(self) -> None:
        """Destroy every card, drop any pending evaluation and start a new generation."""
        board = get_board(self.world)
        cancelled = cancel_pending_evaluations(self.world)
        if cancelled:
            logger.debug("Cancelled %d pending evaluation(s)", cancelled)
        for entity in board.cards:
            if self.world.entity_exists(entity):
                self.world.delete_entity(entity, immediate=True)
        board.cards = []
        board.generation += 1
        get_selection(self.world).clear()
        self.event_bus.emit(EVENT_BOARD_CLEARED, generation=board.generation)
