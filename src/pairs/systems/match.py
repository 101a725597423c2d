import logging

from esper import World

from pairs.components.card import Card
from pairs.components.pending_evaluation import PendingEvaluation
from pairs.components.selection_state import SelectionPhase
from pairs.constants import EVALUATION_DELAY
from pairs.events.bus import (
    EventBus,
    EVENT_TICK,
    EVENT_CARD_CLICK,
    EVENT_RESTART_REQUEST,
    EVENT_CARD_REVEALED,
    EVENT_CARD_HIDDEN,
    EVENT_PAIR_MATCHED,
    EVENT_PAIR_MISSED,
    EVENT_SCORE_CHANGED,
    EVENT_GAME_WON,
    EVENT_GAME_RESTARTED,
)
from pairs.systems.board import BoardSystem
from pairs.systems.board_ops import card_entity_at, card_index, get_board, get_selection

logger = logging.getLogger(__name__)


class MatchSystem:
    """Two-card selection state machine: reveal, delayed comparison, scoring and restart.

    Phases: IDLE -> ONE_SELECTED -> EVALUATING -> IDLE, or WON once every pair
    is found. Selections arriving while EVALUATING or WON are ignored, not queued.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        board_system: BoardSystem,
        *,
        evaluation_delay: float = EVALUATION_DELAY,
    ):
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.evaluation_delay = evaluation_delay
        self.event_bus.subscribe(EVENT_CARD_CLICK, self.on_card_click)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self.on_restart_request)

    # Event handlers -----------------------------------------------------

    def on_card_click(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is None:
            return
        self.select_card(int(index))

    def on_restart_request(self, sender, **kwargs):
        self.restart_game()

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        due: list[tuple[int, PendingEvaluation]] = []
        for entity, pending in self.world.get_component(PendingEvaluation):
            pending.remaining -= dt
            if pending.remaining <= 0.0:
                due.append((entity, pending))
        for entity, pending in due:
            if self.world.entity_exists(entity):
                self.world.delete_entity(entity, immediate=True)
            self._resolve(pending)

    # Operations ---------------------------------------------------------

    def select_card(self, index: int) -> bool:
        """Reveal the card at index if the current phase allows it.

        Returns False (and changes nothing) for out-of-range indices, matched
        cards, the already selected first card, and any click while a pair is
        being evaluated or the game is won.
        """
        selection = get_selection(self.world)
        if not selection.accepts_selection:
            return False
        entity = card_entity_at(self.world, index)
        if entity is None or entity == selection.first:
            return False
        card = self.world.component_for_entity(entity, Card)
        if card.is_matched:
            return False

        card.is_face_up = True
        self.event_bus.emit(EVENT_CARD_REVEALED, index=index, symbol_id=card.symbol_id)

        if selection.phase == SelectionPhase.IDLE:
            selection.first = entity
            selection.phase = SelectionPhase.ONE_SELECTED
        else:
            selection.second = entity
            selection.phase = SelectionPhase.EVALUATING
            self._schedule_evaluation(selection.first, entity)
        return True

    def evaluate(self) -> None:
        """Judge the selected pair immediately, skipping the reveal delay."""
        selection = get_selection(self.world)
        if selection.phase != SelectionPhase.EVALUATING:
            return
        for entity, pending in list(self.world.get_component(PendingEvaluation)):
            self.world.delete_entity(entity, immediate=True)
            self._resolve(pending)
            return

    def restart_game(self) -> None:
        """Drop the save, reshuffle a fresh board and return to IDLE from any phase."""
        board = get_board(self.world)
        logger.info("Restarting game (generation %d)", board.generation)
        self.event_bus.emit(EVENT_GAME_RESTARTED, generation=board.generation)
        self.board_system.new_board()
        self.emit_score()

    def emit_score(self) -> None:
        board = get_board(self.world)
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            match_count=board.match_count,
            total_attempts=board.total_attempts,
        )

    # Internals ----------------------------------------------------------

    def _schedule_evaluation(self, first: int, second: int) -> None:
        board = get_board(self.world)
        self.world.create_entity(
            PendingEvaluation(
                first=first,
                second=second,
                generation=board.generation,
                remaining=self.evaluation_delay,
            )
        )

    def _resolve(self, pending: PendingEvaluation) -> None:
        board = get_board(self.world)
        selection = get_selection(self.world)
        if pending.generation != board.generation:
            logger.debug("Dropping stale evaluation from generation %d", pending.generation)
            return
        if selection.first != pending.first or selection.second != pending.second:
            return
        first_card = self.world.component_for_entity(pending.first, Card)
        second_card = self.world.component_for_entity(pending.second, Card)
        indices = (card_index(self.world, pending.first), card_index(self.world, pending.second))

        matched = first_card.symbol_id == second_card.symbol_id
        if matched:
            first_card.is_matched = second_card.is_matched = True
            first_card.is_face_up = second_card.is_face_up = True
            board.match_count += 1
        else:
            first_card.is_face_up = second_card.is_face_up = False
            board.mismatch_count += 1
        won = matched and board.match_count == board.total_pairs
        # The turn is settled before any listener runs.
        selection.clear(SelectionPhase.WON if won else SelectionPhase.IDLE)

        if matched:
            self.event_bus.emit(EVENT_PAIR_MATCHED, indices=indices, symbol_id=first_card.symbol_id)
        else:
            for index in indices:
                self.event_bus.emit(EVENT_CARD_HIDDEN, index=index)
            self.event_bus.emit(EVENT_PAIR_MISSED, indices=indices)
        if won:
            logger.info("Board cleared after %d attempts", board.total_attempts)
            self.event_bus.emit(
                EVENT_GAME_WON,
                match_count=board.match_count,
                mismatch_count=board.mismatch_count,
            )
        self.emit_score()
